"""Match result data class."""

# Courtside
# Copyright (C) 2025  Courtside developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a bracket match, the only thing a tournament learns of it.

    Attributes
    ----------
    match_id : str
        ID of the bracket match
    winner_team_id : str
        ID of the winning team
    loser_team_id : str
        ID of the losing team
    """

    match_id: str
    winner_team_id: str
    loser_team_id: str

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "match_id": self.match_id,
            "winner_team_id": self.winner_team_id,
            "loser_team_id": self.loser_team_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        return cls(
            match_id=data["match_id"],
            winner_team_id=data["winner_team_id"],
            loser_team_id=data["loser_team_id"],
        )
