"""Team standing data class."""

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
class TeamStanding:
    """Round-robin record of one team.

    Attributes:
        team_id: Team the record belongs to
        rank: 1-based position after ranking, 0 before the first ranking
        played: Matches played
        won: Matches won
        lost: Matches lost
        points: Standings points (one per win)
    """

    team_id: str
    rank: int = 0
    played: int = 0
    won: int = 0
    lost: int = 0
    points: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Serialize standing to dictionary."""
        return {
            "team_id": self.team_id,
            "rank": self.rank,
            "played": self.played,
            "won": self.won,
            "lost": self.lost,
            "points": self.points,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TeamStanding":
        """Deserialize standing from dictionary."""
        return cls(
            team_id=data["team_id"],
            rank=data.get("rank", 0),
            played=data.get("played", 0),
            won=data.get("won", 0),
            lost=data.get("lost", 0),
            points=data.get("points", 0),
        )
