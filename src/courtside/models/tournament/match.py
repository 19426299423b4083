"""Bracket match data class.

A bracket match is a fixture inside a tournament. It is distinct from a
scoring match: the point-by-point session is linked through
``scoring_match_id`` and only its winner ever reaches the tournament.
"""

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
from typing import Any, Dict, Optional

from courtside.models.enums import MatchStage


@dataclass(frozen=True)
class Match:
    """A fixture between two teams.

    Attributes
    ----------
    id : str
        Match identifier.
    tournament_id : str
        Owning tournament.
    team_a_id, team_b_id : str or None
        Competing teams. A Final waiting on its semifinals has both unset.
    stage : MatchStage
        Round-robin, semifinal or final.
    match_order : int
        Sequential order within the stage (semifinals are 1 and 2).
    scoring_match_id : str or None
        Link to an external scoring session.
    winner_team_id : str or None
        Winner once the match is completed.
    completed : bool
        Whether a result has been recorded.
    """

    id: str
    tournament_id: str
    team_a_id: Optional[str]
    team_b_id: Optional[str]
    stage: MatchStage
    match_order: int
    scoring_match_id: Optional[str] = None
    winner_team_id: Optional[str] = None
    completed: bool = False

    @property
    def is_pending(self) -> bool:
        """True while either team slot is still undecided."""
        return self.team_a_id is None or self.team_b_id is None

    def involves(self, team_id: str) -> bool:
        return team_id in (self.team_a_id, self.team_b_id)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "tournament_id": self.tournament_id,
            "team_a_id": self.team_a_id,
            "team_b_id": self.team_b_id,
            "stage": self.stage.value,
            "match_order": self.match_order,
            "scoring_match_id": self.scoring_match_id,
            "winner_team_id": self.winner_team_id,
            "completed": self.completed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            id=data["id"],
            tournament_id=data["tournament_id"],
            team_a_id=data.get("team_a_id"),
            team_b_id=data.get("team_b_id"),
            stage=MatchStage(data["stage"]),
            match_order=data["match_order"],
            scoring_match_id=data.get("scoring_match_id"),
            winner_team_id=data.get("winner_team_id"),
            completed=data.get("completed", False),
        )
