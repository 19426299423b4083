"""TournamentState data class."""

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

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional, Tuple

from dateutil import parser as date_parser

from courtside.models.enums import TournamentStage
from courtside.models.tournament.match import Match
from courtside.models.tournament.standing import TeamStanding
from courtside.models.tournament.team import Team


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TournamentState:
    """Complete state of a doubles tournament.

    Like the scoring state, a tournament snapshot is immutable; the engine
    returns a new snapshot from each transition and leaves the old one
    untouched.

    Attributes
    ----------
    id : str
        Tournament identifier.
    venue_id : str
        Where the tournament is played.
    player_ids : tuple of str
        Registered players, in registration order.
    teams : tuple of Team
        Doubles teams, set once during setup.
    stage : TournamentStage
        Current stage; only ever moves forward.
    round_robin_matches : tuple of Match
        All-pairs fixtures, in play order.
    standings : tuple of TeamStanding
        Round-robin records (ranked once the knockout is seeded).
    knockout_matches : tuple of Match
        Semifinals and final, or a lone final.
    winner : str or None
        Champion team id once the final is recorded.
    completed : bool
        True exactly when winner is set.
    created_at : datetime
        Creation time of the tournament.
    """

    id: str
    venue_id: str
    player_ids: Tuple[str, ...]
    teams: Tuple[Team, ...] = ()
    stage: TournamentStage = TournamentStage.SETUP
    round_robin_matches: Tuple[Match, ...] = ()
    standings: Tuple[TeamStanding, ...] = ()
    knockout_matches: Tuple[Match, ...] = ()
    winner: Optional[str] = None
    completed: bool = False
    created_at: datetime = field(default_factory=_utc_now)

    @property
    def team_count(self) -> int:
        return len(self.teams)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize tournament to dictionary.

        Returns:
            Dictionary containing all tournament data
        """
        return {
            "id": self.id,
            "venue_id": self.venue_id,
            "player_ids": list(self.player_ids),
            "teams": [t.to_dict() for t in self.teams],
            "stage": self.stage.value,
            "round_robin_matches": [m.to_dict() for m in self.round_robin_matches],
            "standings": [s.to_dict() for s in self.standings],
            "knockout_matches": [m.to_dict() for m in self.knockout_matches],
            "winner": self.winner,
            "completed": self.completed,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentState":
        """Deserialize tournament from dictionary.

        Args:
            data: Dictionary produced by to_dict

        Returns:
            Reconstructed TournamentState
        """
        created_at = data.get("created_at")
        if isinstance(created_at, str):
            created_at = date_parser.isoparse(created_at)
        return cls(
            id=data["id"],
            venue_id=data["venue_id"],
            player_ids=tuple(data.get("player_ids", ())),
            teams=tuple(Team.from_dict(t) for t in data.get("teams", ())),
            stage=TournamentStage(data.get("stage", TournamentStage.SETUP.value)),
            round_robin_matches=tuple(
                Match.from_dict(m) for m in data.get("round_robin_matches", ())
            ),
            standings=tuple(
                TeamStanding.from_dict(s) for s in data.get("standings", ())
            ),
            knockout_matches=tuple(
                Match.from_dict(m) for m in data.get("knockout_matches", ())
            ),
            winner=data.get("winner"),
            completed=data.get("completed", False),
            created_at=created_at or _utc_now(),
        )
