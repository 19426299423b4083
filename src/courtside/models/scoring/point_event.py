"""Recorded point events and the match summary built from them."""

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
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from dateutil import parser as date_parser

from courtside.exceptions import InvalidPointEventException
from courtside.models.enums import ServeType, Side
from courtside.models.scoring.match_state import MatchState


@dataclass(frozen=True)
class PointEvent:
    """A single point as recorded courtside.

    Attributes
    ----------
    timestamp : datetime
        When the point finished. Events are replayed in ascending order.
    server_player_id : str
        Player who served the point.
    serve_type : ServeType
        Whether the point started on a first or second serve, or was lost to
        a double fault.
    point_winner : Side
        Side that won the point.
    id : str or None
        Identifier assigned by the event store, if any.
    """

    timestamp: datetime
    server_player_id: str
    serve_type: ServeType
    point_winner: Side
    id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize point event to dictionary."""
        return {
            "id": self.id,
            "timestamp": self.timestamp.isoformat(),
            "server_player_id": self.server_player_id,
            "serve_type": self.serve_type.value,
            "point_winner_team": self.point_winner.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PointEvent":
        """Deserialize point event from dictionary.

        Timestamps may be datetime objects or ISO-8601 strings.

        Raises:
            InvalidPointEventException: If a field is missing or holds an
                unknown serve type, side or timestamp
        """
        try:
            timestamp = data["timestamp"]
            if isinstance(timestamp, str):
                timestamp = date_parser.isoparse(timestamp)
            return cls(
                timestamp=timestamp,
                server_player_id=data["server_player_id"],
                serve_type=ServeType(data["serve_type"]),
                point_winner=Side(
                    data.get("point_winner_team", data.get("point_winner"))
                ),
                id=data.get("id"),
            )
        except (KeyError, ValueError) as e:
            raise InvalidPointEventException(f"invalid point event: {e!r}") from e


@dataclass
class PlayerMatchStats:
    """Serve and point counters for one player across a match."""

    player_id: str
    side: Side
    first_serves_in: int = 0
    first_serves_total: int = 0
    first_serve_won: int = 0
    second_serves_in: int = 0
    second_serves_total: int = 0
    second_serve_won: int = 0
    double_faults: int = 0
    total_points_won: int = 0

    @property
    def first_serve_percentage(self) -> float:
        """Share of first serves that landed in, 0.0 with no serves."""
        if not self.first_serves_total:
            return 0.0
        return 100.0 * self.first_serves_in / self.first_serves_total

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player stats to dictionary."""
        return {
            "player_id": self.player_id,
            "team": self.side.value,
            "first_serves_in": self.first_serves_in,
            "first_serves_total": self.first_serves_total,
            "first_serve_won": self.first_serve_won,
            "second_serves_in": self.second_serves_in,
            "second_serves_total": self.second_serves_total,
            "second_serve_won": self.second_serve_won,
            "double_faults": self.double_faults,
            "total_points_won": self.total_points_won,
        }


@dataclass(frozen=True)
class MatchSummary:
    """Result of replaying a match's point events.

    games_a/games_b count every game won across the whole match,
    unlike MatchState.games_a which resets with each standard set.
    """

    final_state: MatchState
    points_a: int
    points_b: int
    games_a: int
    games_b: int
    sets_a: int
    sets_b: int
    event_count: int
    player_stats: Tuple[PlayerMatchStats, ...] = field(default_factory=tuple)

    @property
    def winner(self) -> Optional[Side]:
        return self.final_state.winner

    def stats_for(self, player_id: str) -> Optional[PlayerMatchStats]:
        """Stats for player_id, or None if the player is not in the match."""
        for stats in self.player_stats:
            if stats.player_id == player_id:
                return stats
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize summary to dictionary."""
        stats: List[Dict[str, Any]] = [s.to_dict() for s in self.player_stats]
        return {
            "state": self.final_state.to_dict(),
            "team_a_score": self.points_a,
            "team_b_score": self.points_b,
            "games_a": self.games_a,
            "games_b": self.games_b,
            "sets_a": self.sets_a,
            "sets_b": self.sets_b,
            "event_count": self.event_count,
            "player_stats": stats,
        }
