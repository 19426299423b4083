"""Replay of recorded point events into a match summary.

Point events are persisted as they happen and replayed here in timestamp
order. The replay drives the scoring engine, so the summary always agrees
with what a live scoreboard showed, and collects per-player serve counters
on the way.
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

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from courtside.controllers.scoring.engine import new_match_state, score_point
from courtside.controllers.scoring.rules import is_game_won
from courtside.exceptions import InvalidPointEventException
from courtside.models.enums import MatchMode, ServeType, Side
from courtside.models.scoring import (
    MatchState,
    MatchSummary,
    PlayerMatchStats,
    PointEvent,
    TeamPlayers,
)
from courtside.type_hints import ModeLiteral
from courtside.utils import setup_logger

logger = setup_logger(__name__)


def order_events(events: Iterable[PointEvent]) -> List[PointEvent]:
    """Sort events by ascending timestamp, keeping arrival order for ties.

    Raises:
        InvalidPointEventException: If naive and timezone-aware timestamps
            are mixed and cannot be ordered
    """
    try:
        return sorted(events, key=lambda event: event.timestamp)
    except TypeError as e:
        raise InvalidPointEventException(
            f"point event timestamps cannot be ordered: {e}"
        ) from e


def _record_serve(stats: PlayerMatchStats, event: PointEvent) -> None:
    server_won = stats.side is event.point_winner

    if event.serve_type is ServeType.FIRST:
        stats.first_serves_total += 1
        stats.first_serves_in += 1
        if server_won:
            stats.first_serve_won += 1
    elif event.serve_type is ServeType.SECOND:
        # The first serve was a fault
        stats.first_serves_total += 1
        stats.second_serves_total += 1
        stats.second_serves_in += 1
        if server_won:
            stats.second_serve_won += 1
    else:
        stats.first_serves_total += 1
        stats.second_serves_total += 1
        stats.double_faults += 1


def summarize_match(
    mode: Union[MatchMode, ModeLiteral],
    players: Union[TeamPlayers, Mapping[str, Any]],
    events: Iterable[PointEvent],
    servers: Optional[Sequence[str]] = None,
) -> MatchSummary:
    """Replay ``events`` from a fresh match and summarize the result.

    Args:
        mode: Scoring mode of the recorded match
        players: Player ids per side
        events: Recorded point events, in any order
        servers: Short-format server order

    Returns:
        MatchSummary with the final state, totals and per-player stats

    Raises:
        InvalidMatchConfigurationException: If the match setup is invalid
        InvalidPointEventException: If an event names a server who is not
            playing in the match
        MatchCompletedException: If events continue after the match ended
    """
    state: MatchState = new_match_state(mode, players, servers)

    stats: Dict[str, PlayerMatchStats] = {}
    for side in (Side.A, Side.B):
        for player_id in state.players.for_side(side):
            stats[player_id] = PlayerMatchStats(player_id=player_id, side=side)

    points = {Side.A: 0, Side.B: 0}
    games = {Side.A: 0, Side.B: 0}
    ordered = order_events(events)

    for index, event in enumerate(ordered, start=1):
        server_stats = stats.get(event.server_player_id)
        if server_stats is None:
            raise InvalidPointEventException(
                f"event {index}: server {event.server_player_id} is not in this match"
            )

        winner = Side(event.point_winner)
        game = state.current_game
        next_a = game.points_a + (1 if winner is Side.A else 0)
        next_b = game.points_b + (1 if winner is Side.B else 0)

        state = score_point(state, winner)

        _record_serve(server_stats, event)
        points[winner] += 1
        for player_id in state.players.for_side(winner):
            stats[player_id].total_points_won += 1
        if is_game_won(next_a, next_b) is not None:
            games[winner] += 1

    logger.debug(
        f"Replayed {len(ordered)} events: points {points[Side.A]}-{points[Side.B]}, "
        f"games {games[Side.A]}-{games[Side.B]}"
    )

    return MatchSummary(
        final_state=state,
        points_a=points[Side.A],
        points_b=points[Side.B],
        games_a=games[Side.A],
        games_b=games[Side.B],
        sets_a=state.sets_a,
        sets_b=state.sets_b,
        event_count=len(ordered),
        player_stats=tuple(stats.values()),
    )
