"""Tennis scoring state machine.

The engine converts a stream of point winners into game, set and match
progression. Every function is pure: it returns a new MatchState and never
modifies the one it was given, so a rejected point leaves the caller's state
exactly as it was. The engine knows nothing about tournaments.
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

from dataclasses import replace
from typing import Any, Mapping, Optional, Sequence, Union

from courtside.constants import SHORT_FORMAT_SERVER_COUNT
from courtside.controllers.scoring.rules import is_game_won
from courtside.controllers.scoring.short_format import handle_short_format_game_won
from courtside.controllers.scoring.standard import handle_standard_game_won
from courtside.exceptions import (
    InvalidMatchConfigurationException,
    InvalidSideException,
    MatchCompletedException,
)
from courtside.models.enums import MatchMode, Side
from courtside.models.scoring import CurrentGame, MatchState, TeamPlayers
from courtside.type_hints import ModeLiteral, SideLiteral
from courtside.utils import setup_logger

logger = setup_logger(__name__)


def new_match_state(
    mode: Union[MatchMode, ModeLiteral],
    players: Union[TeamPlayers, Mapping[str, Any]],
    servers: Optional[Sequence[str]] = None,
) -> MatchState:
    """Create a match at game 1, 0-0, set 1.

    Args:
        mode: Standard or short-format scoring
        players: Player ids per side, as TeamPlayers or a
            ``{"team_a": [...], "team_b": [...]}`` mapping
        servers: Short-format only, exactly three server ids in game order.
            Standard matches take no servers.

    Returns:
        A fresh MatchState

    Raises:
        InvalidMatchConfigurationException: If the mode is unknown, a side has
            no players, or the servers do not fit the mode
    """
    try:
        mode = MatchMode(mode)
    except ValueError:
        raise InvalidMatchConfigurationException(
            f"invalid match mode: {mode}"
        ) from None

    if not isinstance(players, TeamPlayers):
        players = TeamPlayers.from_dict(players)

    if not players.team_a or not players.team_b:
        raise InvalidMatchConfigurationException(
            "both teams must have at least one player"
        )

    if mode is MatchMode.SHORT_FORMAT:
        if servers is None or len(servers) != SHORT_FORMAT_SERVER_COUNT:
            raise InvalidMatchConfigurationException(
                f"short-format mode requires exactly {SHORT_FORMAT_SERVER_COUNT} servers"
            )
        servers = tuple(servers)
    else:
        if servers:
            raise InvalidMatchConfigurationException(
                "standard mode must not specify servers"
            )
        servers = None

    state = MatchState(
        mode=mode,
        players=players,
        servers=servers,
        current_game=CurrentGame(points_a=0, points_b=0, game_number=1, server_index=0),
    )
    logger.debug(
        f"New {mode.value} match: {list(players.team_a)} vs {list(players.team_b)}"
    )
    return state


def score_point(state: MatchState, side: Union[Side, SideLiteral]) -> MatchState:
    """Award a point to ``side`` and return the resulting state.

    The point is added to the current game; if that wins the game, the
    mode-specific handler moves the match on (next game, next set, or match
    over).

    Args:
        state: Current match state
        side: Side that won the point

    Returns:
        New match state

    Raises:
        MatchCompletedException: If the match is already over
        InvalidSideException: If ``side`` is not A or B
    """
    if state.completed:
        logger.warning("Rejected point: match is already completed")
        raise MatchCompletedException("cannot score point: match is already completed")

    try:
        side = Side(side)
    except ValueError:
        raise InvalidSideException(f"invalid team: {side}") from None

    game = state.current_game
    if side is Side.A:
        game = replace(game, points_a=game.points_a + 1)
    else:
        game = replace(game, points_b=game.points_b + 1)
    new_state = replace(state, current_game=game)

    game_winner = is_game_won(game.points_a, game.points_b)
    if game_winner is None:
        return new_state

    logger.debug(
        f"Game {game.game_number} to {game_winner.value} "
        f"({game.points_a}-{game.points_b} in points)"
    )
    if new_state.mode is MatchMode.SHORT_FORMAT:
        new_state = handle_short_format_game_won(new_state, game_winner)
    else:
        new_state = handle_standard_game_won(new_state, game_winner)

    if new_state.completed:
        logger.info(f"Match won by side {new_state.winner.value}")
    return new_state


def is_match_complete(state: MatchState) -> bool:
    return state.completed


def get_winner(state: MatchState) -> Optional[Side]:
    """Winning side if the match is complete, None otherwise."""
    if state.completed:
        return state.winner
    return None
