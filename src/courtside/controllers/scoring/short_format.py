"""Short-format scoring: points -> games -> match.

Rules:
    - At most three games; first side to two games wins
    - A side winning games 1 and 2 ends the match, game 3 is never played
    - Fixed serving order: game N is served by servers[N - 1], regardless
      of who won earlier games
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

from courtside.constants import SHORT_FORMAT_GAMES, SHORT_FORMAT_GAMES_TO_WIN
from courtside.exceptions import ServerRotationException
from courtside.models.enums import MatchMode, Side
from courtside.models.scoring import MatchState
from courtside.utils import setup_logger

logger = setup_logger(__name__)


def handle_short_format_game_won(state: MatchState, winner: Side) -> MatchState:
    """Apply a game won by ``winner`` in short-format mode.

    Raises:
        ServerRotationException: If the match would need a fourth game or a
            server beyond the third, which only a corrupted state can reach
    """
    games_a = state.games_a + (1 if winner is Side.A else 0)
    games_b = state.games_b + (1 if winner is Side.B else 0)
    state = replace(state, games_a=games_a, games_b=games_b)

    if games_a >= SHORT_FORMAT_GAMES_TO_WIN or games_b >= SHORT_FORMAT_GAMES_TO_WIN:
        return replace(state, winner=winner, completed=True)

    return _advance_to_next_game(state)


def _advance_to_next_game(state: MatchState) -> MatchState:
    game = state.current_game
    next_number = game.game_number + 1
    next_server = game.server_index + 1

    server_count = len(state.servers or ())
    if next_number > SHORT_FORMAT_GAMES or next_server >= server_count:
        logger.error(
            f"Short-format match cannot advance to game {next_number} "
            f"(server index {next_server} of {server_count})"
        )
        raise ServerRotationException(
            f"short-format match has no game {next_number}: "
            f"games stand at {state.games_a}-{state.games_b}"
        )

    return replace(
        state,
        current_game=replace(
            game,
            points_a=0,
            points_b=0,
            game_number=next_number,
            server_index=next_server,
        ),
    )


def get_current_server(state: MatchState) -> str:
    """Return the current server id in short-format, or "" otherwise."""
    if state.mode is not MatchMode.SHORT_FORMAT or not state.servers:
        return ""
    index = state.current_game.server_index
    if not 0 <= index < len(state.servers):
        return ""
    return state.servers[index]
