"""Standard tennis scoring: points -> games -> sets -> match.

Rules:
    - Set win: six games with a two-game lead, or 7-6 after a tie-break
    - Tie-break: played at 6-6; only its 7-6 outcome is modelled
    - Match win: best of three sets
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
from typing import Tuple

from courtside.constants import SETS_TO_WIN_MATCH
from courtside.controllers.scoring.rules import is_set_won
from courtside.models.enums import MatchMode, Side
from courtside.models.scoring import CurrentGame, MatchState
from courtside.utils import setup_logger

logger = setup_logger(__name__)


def handle_standard_game_won(state: MatchState, winner: Side) -> MatchState:
    """Apply a game won by ``winner`` in standard mode.

    Adds the game to the current set and either closes the set or starts the
    next game of the same set.
    """
    games_a = state.games_a + (1 if winner is Side.A else 0)
    games_b = state.games_b + (1 if winner is Side.B else 0)
    state = replace(state, games_a=games_a, games_b=games_b)

    set_winner = is_set_won(games_a, games_b)
    if set_winner is not None:
        return _handle_set_won(state, set_winner)

    return _start_next_game_in_set(state)


def _handle_set_won(state: MatchState, winner: Side) -> MatchState:
    sets_a = state.sets_a + (1 if winner is Side.A else 0)
    sets_b = state.sets_b + (1 if winner is Side.B else 0)
    logger.debug(
        f"Set {state.current_set} to {winner.value} "
        f"({state.games_a}-{state.games_b}), sets {sets_a}-{sets_b}"
    )

    if sets_a >= SETS_TO_WIN_MATCH or sets_b >= SETS_TO_WIN_MATCH:
        return replace(
            state, sets_a=sets_a, sets_b=sets_b, winner=winner, completed=True
        )

    return _start_new_set(replace(state, sets_a=sets_a, sets_b=sets_b))


def _start_new_set(state: MatchState) -> MatchState:
    return replace(
        state,
        current_set=state.current_set + 1,
        games_a=0,
        games_b=0,
        current_game=CurrentGame(
            points_a=0,
            points_b=0,
            game_number=1,
            server_index=state.current_game.server_index,
        ),
    )


def _start_next_game_in_set(state: MatchState) -> MatchState:
    # Server rotation in standard mode belongs to the event layer, not here
    return replace(
        state,
        current_game=replace(
            state.current_game,
            points_a=0,
            points_b=0,
            game_number=state.games_a + state.games_b + 1,
        ),
    )


def get_set_score(state: MatchState) -> Tuple[int, int, int, int]:
    """Return (sets_a, sets_b, games_a, games_b) for a standard match.

    A short-format match has no sets and reports all zeros.
    """
    if state.mode is not MatchMode.STANDARD:
        return 0, 0, 0, 0
    return state.sets_a, state.sets_b, state.games_a, state.games_b
