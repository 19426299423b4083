"""Win conditions for games and sets.

These are the only places where tennis rules are encoded; the mode handlers
and the display helpers both defer to them.
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

from typing import Optional

from courtside.constants import (
    GAMES_TO_WIN_SET,
    MIN_LEAD_TO_WIN,
    POINTS_TO_WIN_GAME,
    TIE_BREAK_GAMES,
    TIE_BREAK_SET_GAMES,
)
from courtside.models.enums import GameState, Side


def get_game_state(points_a: int, points_b: int) -> GameState:
    """Classify the game in progress.

    Once both sides have reached 40 (three points) the game is in deuce
    territory: level is Deuce, a one-point lead is Advantage. A lead of two
    or more there means the game is already won, which the caller detects
    with :func:`is_game_won`; it is reported as in progress here.
    """
    if points_a >= 3 and points_b >= 3:
        diff = points_a - points_b
        if diff == 0:
            return GameState.DEUCE
        if diff == 1:
            return GameState.ADVANTAGE_A
        if diff == -1:
            return GameState.ADVANTAGE_B
    return GameState.IN_PROGRESS


def is_game_won(points_a: int, points_b: int) -> Optional[Side]:
    """Return the side that has won the game, or None while it is in progress.

    A side wins with at least four points and a two-point lead. The rule is
    the same in both match modes.
    """
    if points_a >= POINTS_TO_WIN_GAME and points_a - points_b >= MIN_LEAD_TO_WIN:
        return Side.A
    if points_b >= POINTS_TO_WIN_GAME and points_b - points_a >= MIN_LEAD_TO_WIN:
        return Side.B
    return None


def is_set_won(games_a: int, games_b: int) -> Optional[Side]:
    """Return the side that has won the set (standard mode), or None.

    A set is won with six games and a two-game lead, or 7-6 after a
    tie-break.
    """
    if games_a >= GAMES_TO_WIN_SET and games_a - games_b >= MIN_LEAD_TO_WIN:
        return Side.A
    if games_b >= GAMES_TO_WIN_SET and games_b - games_a >= MIN_LEAD_TO_WIN:
        return Side.B

    if games_a == TIE_BREAK_SET_GAMES and games_b == TIE_BREAK_GAMES:
        return Side.A
    if games_b == TIE_BREAK_SET_GAMES and games_a == TIE_BREAK_GAMES:
        return Side.B
    return None


def is_tie_break(games_a: int, games_b: int) -> bool:
    """Whether the next game decides the set as a tie-break (6-6)."""
    return games_a == TIE_BREAK_GAMES and games_b == TIE_BREAK_GAMES
