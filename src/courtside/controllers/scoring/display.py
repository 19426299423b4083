"""Conversion of scoring state into tennis notation."""

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

from courtside.constants import (
    ADVANTAGE_TEXT,
    DEUCE_TEXT,
    POINT_NAMES,
    SHORT_FORMAT_GAMES,
)
from courtside.controllers.scoring.rules import get_game_state, is_tie_break
from courtside.controllers.scoring.short_format import get_current_server
from courtside.exceptions import InvalidPointCountException
from courtside.models.enums import GameState, MatchMode
from courtside.models.scoring import MatchDisplay, MatchState, PointDisplay, ScoreCount


def get_point_display(points: int) -> str:
    """Map a raw point count to "0", "15", "30" or "40".

    Points never display beyond 40.

    Raises:
        InvalidPointCountException: If ``points`` is negative
    """
    if points < 0:
        raise InvalidPointCountException(f"point count cannot be negative: {points}")
    return POINT_NAMES[min(points, len(POINT_NAMES) - 1)]


def get_game_display_text(points_a: int, points_b: int) -> PointDisplay:
    """Tennis notation for both sides of the game in progress."""
    state = get_game_state(points_a, points_b)

    if state is GameState.DEUCE:
        return PointDisplay(a=DEUCE_TEXT, b=DEUCE_TEXT)
    if state is GameState.ADVANTAGE_A:
        return PointDisplay(a=ADVANTAGE_TEXT, b=POINT_NAMES[-1])
    if state is GameState.ADVANTAGE_B:
        return PointDisplay(a=POINT_NAMES[-1], b=ADVANTAGE_TEXT)

    return PointDisplay(a=get_point_display(points_a), b=get_point_display(points_b))


def get_match_display(state: MatchState) -> MatchDisplay:
    """Build the scoreboard view of ``state``.

    This is the interface for UI rendering; raw point counts never leave the
    engine except through here as notation.
    """
    points = get_game_display_text(
        state.current_game.points_a, state.current_game.points_b
    )
    games = ScoreCount(a=state.games_a, b=state.games_b)

    if state.mode is MatchMode.SHORT_FORMAT:
        return MatchDisplay(
            points=points,
            games=games,
            sets=None,
            current_set=0,
            game_number=state.current_game.game_number,
            total_games=SHORT_FORMAT_GAMES,
            server=get_current_server(state) or None,
            is_tie_break=False,
        )

    return MatchDisplay(
        points=points,
        games=games,
        sets=ScoreCount(a=state.sets_a, b=state.sets_b),
        current_set=state.current_set,
        game_number=state.current_game.game_number,
        total_games=0,
        server=None,
        is_tie_break=is_tie_break(state.games_a, state.games_b),
    )
