"""Tennis scoring engine.

Converts point outcomes into tennis notation and game/set/match progression
under the standard and short-format rule sets.
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

from courtside.controllers.scoring.display import (
    get_game_display_text,
    get_match_display,
    get_point_display,
)
from courtside.controllers.scoring.engine import (
    get_winner,
    is_match_complete,
    new_match_state,
    score_point,
)
from courtside.controllers.scoring.rules import (
    get_game_state,
    is_game_won,
    is_set_won,
    is_tie_break,
)
from courtside.controllers.scoring.short_format import get_current_server
from courtside.controllers.scoring.standard import get_set_score
from courtside.controllers.scoring.summary import order_events, summarize_match

__all__ = [
    "get_current_server",
    "get_game_display_text",
    "get_game_state",
    "get_match_display",
    "get_point_display",
    "get_set_score",
    "get_winner",
    "is_game_won",
    "is_match_complete",
    "is_set_won",
    "is_tie_break",
    "new_match_state",
    "order_events",
    "score_point",
    "summarize_match",
]
