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

# --- Constants ---
SAVE_FILE_EXTENSION = ".json"

# Point notation, indexed by raw point count (3 or more always shows 40)
POINT_NAMES = ("0", "15", "30", "40")
DEUCE_TEXT = "Deuce"
ADVANTAGE_TEXT = "Ad"

# Game rules (identical in both modes)
POINTS_TO_WIN_GAME = 4
MIN_LEAD_TO_WIN = 2

# Standard mode: points -> games -> sets -> match
GAMES_TO_WIN_SET = 6
TIE_BREAK_GAMES = 6  # Tie-break is played at 6-6
TIE_BREAK_SET_GAMES = 7  # A tie-break win closes the set 7-6
SETS_TO_WIN_MATCH = 2

# Short-format mode: points -> games -> match
SHORT_FORMAT_GAMES = 3
SHORT_FORMAT_GAMES_TO_WIN = 2
SHORT_FORMAT_SERVER_COUNT = 3

# Standings points (no draws in tennis)
WIN_POINTS = 1
LOSS_POINTS = 0

# Tournament rules
MIN_TOURNAMENT_PLAYERS = 4
MIN_TOURNAMENT_TEAMS = 2
KNOCKOUT_TEAMS = 4

# Knockout match orders
SEMIFINAL_1_ORDER = 1
SEMIFINAL_2_ORDER = 2
PENDING_FINAL_ORDER = 3
DIRECT_FINAL_ORDER = 1

# Logging
LOG_LEVEL_ENV = "COURTSIDE_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
