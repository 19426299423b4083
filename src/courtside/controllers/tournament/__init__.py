"""Doubles tournament engine.

Team formation, round-robin scheduling, standings and knockout progression.
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

from courtside.controllers.tournament.engine import (
    advance_to_knockout,
    get_all_matches,
    get_current_rankings,
    get_next_match,
    link_scoring_match,
    new_tournament,
    prepare_final,
    record_match_result,
    set_teams,
)
from courtside.controllers.tournament.knockout import (
    are_semifinals_complete,
    generate_knockout_matches,
    get_semifinal_winners,
    update_final_matchup,
)
from courtside.controllers.tournament.result_recorder import (
    ResultRecorder,
    build_match_result,
    winner_team_for_side,
)
from courtside.controllers.tournament.round_robin import (
    generate_round_robin_matches,
    get_completed_matches,
    get_match_by_id,
    get_matches_by_stage,
    get_pending_matches,
    is_round_robin_complete,
)
from courtside.controllers.tournament.standings import (
    calculate_rankings,
    get_standing_by_team_id,
    get_top_teams,
    initialize_standings,
    is_standings_complete,
    update_standings_with_result,
)
from courtside.controllers.tournament.team_generator import (
    generate_manual_teams,
    generate_random_teams,
    get_team_by_id,
    shuffle_players,
    validate_teams,
)

__all__ = [
    "ResultRecorder",
    "advance_to_knockout",
    "are_semifinals_complete",
    "build_match_result",
    "calculate_rankings",
    "generate_knockout_matches",
    "generate_manual_teams",
    "generate_random_teams",
    "generate_round_robin_matches",
    "get_all_matches",
    "get_completed_matches",
    "get_current_rankings",
    "get_match_by_id",
    "get_matches_by_stage",
    "get_next_match",
    "get_pending_matches",
    "get_semifinal_winners",
    "get_standing_by_team_id",
    "get_team_by_id",
    "get_top_teams",
    "initialize_standings",
    "is_round_robin_complete",
    "is_standings_complete",
    "link_scoring_match",
    "new_tournament",
    "prepare_final",
    "record_match_result",
    "set_teams",
    "shuffle_players",
    "update_final_matchup",
    "update_standings_with_result",
    "validate_teams",
    "winner_team_for_side",
]
