"""Value types of the tournament engine."""

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

from courtside.models.tournament.match import Match
from courtside.models.tournament.match_result import MatchResult
from courtside.models.tournament.standing import TeamStanding
from courtside.models.tournament.team import Team
from courtside.models.tournament.tournament_state import TournamentState

__all__ = [
    "Match",
    "MatchResult",
    "Team",
    "TeamStanding",
    "TournamentState",
]
