"""Round-robin standings.

A win is worth one point and a loss none; tennis has no draws. Ranking is by
points only, using a stable sort, so teams level on points keep their
previous relative order. No head-to-head or games-difference tie-break is
applied.
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
from typing import Optional, Sequence, Tuple

from courtside.constants import LOSS_POINTS, WIN_POINTS
from courtside.models.tournament import MatchResult, Team, TeamStanding


def initialize_standings(teams: Sequence[Team]) -> Tuple[TeamStanding, ...]:
    """Zeroed standings, one per team, in team order."""
    return tuple(TeamStanding(team_id=team.id) for team in teams)


def update_standings_with_result(
    standings: Sequence[TeamStanding], result: MatchResult
) -> Tuple[TeamStanding, ...]:
    """Fold one result into the standings and return the new standings."""
    updated = []
    for standing in standings:
        if standing.team_id == result.winner_team_id:
            standing = replace(
                standing,
                played=standing.played + 1,
                won=standing.won + 1,
                points=standing.points + WIN_POINTS,
            )
        elif standing.team_id == result.loser_team_id:
            standing = replace(
                standing,
                played=standing.played + 1,
                lost=standing.lost + 1,
                points=standing.points + LOSS_POINTS,
            )
        updated.append(standing)
    return tuple(updated)


def calculate_rankings(standings: Sequence[TeamStanding]) -> Tuple[TeamStanding, ...]:
    """Sort by points descending and assign positional 1-based ranks."""
    ranked = sorted(standings, key=lambda s: s.points, reverse=True)
    return tuple(replace(s, rank=i + 1) for i, s in enumerate(ranked))


def get_standing_by_team_id(
    standings: Sequence[TeamStanding], team_id: str
) -> Optional[TeamStanding]:
    for standing in standings:
        if standing.team_id == team_id:
            return standing
    return None


def get_top_teams(standings: Sequence[TeamStanding], n: int) -> Tuple[TeamStanding, ...]:
    """The ``n`` best-ranked standings (fewer if there are not enough teams)."""
    return calculate_rankings(standings)[: max(0, n)]


def is_standings_complete(standings: Sequence[TeamStanding]) -> bool:
    """True when every team has played every other team once."""
    if not standings:
        return False
    expected = len(standings) - 1
    return all(s.played == expected for s in standings)
