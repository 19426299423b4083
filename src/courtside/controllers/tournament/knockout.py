"""Knockout bracket seeding and progression.

Seeding from the final round-robin ranking:
    - 2 or 3 teams: a single Final, rank 1 vs rank 2
    - 4 or more teams: the top four advance; Semifinal 1 is rank 1 vs
      rank 4, Semifinal 2 is rank 2 vs rank 3, and the Final is created
      with both slots pending until the semifinals resolve
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

import uuid
from dataclasses import replace
from typing import Optional, Sequence, Tuple

from courtside.constants import (
    DIRECT_FINAL_ORDER,
    KNOCKOUT_TEAMS,
    MIN_TOURNAMENT_TEAMS,
    PENDING_FINAL_ORDER,
    SEMIFINAL_1_ORDER,
    SEMIFINAL_2_ORDER,
)
from courtside.controllers.tournament.round_robin import get_matches_by_stage
from courtside.controllers.tournament.standings import (
    calculate_rankings,
    is_standings_complete,
)
from courtside.exceptions import BracketException
from courtside.models.enums import MatchStage
from courtside.models.tournament import Match, TeamStanding
from courtside.utils import setup_logger

logger = setup_logger(__name__)


def _knockout_match(
    tournament_id: str,
    stage: MatchStage,
    order: int,
    team_a_id: Optional[str] = None,
    team_b_id: Optional[str] = None,
) -> Match:
    return Match(
        id=str(uuid.uuid4()),
        tournament_id=tournament_id,
        team_a_id=team_a_id,
        team_b_id=team_b_id,
        stage=stage,
        match_order=order,
    )


def generate_knockout_matches(
    tournament_id: str, standings: Sequence[TeamStanding]
) -> Tuple[Match, ...]:
    """Seed the knockout bracket from complete round-robin standings.

    Raises:
        BracketException: If the round robin is not complete or there are
            fewer than two teams
    """
    if len(standings) < MIN_TOURNAMENT_TEAMS:
        raise BracketException(
            f"minimum {MIN_TOURNAMENT_TEAMS} teams required for knockout"
        )
    if not is_standings_complete(standings):
        raise BracketException("cannot generate knockout: round-robin not complete")

    ranked = calculate_rankings(standings)

    if len(ranked) < KNOCKOUT_TEAMS:
        final = _knockout_match(
            tournament_id,
            MatchStage.FINAL,
            DIRECT_FINAL_ORDER,
            ranked[0].team_id,
            ranked[1].team_id,
        )
        logger.info(f"Knockout seeded as a single final ({len(ranked)} teams)")
        return (final,)

    top = ranked[:KNOCKOUT_TEAMS]
    semi_1 = _knockout_match(
        tournament_id,
        MatchStage.SEMIFINAL,
        SEMIFINAL_1_ORDER,
        top[0].team_id,
        top[3].team_id,
    )
    semi_2 = _knockout_match(
        tournament_id,
        MatchStage.SEMIFINAL,
        SEMIFINAL_2_ORDER,
        top[1].team_id,
        top[2].team_id,
    )
    final = _knockout_match(tournament_id, MatchStage.FINAL, PENDING_FINAL_ORDER)
    logger.info(f"Knockout seeded with semifinals ({len(ranked)} teams, top 4 advance)")
    return (semi_1, semi_2, final)


def are_semifinals_complete(matches: Sequence[Match]) -> bool:
    """True when the bracket has exactly two semifinals and both are completed."""
    semis = get_matches_by_stage(matches, MatchStage.SEMIFINAL)
    return len(semis) == 2 and all(m.completed for m in semis)


def get_semifinal_winners(matches: Sequence[Match]) -> Tuple[str, str]:
    """Winners of Semifinal 1 and Semifinal 2, by match order.

    Raises:
        BracketException: If the semifinals are missing, unfinished or a
            winner cannot be determined
    """
    semis = get_matches_by_stage(matches, MatchStage.SEMIFINAL)
    if len(semis) != 2:
        raise BracketException("expected exactly 2 semifinals")

    winners = {}
    for match in semis:
        if not match.completed:
            raise BracketException("semifinals not complete")
        if match.winner_team_id is None:
            raise BracketException("semifinal missing winner")
        winners[match.match_order] = match.winner_team_id

    sf1_winner = winners.get(SEMIFINAL_1_ORDER)
    sf2_winner = winners.get(SEMIFINAL_2_ORDER)
    if sf1_winner is None or sf2_winner is None:
        raise BracketException("could not determine semifinal winners")
    return sf1_winner, sf2_winner


def update_final_matchup(
    matches: Sequence[Match], sf1_winner: str, sf2_winner: str
) -> Tuple[Match, ...]:
    """Fill the Final's team slots with the semifinal winners.

    Raises:
        BracketException: If the bracket has no Final
    """
    updated = list(matches)
    for index, match in enumerate(updated):
        if match.stage is MatchStage.FINAL:
            updated[index] = replace(match, team_a_id=sf1_winner, team_b_id=sf2_winner)
            return tuple(updated)
    raise BracketException("final match not found")
