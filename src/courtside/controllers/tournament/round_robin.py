"""Round-robin scheduling and match list queries."""

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
from typing import Optional, Sequence, Tuple

from courtside.models.enums import MatchStage
from courtside.models.tournament import Match, Team


def generate_round_robin_matches(
    tournament_id: str, teams: Sequence[Team]
) -> Tuple[Match, ...]:
    """Create one match for every pair of teams.

    Pairs are taken in index order, (0, 1), (0, 2), ..., (1, 2), ..., which
    gives exactly T * (T - 1) / 2 matches numbered from 1.
    """
    matches = []
    match_order = 1
    for i in range(len(teams)):
        for j in range(i + 1, len(teams)):
            matches.append(
                Match(
                    id=str(uuid.uuid4()),
                    tournament_id=tournament_id,
                    team_a_id=teams[i].id,
                    team_b_id=teams[j].id,
                    stage=MatchStage.ROUND_ROBIN,
                    match_order=match_order,
                )
            )
            match_order += 1
    return tuple(matches)


def get_match_by_id(
    matches: Sequence[Match], match_id: str
) -> Tuple[Optional[Match], int]:
    """Find a match by id.

    Returns:
        (match, index) or (None, -1) if absent
    """
    for index, match in enumerate(matches):
        if match.id == match_id:
            return match, index
    return None, -1


def get_matches_by_stage(matches: Sequence[Match], stage: MatchStage) -> Tuple[Match, ...]:
    return tuple(m for m in matches if m.stage is stage)


def get_completed_matches(matches: Sequence[Match]) -> Tuple[Match, ...]:
    return tuple(m for m in matches if m.completed)


def get_pending_matches(matches: Sequence[Match]) -> Tuple[Match, ...]:
    return tuple(m for m in matches if not m.completed)


def is_round_robin_complete(matches: Sequence[Match]) -> bool:
    """True when there are round-robin matches and all of them are completed."""
    rr_matches = get_matches_by_stage(matches, MatchStage.ROUND_ROBIN)
    return bool(rr_matches) and all(m.completed for m in rr_matches)
