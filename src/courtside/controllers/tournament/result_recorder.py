"""Result recording and validation for tournaments.

This module handles recording match results with proper validation and error checking.
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
from typing import Sequence, Tuple, Union

from courtside.controllers.tournament.round_robin import get_match_by_id
from courtside.controllers.tournament.standings import update_standings_with_result
from courtside.exceptions import (
    DuplicateResultException,
    InvalidResultException,
    MatchNotFoundException,
)
from courtside.models.enums import Side
from courtside.models.tournament import Match, MatchResult, TeamStanding
from courtside.type_hints import SideLiteral
from courtside.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording and validating match results.

    This class is responsible for:
    - Locating the match a result belongs to
    - Rejecting results for completed matches or for teams not in the match
    - Producing the updated match list and standings

    The recorder holds no state; every method returns new tuples and leaves
    its arguments untouched.
    """

    def record(
        self, matches: Sequence[Match], result: MatchResult
    ) -> Tuple[Tuple[Match, ...], Match]:
        """Mark the result's match as completed.

        Args:
            matches: Match list of the active stage
            result: The result to record

        Returns:
            (updated match list, the completed match)

        Raises:
            MatchNotFoundException: If the match is not in ``matches``
            DuplicateResultException: If the match already has a result
            InvalidResultException: If the result does not name the match's
                two teams
        """
        match, index = get_match_by_id(matches, result.match_id)
        if match is None:
            logger.warning(f"No match {result.match_id} in the active stage")
            raise MatchNotFoundException("match not found in tournament")

        self._validate_result_entry(match, result)

        completed = replace(match, winner_team_id=result.winner_team_id, completed=True)
        updated = list(matches)
        updated[index] = completed

        logger.debug(
            f"Recorded {match.stage.value} match {match.match_order}: "
            f"{result.winner_team_id} beat {result.loser_team_id}"
        )
        return tuple(updated), completed

    def apply_to_standings(
        self, standings: Sequence[TeamStanding], result: MatchResult
    ) -> Tuple[TeamStanding, ...]:
        """Fold a round-robin result into the standings."""
        return update_standings_with_result(standings, result)

    def _validate_result_entry(self, match: Match, result: MatchResult) -> None:
        """Validate a result entry before recording."""
        if match.completed:
            logger.warning(f"Match {match.id} is already completed")
            raise DuplicateResultException("match already completed")

        if match.is_pending:
            raise InvalidResultException(
                f"match {match.id} does not have both teams decided yet"
            )

        if (
            result.winner_team_id == result.loser_team_id
            or not match.involves(result.winner_team_id)
            or not match.involves(result.loser_team_id)
        ):
            logger.error(
                f"Result ({result.winner_team_id}, {result.loser_team_id}) "
                f"does not match teams of match {match.id}"
            )
            raise InvalidResultException(
                "result teams do not match the teams of the match"
            )


def build_match_result(match: Match, winner_team_id: str) -> MatchResult:
    """Derive the MatchResult for ``match`` won by ``winner_team_id``.

    Raises:
        InvalidResultException: If the match is pending or the winner is not
            one of its teams
    """
    if match.is_pending:
        raise InvalidResultException(
            f"match {match.id} does not have both teams decided yet"
        )
    if winner_team_id == match.team_a_id:
        loser_team_id = match.team_b_id
    elif winner_team_id == match.team_b_id:
        loser_team_id = match.team_a_id
    else:
        raise InvalidResultException(
            f"team {winner_team_id} is not playing in match {match.id}"
        )
    return MatchResult(
        match_id=match.id, winner_team_id=winner_team_id, loser_team_id=loser_team_id
    )


def winner_team_for_side(match: Match, side: Union[Side, SideLiteral]) -> str:
    """Map the winning side of a scoring session onto the match's team ids.

    Side A of the scoring session is ``team_a_id``, side B is ``team_b_id``.

    Raises:
        InvalidResultException: If the match is pending or the side is invalid
    """
    if match.is_pending:
        raise InvalidResultException(
            f"match {match.id} does not have both teams decided yet"
        )
    try:
        side = Side(side)
    except ValueError:
        raise InvalidResultException(f"invalid side: {side}") from None
    return match.team_a_id if side is Side.A else match.team_b_id
