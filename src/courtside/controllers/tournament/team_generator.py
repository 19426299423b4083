"""Doubles team formation.

Teams are formed either at random from the registered roster (with an
explicit seed, so the same seed always yields the same teams) or from
pairs chosen by the organiser.
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

import random
import uuid
from typing import List, Sequence

from courtside.constants import MIN_TOURNAMENT_TEAMS
from courtside.exceptions import (
    DuplicatePlayerException,
    DuplicateTeamException,
    InvalidTeamException,
    TeamNotFoundException,
)
from courtside.models.tournament import Team
from courtside.type_hints import PlayerPairs
from courtside.utils import setup_logger
from courtside.utils.validation import (
    validate_doubles_roster_strict,
    validate_identifier,
)

logger = setup_logger(__name__)


def _new_team_id() -> str:
    return str(uuid.uuid4())


def shuffle_players(player_ids: Sequence[str], seed: int) -> List[str]:
    """Fisher-Yates shuffle of ``player_ids`` driven by ``seed``.

    The input is not modified. Identical seeds and rosters always produce
    the identical order.
    """
    rng = random.Random(seed)
    shuffled = list(player_ids)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def generate_random_teams(player_ids: Sequence[str], seed: int) -> List[Team]:
    """Shuffle the roster with ``seed`` and pair players in order.

    The shuffled list is paired as (0, 1), (2, 3), ...

    Args:
        player_ids: Registered players
        seed: Shuffle seed

    Returns:
        Teams numbered from 1

    Raises:
        InvalidTeamException: If there are fewer than four players, an odd
            count, or repeated/empty ids
    """
    validate_doubles_roster_strict(player_ids, InvalidTeamException)

    shuffled = shuffle_players(player_ids, seed)
    teams = [
        Team(
            id=_new_team_id(),
            player1_id=shuffled[i * 2],
            player2_id=shuffled[i * 2 + 1],
            team_number=i + 1,
        )
        for i in range(len(shuffled) // 2)
    ]

    logger.info(f"Generated {len(teams)} random teams (seed {seed})")
    return teams


def generate_manual_teams(pairs: PlayerPairs) -> List[Team]:
    """Build teams from organiser-chosen pairs.

    Args:
        pairs: (player1_id, player2_id) per team, in team-number order

    Returns:
        Teams numbered from 1

    Raises:
        InvalidTeamException: If there are fewer than two pairs, or a pair has
            an empty id or the same player twice
        DuplicatePlayerException: If a player appears in more than one pair
    """
    if len(pairs) < MIN_TOURNAMENT_TEAMS:
        raise InvalidTeamException(
            f"minimum {MIN_TOURNAMENT_TEAMS} teams required for tournament"
        )

    used = set()
    teams = []
    for number, (player1, player2) in enumerate(pairs, start=1):
        if not validate_identifier(player1) or not validate_identifier(player2):
            raise InvalidTeamException(f"team {number} has invalid player ID")
        if player1 == player2:
            raise InvalidTeamException(f"team {number} has same player twice")
        for player_id in (player1, player2):
            if player_id in used:
                raise DuplicatePlayerException(
                    f"player {player_id} appears in multiple teams"
                )
            used.add(player_id)

        teams.append(
            Team(
                id=_new_team_id(),
                player1_id=player1,
                player2_id=player2,
                team_number=number,
            )
        )

    logger.info(f"Generated {len(teams)} manual teams")
    return teams


def validate_teams(teams: Sequence[Team]) -> None:
    """Check the team invariants before teams are fixed for a tournament.

    Raises:
        InvalidTeamException: Fewer than two teams, empty ids, or a team
            with the same player twice
        DuplicateTeamException: Two teams with the same id
        DuplicatePlayerException: A player in more than one team
    """
    if len(teams) < MIN_TOURNAMENT_TEAMS:
        raise InvalidTeamException(
            f"minimum {MIN_TOURNAMENT_TEAMS} teams required for tournament"
        )

    team_ids = set()
    player_ids = set()
    for team in teams:
        if not validate_identifier(team.id):
            raise InvalidTeamException("team has invalid ID")
        if team.id in team_ids:
            raise DuplicateTeamException(f"duplicate team ID: {team.id}")
        team_ids.add(team.id)

        if not validate_identifier(team.player1_id) or not validate_identifier(
            team.player2_id
        ):
            raise InvalidTeamException(
                f"team {team.team_number} has invalid player ID"
            )
        if team.player1_id == team.player2_id:
            raise InvalidTeamException(
                f"team {team.team_number} has same player twice"
            )
        for player_id in team.player_ids:
            if player_id in player_ids:
                raise DuplicatePlayerException(
                    f"player {player_id} appears in multiple teams"
                )
            player_ids.add(player_id)


def get_team_by_id(teams: Sequence[Team], team_id: str) -> Team:
    """Return the team with ``team_id``.

    Raises:
        TeamNotFoundException: If no team has that id
    """
    for team in teams:
        if team.id == team_id:
            return team
    raise TeamNotFoundException(f"team not found: {team_id}")
