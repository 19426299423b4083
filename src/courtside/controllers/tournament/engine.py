"""Doubles tournament state machine.

Stages move strictly forward: Setup -> RoundRobin -> Knockout -> Completed.
Each transition takes a TournamentState and returns a new one; a rejected
transition raises and leaves the given state untouched. The engine only sees
match winners, never point-level detail.
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
from datetime import datetime
from typing import Optional, Sequence, Tuple

from courtside.controllers.tournament.knockout import (
    are_semifinals_complete,
    generate_knockout_matches,
    get_semifinal_winners,
    update_final_matchup,
)
from courtside.controllers.tournament.result_recorder import ResultRecorder
from courtside.controllers.tournament.round_robin import (
    generate_round_robin_matches,
    get_match_by_id,
    get_matches_by_stage,
    is_round_robin_complete,
)
from courtside.controllers.tournament.standings import (
    calculate_rankings,
    initialize_standings,
)
from courtside.controllers.tournament.team_generator import validate_teams
from courtside.exceptions import (
    BracketException,
    InvalidTeamException,
    InvalidTournamentException,
    MatchNotFoundException,
    TournamentStateException,
)
from courtside.models.enums import MatchStage, TournamentStage
from courtside.models.tournament import (
    Match,
    MatchResult,
    Team,
    TeamStanding,
    TournamentState,
)
from courtside.utils import setup_logger
from courtside.utils.validation import (
    validate_doubles_roster_strict,
    validate_identifier_strict,
)

logger = setup_logger(__name__)

_recorder = ResultRecorder()


def _advance_stage(
    state: TournamentState, stage: TournamentStage, **changes
) -> TournamentState:
    if not state.stage.can_advance_to(stage):
        raise TournamentStateException(
            f"cannot move tournament from {state.stage.value} to {stage.value}"
        )
    logger.info(f"Tournament {state.id}: {state.stage.value} -> {stage.value}")
    return replace(state, stage=stage, **changes)


def new_tournament(
    venue_id: str,
    player_ids: Sequence[str],
    tournament_id: Optional[str] = None,
    created_at: Optional[datetime] = None,
) -> TournamentState:
    """Create a tournament in the Setup stage, without teams.

    Args:
        venue_id: Venue the tournament is played at
        player_ids: Registered players
        tournament_id: Identifier to use; a new UUID by default
        created_at: Creation time; now (UTC) by default

    Raises:
        InvalidTournamentException: If the venue is missing, there are fewer
            than four players, an odd number of players, or repeated ids
    """
    venue_id = validate_identifier_strict(
        venue_id, "venue ID", InvalidTournamentException
    )
    validate_doubles_roster_strict(player_ids, InvalidTournamentException)

    state = TournamentState(
        id=tournament_id or str(uuid.uuid4()),
        venue_id=venue_id,
        player_ids=tuple(player_ids),
    )
    if created_at is not None:
        state = replace(state, created_at=created_at)

    logger.info(
        f"Created tournament {state.id} at venue {venue_id} "
        f"with {len(player_ids)} players"
    )
    return state


def set_teams(state: TournamentState, teams: Sequence[Team]) -> TournamentState:
    """Fix the teams, schedule the round robin and start it.

    Raises:
        TournamentStateException: If the tournament is past setup
        InvalidTeamException: If the teams break the team invariants or use a
            player who is not registered for the tournament
        DuplicateTeamException: If two teams share an id
        DuplicatePlayerException: If a player is in two teams
    """
    if state.stage is not TournamentStage.SETUP:
        raise TournamentStateException("teams can only be set during setup stage")

    validate_teams(teams)
    registered = set(state.player_ids)
    for team in teams:
        for player_id in team.player_ids:
            if player_id not in registered:
                raise InvalidTeamException(
                    f"player {player_id} is not registered for this tournament"
                )

    teams = tuple(teams)
    matches = generate_round_robin_matches(state.id, teams)
    logger.info(
        f"Tournament {state.id}: {len(teams)} teams, {len(matches)} round-robin matches"
    )
    return _advance_stage(
        state,
        TournamentStage.ROUND_ROBIN,
        teams=teams,
        standings=initialize_standings(teams),
        round_robin_matches=matches,
    )


def record_match_result(state: TournamentState, result: MatchResult) -> TournamentState:
    """Record a match result in the active stage.

    Round-robin results also update the standings. Recording the Final
    crowns the winner and completes the tournament.

    Raises:
        TournamentStateException: If the tournament has no stage that takes
            results (setup or completed)
        MatchNotFoundException: If the match is not in the active stage
        DuplicateResultException: If the match is already completed
        InvalidResultException: If the result does not name the match's teams
    """
    if state.stage is TournamentStage.ROUND_ROBIN:
        matches, _ = _recorder.record(state.round_robin_matches, result)
        return replace(
            state,
            round_robin_matches=matches,
            standings=_recorder.apply_to_standings(state.standings, result),
        )

    if state.stage is TournamentStage.KNOCKOUT:
        matches, match = _recorder.record(state.knockout_matches, result)
        if match.stage is MatchStage.FINAL:
            logger.info(
                f"Tournament {state.id} won by team {result.winner_team_id}"
            )
            return _advance_stage(
                state,
                TournamentStage.COMPLETED,
                knockout_matches=matches,
                winner=result.winner_team_id,
                completed=True,
            )
        return replace(state, knockout_matches=matches)

    logger.warning(f"Rejected result: tournament {state.id} is in {state.stage.value}")
    raise TournamentStateException(
        f"cannot record results during {state.stage.value} stage"
    )


def advance_to_knockout(state: TournamentState) -> TournamentState:
    """Rank the round robin and seed the knockout bracket.

    Raises:
        TournamentStateException: If not in the round robin, or matches remain
        BracketException: If the bracket cannot be seeded
    """
    if state.stage is not TournamentStage.ROUND_ROBIN:
        raise TournamentStateException(
            "can only advance to knockout from round-robin stage"
        )
    if not is_round_robin_complete(state.round_robin_matches):
        raise TournamentStateException("cannot advance: round-robin not complete")

    standings = calculate_rankings(state.standings)
    knockout_matches = generate_knockout_matches(state.id, standings)
    return _advance_stage(
        state,
        TournamentStage.KNOCKOUT,
        standings=standings,
        knockout_matches=knockout_matches,
    )


def prepare_final(state: TournamentState) -> TournamentState:
    """Place the semifinal winners into the Final.

    The winner of Semifinal 1 takes side A of the Final, the winner of
    Semifinal 2 side B.

    Raises:
        TournamentStateException: If not in the knockout stage
        BracketException: If there are not exactly two completed semifinals
            with winners
    """
    if state.stage is not TournamentStage.KNOCKOUT:
        raise TournamentStateException("not in knockout stage")

    semis = get_matches_by_stage(state.knockout_matches, MatchStage.SEMIFINAL)
    if len(semis) != 2:
        raise BracketException("expected exactly 2 semifinals")
    if not are_semifinals_complete(state.knockout_matches):
        raise BracketException("semifinals not complete")

    sf1_winner, sf2_winner = get_semifinal_winners(state.knockout_matches)
    matches = update_final_matchup(state.knockout_matches, sf1_winner, sf2_winner)
    logger.info(f"Tournament {state.id}: final set as {sf1_winner} vs {sf2_winner}")
    return replace(state, knockout_matches=matches)


def link_scoring_match(
    state: TournamentState, match_id: str, scoring_match_id: str
) -> TournamentState:
    """Attach an external scoring session to a bracket match.

    Raises:
        MatchNotFoundException: If no match in the tournament has that id
    """
    for field_name in ("round_robin_matches", "knockout_matches"):
        matches = getattr(state, field_name)
        match, index = get_match_by_id(matches, match_id)
        if match is not None:
            updated = list(matches)
            updated[index] = replace(match, scoring_match_id=scoring_match_id)
            return replace(state, **{field_name: tuple(updated)})
    raise MatchNotFoundException(f"match not found in tournament: {match_id}")


def get_next_match(state: TournamentState) -> Optional[Match]:
    """First incomplete match of the active stage, or None."""
    if state.stage is TournamentStage.ROUND_ROBIN:
        matches = state.round_robin_matches
    elif state.stage is TournamentStage.KNOCKOUT:
        matches = state.knockout_matches
    else:
        return None

    for match in matches:
        if not match.completed:
            return match
    return None


def get_all_matches(state: TournamentState) -> Tuple[Match, ...]:
    """Round-robin matches followed by knockout matches."""
    return state.round_robin_matches + state.knockout_matches


def get_current_rankings(state: TournamentState) -> Tuple[TeamStanding, ...]:
    """Standings ranked by points as they stand now."""
    return calculate_rankings(state.standings)
