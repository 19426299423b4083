import json
from datetime import datetime, timezone

import pytest

from courtside.controllers.scoring import new_match_state, score_point
from courtside.exceptions import (
    InvalidMatchConfigurationException,
    InvalidPointEventException,
)
from courtside.models.enums import (
    MatchMode,
    MatchStage,
    ServeType,
    Side,
    TournamentStage,
)
from courtside.models.scoring import MatchState, PointEvent
from courtside.models.tournament import Match, MatchResult, TournamentState
from courtside.testing import SimulationConfig, TournamentSimulator

PLAYERS = {"team_a": ["p1", "p2"], "team_b": ["p3", "p4"]}


def test_match_state_survives_json():
    state = new_match_state(MatchMode.SHORT_FORMAT, PLAYERS, ["p1", "p3", "p2"])
    for side in "AAAAB":
        state = score_point(state, side)

    data = json.loads(json.dumps(state.to_dict()))
    assert data["mode"] == "short"
    assert data["servers"] == ["p1", "p3", "p2"]
    assert data["current_game"]["server_index"] == 1
    assert MatchState.from_dict(data) == state


def test_completed_match_state_keeps_winner():
    state = new_match_state(MatchMode.SHORT_FORMAT, PLAYERS, ["p1", "p3", "p2"])
    for side in "BBBBBBBB":
        state = score_point(state, side)
    data = state.to_dict()
    assert data["winner"] == "B"
    restored = MatchState.from_dict(data)
    assert restored.winner is Side.B
    assert restored.completed


def test_point_event_parses_iso_timestamps():
    event = PointEvent.from_dict(
        {
            "id": "e1",
            "timestamp": "2025-03-01T10:00:05+00:00",
            "server_player_id": "p1",
            "serve_type": "double_fault",
            "point_winner_team": "B",
        }
    )
    assert event.timestamp == datetime(2025, 3, 1, 10, 0, 5, tzinfo=timezone.utc)
    assert event.serve_type is ServeType.DOUBLE_FAULT
    assert event.point_winner is Side.B
    assert PointEvent.from_dict(event.to_dict()) == event


def test_point_event_accepts_plain_winner_key():
    event = PointEvent.from_dict(
        {
            "timestamp": datetime(2025, 3, 1, tzinfo=timezone.utc),
            "server_player_id": "p3",
            "serve_type": "first",
            "point_winner": "A",
        }
    )
    assert event.point_winner is Side.A
    assert event.id is None


def test_pending_final_serializes_without_teams():
    final = Match(
        id="m9",
        tournament_id="t",
        team_a_id=None,
        team_b_id=None,
        stage=MatchStage.FINAL,
        match_order=3,
    )
    data = final.to_dict()
    assert data["stage"] == "final"
    assert data["team_a_id"] is None
    assert Match.from_dict(data) == final
    assert MatchResult.from_dict(MatchResult("m9", "a", "b").to_dict()) == MatchResult(
        "m9", "a", "b"
    )


def test_tournament_snapshot_round_trip():
    result = TournamentSimulator(SimulationConfig(num_players=8, seed=21)).run()
    tournament = result.tournament

    data = json.loads(json.dumps(tournament.to_dict()))
    assert data["stage"] == "completed"
    restored = TournamentState.from_dict(data)
    assert restored == tournament
    assert restored.stage is TournamentStage.COMPLETED
    assert restored.created_at.tzinfo is not None


@pytest.mark.parametrize(
    "changes",
    [
        {"serve_type": "ace"},
        {"point_winner_team": "C"},
        {"timestamp": "yesterday afternoon"},
    ],
)
def test_point_event_rejects_bad_fields(changes):
    data = {
        "timestamp": "2025-03-01T10:00:05+00:00",
        "server_player_id": "p1",
        "serve_type": "first",
        "point_winner_team": "A",
    }
    data.update(changes)
    with pytest.raises(InvalidPointEventException):
        PointEvent.from_dict(data)


@pytest.mark.parametrize("completed, winner", [(True, None), (False, "A")])
def test_inconsistent_match_snapshot_is_rejected(completed, winner):
    data = new_match_state(MatchMode.STANDARD, PLAYERS).to_dict()
    data["completed"] = completed
    data["winner"] = winner
    with pytest.raises(InvalidMatchConfigurationException):
        MatchState.from_dict(data)


def test_point_event_requires_a_server():
    with pytest.raises(InvalidPointEventException):
        PointEvent.from_dict(
            {
                "timestamp": "2025-03-01T10:00:05+00:00",
                "serve_type": "first",
                "point_winner_team": "A",
            }
        )
