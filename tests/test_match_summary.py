from datetime import datetime, timedelta, timezone

import pytest

from courtside.controllers.scoring import order_events, summarize_match
from courtside.exceptions import InvalidPointEventException, MatchCompletedException
from courtside.models.enums import MatchMode, ServeType, Side
from courtside.models.scoring import PointEvent

PLAYERS = {"team_a": ["p1", "p2"], "team_b": ["p3", "p4"]}
SERVERS = ["p1", "p3", "p2"]
START = datetime(2025, 3, 1, 10, 0, tzinfo=timezone.utc)


def _event(second, server, winner, serve_type=ServeType.FIRST):
    return PointEvent(
        timestamp=START + timedelta(seconds=second),
        server_player_id=server,
        serve_type=serve_type,
        point_winner=winner,
    )


def _game(start, server, winner, serve_type=ServeType.FIRST):
    return [_event(start + i, server, winner, serve_type) for i in range(4)]


def test_events_are_replayed_in_timestamp_order():
    events = _game(0, "p1", Side.A) + _game(10, "p3", Side.A)
    shuffled = list(reversed(events))

    summary = summarize_match(MatchMode.SHORT_FORMAT, PLAYERS, shuffled, SERVERS)
    assert summary.winner is Side.A
    assert summary.final_state.completed
    assert summary.event_count == 8
    assert (summary.points_a, summary.points_b) == (8, 0)
    assert (summary.games_a, summary.games_b) == (2, 0)


def test_order_events_keeps_arrival_order_for_equal_timestamps():
    first = _event(5, "p1", Side.A)
    second = _event(5, "p3", Side.B)
    earlier = _event(1, "p2", Side.A)
    assert order_events([first, second, earlier]) == [earlier, first, second]


def test_mixed_naive_and_aware_timestamps_are_rejected():
    naive = PointEvent(
        timestamp=datetime(2025, 3, 1, 10, 0),
        server_player_id="p1",
        serve_type=ServeType.FIRST,
        point_winner=Side.A,
    )
    with pytest.raises(InvalidPointEventException):
        summarize_match(
            MatchMode.SHORT_FORMAT, PLAYERS, [naive, _event(1, "p1", Side.A)], SERVERS
        )


def test_unknown_server_is_rejected():
    with pytest.raises(InvalidPointEventException):
        summarize_match(
            MatchMode.SHORT_FORMAT, PLAYERS, [_event(0, "ghost", Side.A)], SERVERS
        )


def test_events_after_match_end_are_rejected():
    events = _game(0, "p1", Side.B) + _game(10, "p3", Side.B)
    events.append(_event(30, "p2", Side.A))
    with pytest.raises(MatchCompletedException):
        summarize_match(MatchMode.SHORT_FORMAT, PLAYERS, events, SERVERS)


def test_serve_statistics():
    events = [
        _event(0, "p1", Side.A, ServeType.FIRST),
        _event(1, "p1", Side.B, ServeType.FIRST),
        _event(2, "p1", Side.A, ServeType.SECOND),
        _event(3, "p1", Side.B, ServeType.DOUBLE_FAULT),
    ]
    summary = summarize_match(MatchMode.SHORT_FORMAT, PLAYERS, events, SERVERS)
    stats = summary.stats_for("p1")

    assert stats.first_serves_total == 4
    assert stats.first_serves_in == 2
    assert stats.first_serve_won == 1
    assert stats.second_serves_total == 2
    assert stats.second_serves_in == 1
    assert stats.second_serve_won == 1
    assert stats.double_faults == 1
    assert stats.first_serve_percentage == pytest.approx(50.0)


def test_points_won_are_credited_to_both_partners():
    events = [
        _event(0, "p1", Side.A),
        _event(1, "p1", Side.B),
        _event(2, "p1", Side.B),
    ]
    summary = summarize_match(MatchMode.SHORT_FORMAT, PLAYERS, events, SERVERS)
    assert summary.stats_for("p1").total_points_won == 1
    assert summary.stats_for("p2").total_points_won == 1
    assert summary.stats_for("p3").total_points_won == 2
    assert summary.stats_for("p4").total_points_won == 2
    assert summary.stats_for("p3").first_serves_total == 0
    assert summary.stats_for("nobody") is None
    assert summary.winner is None


def test_standard_summary_counts_games_across_sets():
    events = []
    second = 0
    for _ in range(12):
        events.extend(_game(second, "p1", Side.A))
        second += 4

    summary = summarize_match(MatchMode.STANDARD, PLAYERS, events)
    assert summary.winner is Side.A
    assert (summary.sets_a, summary.sets_b) == (2, 0)
    assert summary.games_a == 12
    # The match state itself only keeps the games of the set in play
    assert summary.final_state.games_a == 6


def test_summary_to_dict():
    summary = summarize_match(
        MatchMode.SHORT_FORMAT, PLAYERS, [_event(0, "p1", Side.A)], SERVERS
    )
    data = summary.to_dict()
    assert data["team_a_score"] == 1
    assert data["team_b_score"] == 0
    assert data["event_count"] == 1
    assert {s["player_id"] for s in data["player_stats"]} == {"p1", "p2", "p3", "p4"}
