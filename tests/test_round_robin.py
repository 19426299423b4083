import pytest

from courtside.controllers.tournament import (
    generate_manual_teams,
    generate_round_robin_matches,
    get_completed_matches,
    get_match_by_id,
    get_matches_by_stage,
    get_pending_matches,
    is_round_robin_complete,
)
from courtside.models.enums import MatchStage


def _teams(count):
    return generate_manual_teams(
        [(f"p{2 * i + 1}", f"p{2 * i + 2}") for i in range(count)]
    )


@pytest.mark.parametrize("team_count, expected", [(2, 1), (3, 3), (4, 6), (5, 10), (6, 15)])
def test_every_pair_plays_once(team_count, expected):
    teams = _teams(team_count)
    matches = generate_round_robin_matches("t-1", teams)

    assert len(matches) == expected
    pairs = {frozenset((m.team_a_id, m.team_b_id)) for m in matches}
    assert len(pairs) == expected
    assert all(m.team_a_id != m.team_b_id for m in matches)


def test_matches_are_ordered_by_team_index():
    teams = _teams(4)
    matches = generate_round_robin_matches("t-1", teams)
    ids = [t.id for t in teams]

    assert [(m.team_a_id, m.team_b_id) for m in matches] == [
        (ids[0], ids[1]),
        (ids[0], ids[2]),
        (ids[0], ids[3]),
        (ids[1], ids[2]),
        (ids[1], ids[3]),
        (ids[2], ids[3]),
    ]
    assert [m.match_order for m in matches] == [1, 2, 3, 4, 5, 6]
    assert all(m.stage is MatchStage.ROUND_ROBIN for m in matches)
    assert all(m.tournament_id == "t-1" for m in matches)
    assert all(not m.completed and m.winner_team_id is None for m in matches)


def test_match_lookup_and_filters():
    matches = generate_round_robin_matches("t-1", _teams(3))
    match, index = get_match_by_id(matches, matches[1].id)
    assert match is matches[1]
    assert index == 1
    assert get_match_by_id(matches, "missing") == (None, -1)

    assert len(get_matches_by_stage(matches, MatchStage.ROUND_ROBIN)) == 3
    assert get_matches_by_stage(matches, MatchStage.FINAL) == ()
    assert get_completed_matches(matches) == ()
    assert len(get_pending_matches(matches)) == 3


def test_round_robin_complete_needs_matches():
    assert not is_round_robin_complete(())
    matches = generate_round_robin_matches("t-1", _teams(2))
    assert not is_round_robin_complete(matches)


def test_match_involves_only_its_teams():
    teams = _teams(3)
    match = generate_round_robin_matches("t-1", teams)[0]
    assert match.involves(teams[0].id)
    assert match.involves(teams[1].id)
    assert not match.involves(teams[2].id)
