from dataclasses import replace

import pytest

from courtside.controllers.tournament import (
    are_semifinals_complete,
    generate_knockout_matches,
    get_semifinal_winners,
    update_final_matchup,
)
from courtside.exceptions import BracketException
from courtside.models.enums import MatchStage
from courtside.models.tournament import TeamStanding


def _standings(points):
    """Complete round-robin standings with the given points per team."""
    played = len(points) - 1
    return tuple(
        TeamStanding(
            team_id=f"t{i + 1}",
            played=played,
            won=p,
            lost=played - p,
            points=p,
        )
        for i, p in enumerate(points)
    )


def _complete(match, winner):
    return replace(match, winner_team_id=winner, completed=True)


def test_four_teams_seed_semifinals_and_pending_final():
    # t3 first, t1 second, t4 third, t2 fourth
    semi_1, semi_2, final = generate_knockout_matches(
        "t-1", _standings([2, 0, 3, 1])
    )

    assert semi_1.stage is MatchStage.SEMIFINAL
    assert (semi_1.team_a_id, semi_1.team_b_id) == ("t3", "t2")
    assert semi_1.match_order == 1
    assert semi_2.stage is MatchStage.SEMIFINAL
    assert (semi_2.team_a_id, semi_2.team_b_id) == ("t1", "t4")
    assert semi_2.match_order == 2

    assert final.stage is MatchStage.FINAL
    assert final.is_pending
    assert final.team_a_id is None and final.team_b_id is None
    assert final.match_order == 3


def test_only_top_four_advance():
    semi_1, semi_2, _ = generate_knockout_matches(
        "t-1", _standings([5, 4, 3, 2, 1, 0])
    )
    seeded = {semi_1.team_a_id, semi_1.team_b_id, semi_2.team_a_id, semi_2.team_b_id}
    assert seeded == {"t1", "t2", "t3", "t4"}


@pytest.mark.parametrize("points", [[0, 1], [1, 2, 0]])
def test_small_bracket_is_a_direct_final(points):
    matches = generate_knockout_matches("t-1", _standings(points))
    assert len(matches) == 1
    final = matches[0]
    assert final.stage is MatchStage.FINAL
    assert final.match_order == 1

    ranked = sorted(range(len(points)), key=lambda i: points[i], reverse=True)
    assert final.team_a_id == f"t{ranked[0] + 1}"
    assert final.team_b_id == f"t{ranked[1] + 1}"


def test_bracket_needs_complete_round_robin():
    standings = list(_standings([2, 1, 1, 0]))
    standings[0] = TeamStanding(team_id="t1", played=2, won=2, points=2)
    with pytest.raises(BracketException):
        generate_knockout_matches("t-1", standings)


def test_bracket_needs_two_teams():
    with pytest.raises(BracketException):
        generate_knockout_matches("t-1", _standings([0]))


def test_final_filled_from_semifinal_winners():
    semi_1, semi_2, final = generate_knockout_matches(
        "t-1", _standings([3, 2, 1, 0])
    )
    matches = (semi_1, semi_2, final)
    assert not are_semifinals_complete(matches)
    with pytest.raises(BracketException):
        get_semifinal_winners(matches)

    matches = (_complete(semi_1, "t4"), semi_2, final)
    assert not are_semifinals_complete(matches)

    matches = (_complete(semi_1, "t4"), _complete(semi_2, "t2"), final)
    assert are_semifinals_complete(matches)
    assert get_semifinal_winners(matches) == ("t4", "t2")

    updated = update_final_matchup(matches, "t4", "t2")
    assert (updated[2].team_a_id, updated[2].team_b_id) == ("t4", "t2")
    assert not updated[2].is_pending
    assert final.is_pending


def test_semifinals_complete_is_false_without_semifinals():
    (final,) = generate_knockout_matches("t-1", _standings([1, 0]))
    assert not are_semifinals_complete((final,))
    with pytest.raises(BracketException):
        update_final_matchup((), "t1", "t2")
