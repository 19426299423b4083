from courtside.controllers.tournament import (
    calculate_rankings,
    get_standing_by_team_id,
    get_top_teams,
    initialize_standings,
    is_standings_complete,
    update_standings_with_result,
)
from courtside.models.tournament import MatchResult, Team


def _teams():
    return [Team(f"t{i}", f"a{i}", f"b{i}", i) for i in range(1, 4)]


def test_initial_standings_are_zeroed():
    standings = initialize_standings(_teams())
    assert [s.team_id for s in standings] == ["t1", "t2", "t3"]
    assert all(
        (s.rank, s.played, s.won, s.lost, s.points) == (0, 0, 0, 0, 0)
        for s in standings
    )


def test_result_updates_winner_and_loser_only():
    standings = initialize_standings(_teams())
    updated = update_standings_with_result(standings, MatchResult("m1", "t2", "t1"))

    winner = get_standing_by_team_id(updated, "t2")
    loser = get_standing_by_team_id(updated, "t1")
    other = get_standing_by_team_id(updated, "t3")
    assert (winner.played, winner.won, winner.lost, winner.points) == (1, 1, 0, 1)
    assert (loser.played, loser.won, loser.lost, loser.points) == (1, 0, 1, 0)
    assert other.played == 0
    # The input is left untouched
    assert get_standing_by_team_id(standings, "t2").played == 0
    assert get_standing_by_team_id(updated, "t9") is None


def test_rankings_sort_by_points_and_keep_order_for_ties():
    standings = initialize_standings(_teams())
    standings = update_standings_with_result(standings, MatchResult("m1", "t3", "t1"))

    ranked = calculate_rankings(standings)
    assert [s.team_id for s in ranked] == ["t3", "t1", "t2"]
    assert [s.rank for s in ranked] == [1, 2, 3]


def test_top_teams():
    standings = initialize_standings(_teams())
    standings = update_standings_with_result(standings, MatchResult("m1", "t2", "t3"))
    assert [s.team_id for s in get_top_teams(standings, 2)] == ["t2", "t1"]
    assert len(get_top_teams(standings, 10)) == 3
    assert get_top_teams(standings, 0) == ()


def test_standings_complete_when_everyone_played_everyone():
    standings = initialize_standings(_teams())
    assert not is_standings_complete(standings)
    assert not is_standings_complete(())

    for result in (
        MatchResult("m1", "t1", "t2"),
        MatchResult("m2", "t1", "t3"),
        MatchResult("m3", "t2", "t3"),
    ):
        standings = update_standings_with_result(standings, result)
    assert is_standings_complete(standings)
    assert sum(s.won for s in standings) == sum(s.lost for s in standings) == 3
