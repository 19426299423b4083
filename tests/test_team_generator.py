import pytest

from courtside.controllers.tournament import (
    generate_manual_teams,
    generate_random_teams,
    get_team_by_id,
    shuffle_players,
    validate_teams,
)
from courtside.exceptions import (
    DuplicatePlayerException,
    DuplicateTeamException,
    InvalidTeamException,
    TeamException,
    TeamNotFoundException,
)
from courtside.models.tournament import Team

PLAYERS = [f"p{i}" for i in range(1, 9)]


def test_shuffle_is_deterministic_for_a_seed():
    assert shuffle_players(PLAYERS, 42) == shuffle_players(PLAYERS, 42)
    assert sorted(shuffle_players(PLAYERS, 42)) == sorted(PLAYERS)


def test_shuffle_leaves_input_untouched():
    roster = list(PLAYERS)
    shuffle_players(roster, 7)
    assert roster == PLAYERS


def test_random_teams_pair_shuffled_players_in_order():
    shuffled = shuffle_players(PLAYERS, 99)
    teams = generate_random_teams(PLAYERS, 99)

    assert len(teams) == 4
    assert [t.team_number for t in teams] == [1, 2, 3, 4]
    assert [t.player_ids for t in teams] == [
        (shuffled[0], shuffled[1]),
        (shuffled[2], shuffled[3]),
        (shuffled[4], shuffled[5]),
        (shuffled[6], shuffled[7]),
    ]
    assert len({t.id for t in teams}) == 4


def test_random_teams_same_seed_same_pairs():
    first = [t.player_ids for t in generate_random_teams(PLAYERS, 5)]
    second = [t.player_ids for t in generate_random_teams(PLAYERS, 5)]
    assert first == second


@pytest.mark.parametrize(
    "roster",
    [
        ["p1", "p2"],
        ["p1", "p2", "p3", "p4", "p5"],
        ["p1", "p2", "p3", "p3"],
        ["p1", "", "p3", "p4"],
    ],
)
def test_random_teams_reject_bad_rosters(roster):
    with pytest.raises(InvalidTeamException):
        generate_random_teams(roster, 1)


def test_manual_teams():
    teams = generate_manual_teams([("a", "b"), ("c", "d"), ("e", "f")])
    assert [t.team_number for t in teams] == [1, 2, 3]
    assert teams[2].player1_id == "e"
    assert teams[2].player2_id == "f"


def test_manual_teams_need_two_pairs():
    with pytest.raises(InvalidTeamException):
        generate_manual_teams([("a", "b")])


def test_manual_team_with_same_player_twice():
    with pytest.raises(InvalidTeamException):
        generate_manual_teams([("a", "a"), ("c", "d")])


def test_manual_team_with_empty_player():
    with pytest.raises(InvalidTeamException):
        generate_manual_teams([("a", " "), ("c", "d")])


def test_manual_teams_reject_player_in_two_teams():
    with pytest.raises(DuplicatePlayerException):
        generate_manual_teams([("a", "b"), ("b", "c")])


def test_validate_teams():
    validate_teams([Team("t1", "a", "b", 1), Team("t2", "c", "d", 2)])

    with pytest.raises(DuplicateTeamException):
        validate_teams([Team("t1", "a", "b", 1), Team("t1", "c", "d", 2)])
    with pytest.raises(DuplicatePlayerException):
        validate_teams([Team("t1", "a", "b", 1), Team("t2", "a", "d", 2)])
    with pytest.raises(InvalidTeamException):
        validate_teams([Team("t1", "a", "a", 1), Team("t2", "c", "d", 2)])
    with pytest.raises(TeamException):
        validate_teams([Team("t1", "a", "b", 1)])


def test_get_team_by_id():
    teams = [Team("t1", "a", "b", 1), Team("t2", "c", "d", 2)]
    assert get_team_by_id(teams, "t2").player_ids == ("c", "d")
    with pytest.raises(TeamNotFoundException):
        get_team_by_id(teams, "t3")
