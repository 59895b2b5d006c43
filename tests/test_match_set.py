import pytest

from tennis_set.exceptions import SetAlreadyOverError, ScoreError
from tennis_set.match_set import MatchSet
from tennis_set.models import GameStatus


# ---------------------------------------------------------
# Helpers
# ---------------------------------------------------------

def win_games(match_set, is_player1, count):
    for _ in range(count):
        for _ in range(4):
            match_set.point_won_by(is_player1)


def reach_six_all(match_set):
    win_games(match_set, True, 5)
    win_games(match_set, False, 5)
    win_games(match_set, True, 1)
    win_games(match_set, False, 1)


# ---------------------------------------------------------
# Game lifecycle
# ---------------------------------------------------------

def test_no_game_before_first_point():
    match_set = MatchSet()

    assert match_set.current_game is None
    assert match_set.games == []
    assert str(match_set) == "0-0"


def test_first_point_starts_game():
    match_set = MatchSet()

    match_set.point_won_by(True)

    assert len(match_set.games) == 1
    assert match_set.current_game is match_set.games[0]
    assert match_set.current_game.player1_points == 1


def test_won_game_stays_current_until_next_point():
    match_set = MatchSet()

    win_games(match_set, True, 1)

    assert match_set.current_game.status == GameStatus.WON
    assert len(match_set.games) == 1

    match_set.point_won_by(False)

    assert len(match_set.games) == 2
    assert match_set.games[0].status == GameStatus.WON
    assert match_set.current_game.player2_points == 1


def test_tallies_change_only_when_game_won():
    match_set = MatchSet()
    tallies = []

    for is_player1 in [True, True, False, True, True, False, True]:
        status = match_set.point_won_by(is_player1)
        tallies.append((status, match_set.player1_won_games, match_set.player2_won_games))

    assert tallies == [
        (GameStatus.IN_PROGRESS, 0, 0),
        (GameStatus.IN_PROGRESS, 0, 0),
        (GameStatus.IN_PROGRESS, 0, 0),
        (GameStatus.IN_PROGRESS, 0, 0),
        (GameStatus.WON, 1, 0),
        (GameStatus.IN_PROGRESS, 1, 0),
        (GameStatus.DEUCE, 1, 0),
    ]


# ---------------------------------------------------------
# Set over
# ---------------------------------------------------------

def test_six_love():
    match_set = MatchSet()

    win_games(match_set, True, 6)

    assert match_set.is_over is True
    assert str(match_set) == "6-0"


def test_six_five_is_not_over():
    match_set = MatchSet()

    win_games(match_set, True, 5)
    win_games(match_set, False, 5)
    win_games(match_set, True, 1)

    assert str(match_set) == "6-5"
    assert match_set.is_over is False

    win_games(match_set, True, 1)

    assert str(match_set) == "7-5"
    assert match_set.is_over is True


def test_point_after_set_over_raises_without_mutation():
    match_set = MatchSet()
    win_games(match_set, False, 6)

    with pytest.raises(SetAlreadyOverError):
        match_set.point_won_by(True)

    assert match_set.player1_won_games == 0
    assert match_set.player2_won_games == 6
    assert len(match_set.games) == 6
    assert match_set.current_game.status == GameStatus.WON


def test_set_over_error_is_score_error():
    assert issubclass(SetAlreadyOverError, ScoreError)


# ---------------------------------------------------------
# Tie-break
# ---------------------------------------------------------

def test_tie_break_flag_only_at_six_all():
    match_set = MatchSet()

    win_games(match_set, True, 5)
    win_games(match_set, False, 5)
    win_games(match_set, True, 1)
    assert match_set.is_tie_break is False

    win_games(match_set, False, 1)
    assert match_set.is_tie_break is True
    assert match_set.is_over is False


def test_tie_break_game_decides_set():
    match_set = MatchSet()
    reach_six_all(match_set)

    for _ in range(6):
        match_set.point_won_by(True)
        match_set.point_won_by(False)

    assert match_set.current_game.status == GameStatus.TIE_BREAK
    assert match_set.current_game.is_tie_break is True
    assert str(match_set.current_game) == "6-6"

    assert match_set.point_won_by(True) == GameStatus.TIE_BREAK
    assert match_set.point_won_by(True) == GameStatus.WON

    assert str(match_set) == "7-6"
    assert match_set.is_over is True
    assert len(match_set.games) == 13


def test_tie_break_to_seven_love():
    match_set = MatchSet()
    reach_six_all(match_set)

    for _ in range(6):
        assert match_set.point_won_by(False) == GameStatus.TIE_BREAK
    assert match_set.point_won_by(False) == GameStatus.WON

    assert str(match_set) == "6-7"
    assert match_set.is_over is True
