from tennis_set.config import NOT_STARTED_LABEL
from tennis_set.exceptions import UnknownPlayerError
from tennis_set.match_set import MatchSet
from tennis_set.models import GameStatus, MatchSnapshot


class Match:
    """
    Single-set tennis match between two named players.

    Points can be scored by slot (`point_won_by_player1`/`point_won_by_player2`)
    or by name. `point_won_by` treats any name other than player 1's as a
    point for player 2; use `point_won_by_strict` to reject unknown names.
    """

    def __init__(self, player1: str, player2: str):
        self._player1 = player1
        self._player2 = player2
        self.match_set = MatchSet()

    @property
    def player1(self) -> str:
        return self._player1

    @property
    def player2(self) -> str:
        return self._player2

    @property
    def is_over(self) -> bool:
        return self.match_set.is_over

    # =========================================================
    # SCORING
    # =========================================================

    def point_won_by_player1(self):
        self.match_set.point_won_by(True)

    def point_won_by_player2(self):
        self.match_set.point_won_by(False)

    def point_won_by(self, name: str):
        if name == self._player1:
            self.point_won_by_player1()
        else:
            self.point_won_by_player2()

    def point_won_by_strict(self, name: str):
        if name == self._player1:
            self.point_won_by_player1()
        elif name == self._player2:
            self.point_won_by_player2()
        else:
            raise UnknownPlayerError(
                f"Unknown player: {name!r} (expected {self._player1!r} or {self._player2!r})"
            )

    # =========================================================
    # SCORE
    # =========================================================

    def score(self) -> str:
        game = self.match_set.current_game
        if game is None:
            return NOT_STARTED_LABEL

        set_result = str(self.match_set)
        game_result = str(game)
        if not game_result:
            return set_result

        if game.status == GameStatus.ADVANTAGE:
            game_result += " " + (self._player1 if game.leader_is_player1 else self._player2)

        return f"{set_result}, {game_result}"

    def snapshot(self) -> MatchSnapshot:
        game = self.match_set.current_game

        return MatchSnapshot(
            player1=self._player1,
            player2=self._player2,
            player1_games=self.match_set.player1_won_games,
            player2_games=self.match_set.player2_won_games,
            player1_points=game.player1_points if game else 0,
            player2_points=game.player2_points if game else 0,
            status=game.status if game else None,
            is_tie_break=game.is_tie_break if game else False,
            is_over=self.match_set.is_over,
            score=self.score(),
        )
