from typing import List, Optional

from loguru import logger

from tennis_set.config import SET_GAMES_TO_WIN, TIE_BREAK_AT_GAMES, MIN_LEAD
from tennis_set.exceptions import SetAlreadyOverError
from tennis_set.game import Game
from tennis_set.models import GameStatus


class MatchSet:
    """
    Single set of games.

    Responsibilities:
    - Start a new Game when needed
    - Decide when tie-break rules apply
    - Tally games won by each player
    - Refuse points once the set is over
    """

    def __init__(self):
        self.games: List[Game] = []
        self._current_game: Optional[Game] = None
        self._player1_won_games = 0
        self._player2_won_games = 0
        self._over = False

    @property
    def current_game(self) -> Optional[Game]:
        return self._current_game

    @property
    def player1_won_games(self) -> int:
        return self._player1_won_games

    @property
    def player2_won_games(self) -> int:
        return self._player2_won_games

    @property
    def is_over(self) -> bool:
        return self._over

    @property
    def is_tie_break(self) -> bool:
        return self._player1_won_games == self._player2_won_games == TIE_BREAK_AT_GAMES

    # =========================================================
    # PUBLIC API
    # =========================================================

    def point_won_by(self, is_player1: bool) -> GameStatus:
        if self._over:
            raise SetAlreadyOverError(
                f"Set already over at {self}, no more points accepted"
            )

        if self._current_game is None or self._current_game.status == GameStatus.WON:
            self._current_game = Game()
            self.games.append(self._current_game)

        is_tie_break = self.is_tie_break
        status = self._current_game.point_won_by(is_player1, is_tie_break)

        if status == GameStatus.WON:
            self._finalize_game(is_player1, is_tie_break)

        return status

    # =========================================================
    # SET LOGIC
    # =========================================================

    def _finalize_game(self, is_player1: bool, was_tie_break: bool):
        # The player who scored the last point of a game is its winner
        if is_player1:
            self._player1_won_games += 1
        else:
            self._player2_won_games += 1

        logger.debug(f"Game {len(self.games)} won by player {1 if is_player1 else 2}, set {self}")

        # 7-6 after a tie-break is a one-game lead but still ends the set
        if was_tie_break or self._is_set_won():
            self._over = True
            logger.debug(f"Set over at {self}")

    def _is_set_won(self) -> bool:
        a = self._player1_won_games
        b = self._player2_won_games

        return (a >= SET_GAMES_TO_WIN or b >= SET_GAMES_TO_WIN) and abs(a - b) >= MIN_LEAD

    def __str__(self) -> str:
        return f"{self._player1_won_games}-{self._player2_won_games}"
