from typing import List

from tennis_set.config import (
    POINT_LABELS,
    GAME_POINTS_TO_WIN,
    TIE_BREAK_POINTS_TO_WIN,
    MIN_LEAD,
    DEUCE_THRESHOLD,
)
from tennis_set.models import GameStatus


def derive_status(player1_points: int, player2_points: int, is_tie_break: bool) -> GameStatus:
    """
    Status of a game as a pure function of both point counts and the
    tie-break flag.
    """
    lead = abs(player1_points - player2_points)

    if is_tie_break:
        if max(player1_points, player2_points) >= TIE_BREAK_POINTS_TO_WIN and lead >= MIN_LEAD:
            return GameStatus.WON
        return GameStatus.TIE_BREAK

    # Order matters: won, then equal, then advantage
    if max(player1_points, player2_points) >= GAME_POINTS_TO_WIN and lead >= MIN_LEAD:
        return GameStatus.WON

    if player1_points == player2_points:
        return GameStatus.DEUCE

    if lead == 1 and min(player1_points, player2_points) >= DEUCE_THRESHOLD:
        return GameStatus.ADVANTAGE

    return GameStatus.IN_PROGRESS


class Game:
    """
    Points of a single game, regular or tie-break.

    Responsibilities:
    - Count points for both players
    - Keep the point history for audit
    - Derive the game status after every point
    - Render the in-game score
    """

    def __init__(self):
        # True for player 1, False for player 2
        self.history: List[bool] = []
        self._player1_points = 0
        self._player2_points = 0
        self._status = GameStatus.IN_PROGRESS
        self._is_tie_break = False

    @property
    def player1_points(self) -> int:
        return self._player1_points

    @property
    def player2_points(self) -> int:
        return self._player2_points

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_tie_break(self) -> bool:
        return self._is_tie_break

    @property
    def leader_is_player1(self) -> bool:
        return self._player1_points > self._player2_points

    # =========================================================
    # PUBLIC API
    # =========================================================

    def point_won_by(self, is_player1: bool, is_tie_break: bool) -> GameStatus:
        self.history.append(is_player1)

        if is_player1:
            self._player1_points += 1
        else:
            self._player2_points += 1

        self._is_tie_break = is_tie_break
        self._status = derive_status(
            self._player1_points,
            self._player2_points,
            is_tie_break,
        )

        return self._status

    # =========================================================
    # RENDERING
    # =========================================================

    def __str__(self) -> str:
        p1 = self._player1_points
        p2 = self._player2_points

        if self._status == GameStatus.IN_PROGRESS:
            return f"{POINT_LABELS[p1]}-{POINT_LABELS[p2]}"

        if self._status == GameStatus.TIE_BREAK:
            return f"{p1}-{p2}"

        if self._status == GameStatus.DEUCE:
            # 15-15 reads "15-all", 40-40 and beyond read "Deuce"
            if p1 < DEUCE_THRESHOLD:
                return f"{POINT_LABELS[p1]}-all"
            return "Deuce"

        if self._status == GameStatus.ADVANTAGE:
            return "Advantage"

        return ""

    def __repr__(self) -> str:
        return (
            f"Game(player1_points={self._player1_points}, "
            f"player2_points={self._player2_points}, status={self._status.name})"
        )
