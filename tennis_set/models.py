from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    # 0-0, 1-1, 2-2, 3-3, 4-4...
    DEUCE = "deuce"
    # 4-3, 3-4, 5-4...
    ADVANTAGE = "advantage"
    WON = "won"
    TIE_BREAK = "tie_break"


@dataclass(frozen=True)
class MatchSnapshot:
    player1: str
    player2: str
    player1_games: int
    player2_games: int
    player1_points: int
    player2_points: int
    status: Optional[GameStatus]
    is_tie_break: bool
    is_over: bool
    score: str
