import argparse
import sys

from loguru import logger

from tennis_set.config import DEFAULT_PLAYER_1, DEFAULT_PLAYER_2
from tennis_set.exceptions import ScoreError
from tennis_set.match import Match
from tennis_set.timeline import build_score_timeline


# (points to play, expected score afterwards)
SCENARIOS = [
    ([DEFAULT_PLAYER_1, DEFAULT_PLAYER_2], "0-0, 15-all"),
    ([DEFAULT_PLAYER_1, DEFAULT_PLAYER_1], "0-0, 40-15"),
    ([DEFAULT_PLAYER_2, DEFAULT_PLAYER_2], "0-0, Deuce"),
    ([DEFAULT_PLAYER_1], "0-0, Advantage player 1"),
    ([DEFAULT_PLAYER_1], "1-0"),
    ([DEFAULT_PLAYER_1], "1-0, 15-0"),
]


def run_scenarios() -> bool:
    match = Match(DEFAULT_PLAYER_1, DEFAULT_PLAYER_2)
    all_passed = True

    for points, expected in SCENARIOS:
        for name in points:
            match.point_won_by(name)

        result = match.score()
        print(result)

        if result == expected:
            print("passed")
        else:
            print(f"failed: {expected}")
            all_passed = False

    return all_passed


def run_points(player1: str, player2: str, tokens: str) -> None:
    names = {"1": player1, "2": player2}
    winners = [names.get(t, t) for t in tokens.split()]

    timeline = build_score_timeline(player1, player2, winners)
    logger.info(f"Played {len(timeline)} of {len(winners)} points")

    for index, snapshot in enumerate(timeline, 1):
        print(f"{index:>3}  {snapshot.score}")

    if timeline and timeline[-1].is_over:
        print("Set over")


def main():
    ap = argparse.ArgumentParser(description="Score a single tennis set point by point")
    ap.add_argument("--player1", type=str, default=DEFAULT_PLAYER_1)
    ap.add_argument("--player2", type=str, default=DEFAULT_PLAYER_2)
    ap.add_argument(
        "--points",
        type=str,
        default="",
        help='Space separated winners, "1"/"2" or a player name, e.g. "1 2 1 1"',
    )
    args = ap.parse_args()

    if not args.points:
        sys.exit(0 if run_scenarios() else 1)

    try:
        run_points(args.player1, args.player2, args.points)
    except ScoreError as e:
        print("❌ ERROR:", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
