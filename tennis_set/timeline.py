from typing import Iterable, List

from tennis_set.match import Match
from tennis_set.models import MatchSnapshot


def build_score_timeline(player1: str, player2: str, winners: Iterable[str]) -> List[MatchSnapshot]:
    """
    Plays winners (player names) on a fresh Match.
    Returns one snapshot after each point, stopping once the set is over.
    Does NOT mutate external state.
    """

    match = Match(player1, player2)

    timeline: List[MatchSnapshot] = []

    for winner in winners:

        match.point_won_by_strict(winner)

        timeline.append(match.snapshot())

        if match.is_over:
            break

    return timeline
