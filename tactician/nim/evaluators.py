"""State evaluators for Nim."""

from __future__ import annotations

from tactician.core.evaluator import StateEvaluator
from tactician.core.state import Completed
from tactician.nim.oracle import is_winning, nim_sum
from tactician.nim.state import NimPlayer, NimState

WIN_SCORE = 1
LOSS_SCORE = -1


def _outcome(state: NimState, side: NimPlayer) -> int | None:
    status = state.status()
    if isinstance(status, Completed):
        return WIN_SCORE if status.winner == side else LOSS_SCORE
    return None


class NimWinLossEvaluator(StateEvaluator[NimState]):
    """+1 for a win, -1 for a loss, 0 while the game is still running."""

    def evaluate(self, state: NimState, side: NimPlayer) -> int:
        outcome = _outcome(state, side)
        return 0 if outcome is None else outcome


class NimPerfectEvaluator(StateEvaluator[NimState]):
    """Oracle-backed evaluator: +1 if ``side`` wins with perfect play, else -1.

    Paired with SingleLevel this gives a perfect player.
    """

    def evaluate(self, state: NimState, side: NimPlayer) -> int:
        outcome = _outcome(state, side)
        if outcome is not None:
            return outcome
        mover_wins = is_winning(state)
        return WIN_SCORE if mover_wins == (state.turn == side) else LOSS_SCORE


class NimSumEvaluator(StateEvaluator[NimState]):
    """Heuristic: the nim-sum, positive when ``side`` is to move.

    A large nim-sum for the mover is never worse than a zero one. Gives many
    distinct scores, which makes it useful for exercising pruning.
    """

    completion_score = 1_000

    def evaluate(self, state: NimState, side: NimPlayer) -> int:
        outcome = _outcome(state, side)
        if outcome is not None:
            return outcome * self.completion_score
        value = nim_sum(state)
        return value if state.turn == side else -value
