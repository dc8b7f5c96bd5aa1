"""Alpha-beta pruning over minimax tree search.

This is the 'fail soft' variant: a node returns the best score it actually
saw, which may lie outside the [alpha, beta] window it was given. Pruning only
skips subtrees that cannot change the result, so for a fixed move ordering and
depth the chosen action is identical to ``MinimaxAlgorithm``'s.

See <https://en.wikipedia.org/wiki/Alpha-beta_pruning>

Deadline handling matches ``tactician.tree_search.minimax``: one check before
each child, so the overrun is at most one child expansion per open level plus
one evaluator call. Truncated children are never scored, so a partial bound
never displaces a fully evaluated sibling.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tactician.core.state import Completed
from tactician.tree_search.minimax import DepthLimitedSearch
from tactician.tree_search.scored_action import ScoredAction

if TYPE_CHECKING:
    from tactician.core.deadline import Deadline
    from tactician.core.evaluator import StateEvaluator
    from tactician.core.state import GameState


@dataclass(frozen=True)
class AlphaBetaAlgorithm(DepthLimitedSearch):
    """Minimax with alpha-beta pruning.

    Attributes:
        search_depth: Maximum number of plies to look ahead.
    """

    search_depth: int

    def run_search(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        player: Any,
    ) -> ScoredAction[Any]:
        return self._search(
            deadline, state, evaluator, self.search_depth, player, float("-inf"), float("inf")
        )

    def _search(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        depth: int,
        player: Any,
        alpha: float,
        beta: float,
    ) -> ScoredAction[Any]:
        status = state.status()
        if depth == 0 or isinstance(status, Completed):
            return ScoredAction(evaluator.evaluate(state, player))

        current = status.current_turn
        maximizing = current == player
        result: ScoredAction[Any] = ScoredAction(float("-inf") if maximizing else float("inf"))
        for action in state.legal_actions(current):
            if deadline.exceeded():
                return result.mark_truncated()
            child = state.make_copy()
            child.execute_action(current, action)
            child_result = self._search(deadline, child, evaluator, depth - 1, player, alpha, beta)
            if child_result.truncated:
                return result.mark_truncated()
            score = child_result.score
            if maximizing:
                result.insert_max(action, score)
                alpha = max(alpha, score)
            else:
                result.insert_min(action, score)
                beta = min(beta, score)
            if beta <= alpha:
                break  # cutoff

        if not result.has_action:
            # No legal actions for the acting player: score the position as is
            return ScoredAction(evaluator.evaluate(state, player))
        return result

    @property
    def name(self) -> str:
        return f"AlphaBeta({self.search_depth})"
