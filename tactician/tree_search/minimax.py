"""Depth-limited minimax search.

Deadline handling: the deadline is checked before descending into each child,
so after it passes every open node returns at the next check. The overrun is
bounded by the cost of one child expansion (copy + execute) per open level of
recursion plus one evaluator call, never by the size of the remaining tree.

A node stopped by the deadline is marked truncated and its parent stops too,
without scoring it: a partial score is only a bound. The root therefore
reports the best of the children it evaluated completely, or no action if
there were none, in which case ``pick_action`` uses the first legal action.
"""

from __future__ import annotations

import logging
from abc import abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tactician.core.state import Completed
from tactician.core.strategy import SelectionAlgorithm
from tactician.tree_search.scored_action import ScoredAction

if TYPE_CHECKING:
    from tactician.core.deadline import Deadline
    from tactician.core.evaluator import StateEvaluator
    from tactician.core.state import GameState

logger = logging.getLogger(__name__)


class DepthLimitedSearch(SelectionAlgorithm):
    """Shared root handling for the minimax family.

    Subclasses implement ``run_search``, which returns the root ScoredAction
    so callers can inspect the backed-up score as well as the action.
    """

    search_depth: int

    @abstractmethod
    def run_search(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        player: Any,
    ) -> ScoredAction[Any]:
        """Search from ``state`` and return the root score and best action."""
        ...

    def pick_action(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        player: Any,
    ) -> Any:
        result = self.run_search(deadline, state, evaluator, player)
        if not result.has_action:
            # No root child was evaluated completely before the deadline
            fallback = state.first_legal_action(player)
            if fallback is not None:
                result.with_fallback_action(fallback)
        if result.truncated:
            logger.debug("%s: deadline exceeded, using best action so far", self.name)
        return result.action()


@dataclass(frozen=True)
class MinimaxAlgorithm(DepthLimitedSearch):
    """Plain minimax without pruning.

    Maximizes for ``player`` and minimizes for everyone else. Leaves (depth 0
    or a completed game) are scored by the evaluator from ``player``'s view.

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
        return self._search(deadline, state, evaluator, self.search_depth, player)

    def _search(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        depth: int,
        player: Any,
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
            child_result = self._search(deadline, child, evaluator, depth - 1, player)
            if child_result.truncated:
                return result.mark_truncated()
            score = child_result.score
            if maximizing:
                result.insert_max(action, score)
            else:
                result.insert_min(action, score)

        if not result.has_action:
            # No legal actions for the acting player: score the position as is
            return ScoredAction(evaluator.evaluate(state, player))
        return result

    @property
    def name(self) -> str:
        return f"Minimax({self.search_depth})"
