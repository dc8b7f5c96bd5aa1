"""Depth 1 greedy search."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tactician.core.strategy import SelectionAlgorithm
from tactician.tree_search.scored_action import ScoredAction

if TYPE_CHECKING:
    from tactician.core.deadline import Deadline
    from tactician.core.evaluator import StateEvaluator
    from tactician.core.state import GameState


class SingleLevel(SelectionAlgorithm):
    """Tries every legal action once and keeps the one the evaluator likes best.

    The deadline is ignored: one copy and one evaluation per action is cheap
    and bounded. Optimal whenever the evaluator already accounts for the
    future, e.g. a perfect-play oracle.
    """

    def pick_action(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        player: Any,
    ) -> Any:
        result: ScoredAction[Any] = ScoredAction(float("-inf"))
        for action in state.legal_actions(player):
            child = state.make_copy()
            child.execute_action(player, action)
            result.insert_max(action, evaluator.evaluate(child, player))
        return result.action()
