"""Position evaluator contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Sequence

S = TypeVar("S")


class StateEvaluator(ABC, Generic[S]):
    """Scores a game state from one player's point of view.

    Evaluators are used both as leaf heuristics for tree search and as
    outcome scoring for Monte Carlo playouts. They must not mutate the state
    they are given.
    """

    @abstractmethod
    def evaluate(self, state: S, side: Any) -> int:
        """Signed utility of ``state`` for ``side``; higher is better."""
        ...

    def start_search(self) -> None:
        """Called once at the start of every search that uses this evaluator.

        Evaluators holding per-search state (such as a random generator) reset
        it here, so one instance can be shared between agents and games.
        """


class CompoundEvaluator(StateEvaluator[S]):
    """Weighted sum of several evaluators.

    Example:
        CompoundEvaluator([(1_000, NimWinLossEvaluator()), (1, NimSumEvaluator())])
    """

    def __init__(self, evaluators: Sequence[tuple[int, StateEvaluator[S]]]) -> None:
        if not evaluators:
            msg = "CompoundEvaluator needs at least one evaluator"
            raise ValueError(msg)
        self.evaluators = tuple(evaluators)

    def start_search(self) -> None:
        for _, evaluator in self.evaluators:
            evaluator.start_search()

    def evaluate(self, state: S, side: Any) -> int:
        return sum(weight * evaluator.evaluate(state, side) for weight, evaluator in self.evaluators)
