"""Search strategy contract shared by tree search and Monte Carlo search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tactician.core.deadline import Deadline
    from tactician.core.evaluator import StateEvaluator
    from tactician.core.state import GameState


class SelectionAlgorithm(ABC):
    """Chooses an action for ``player`` by exploring copies of a state.

    Implementations never mutate ``state``. Callers guarantee that ``player``
    is the acting player and has at least one legal action.
    """

    @abstractmethod
    def pick_action(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        player: Any,
    ) -> Any:
        """Return a legal action for ``player``.

        When the deadline passes, return the best action found so far instead
        of raising.
        """
        ...

    @property
    def name(self) -> str:
        """Human-readable name for this strategy."""
        return self.__class__.__name__
