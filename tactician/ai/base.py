"""Agents: a search strategy bound to an evaluator."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from tactician.core.errors import NoLegalAction
from tactician.core.state import Completed, GameState

if TYPE_CHECKING:
    from tactician.core.deadline import Deadline
    from tactician.core.evaluator import StateEvaluator
    from tactician.core.strategy import SelectionAlgorithm

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=GameState)


class Agent(ABC, Generic[S]):
    """Base class for game-playing agents.

    Agents receive the current game state and a deadline, and return one
    legal action for the player whose turn it is. They must not modify the
    state they are given.
    """

    @abstractmethod
    def pick_action(self, deadline: Deadline, state: S) -> Any:
        """Select an action for the acting player.

        Args:
            deadline: Time by which an action must be returned.
            state: Current game state. DO NOT modify this.

        Returns:
            A legal action for the player whose turn it is.

        Raises:
            NoLegalAction: If the game is over or the acting player has no
                legal actions.
        """
        ...

    @property
    def name(self) -> str:
        """Human-readable name for this agent."""
        return self.__class__.__name__


class AgentData(Agent[S]):
    """Agent built from a strategy and an evaluator.

    Instances expose read-only properties only and can be shared freely between
    games; all per-call search state lives inside ``pick_action``.

    Omniscient agents are allowed to see information that is normally hidden
    from a player, such as the opponent's hand. They exist for deterministic
    testing and benchmarking.
    """

    def __init__(
        self,
        name: str,
        strategy: SelectionAlgorithm,
        evaluator: StateEvaluator,
        *,
        omniscient: bool = False,
    ) -> None:
        self._name = name
        self._strategy = strategy
        self._evaluator = evaluator
        self._omniscient = omniscient

    @classmethod
    def omniscient(
        cls, name: str, strategy: SelectionAlgorithm, evaluator: StateEvaluator
    ) -> AgentData[S]:
        """Build an agent that may see hidden information."""
        return cls(name, strategy, evaluator, omniscient=True)

    @property
    def name(self) -> str:
        return self._name

    @property
    def strategy(self) -> SelectionAlgorithm:
        return self._strategy

    @property
    def evaluator(self) -> StateEvaluator:
        return self._evaluator

    @property
    def is_omniscient(self) -> bool:
        return self._omniscient

    def pick_action(self, deadline: Deadline, state: S) -> Any:
        status = state.status()
        if isinstance(status, Completed):
            msg = f"{self.name}: game is over (winner={status.winner}), nothing to choose"
            raise NoLegalAction(msg)

        player = status.current_turn
        if state.first_legal_action(player) is None:
            msg = f"{self.name}: player {player} has no legal actions"
            raise NoLegalAction(msg)

        action = self._strategy.pick_action(deadline, state, self._evaluator, player)
        logger.debug("%s picked %r for %s", self.name, action, player)
        return action

    def __repr__(self) -> str:
        return (
            f"AgentData(name={self._name!r}, strategy={self._strategy.name}, "
            f"evaluator={type(self._evaluator).__name__}, omniscient={self._omniscient})"
        )
