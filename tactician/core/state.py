"""Game state contract searched by every strategy.

Search is generic over this contract, so the same algorithms drive any
two-player game as well as Nim (``tactician.nim``), whose known optimum is
used to sanity-check them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, Self, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterator

P = TypeVar("P", bound=Hashable)
A = TypeVar("A", bound=Hashable)


@dataclass(frozen=True)
class InProgress(Generic[P]):
    """The game is still running and ``current_turn`` must act next."""

    current_turn: P


@dataclass(frozen=True)
class Completed(Generic[P]):
    """The game has ended. ``winner`` is None for a draw."""

    winner: P | None


GameStatus = InProgress[P] | Completed[P]


class GameState(ABC, Generic[P, A]):
    """A mutable game position that search algorithms can copy and explore.

    Player and action values must be hashable and compare by value. Actions
    are treated as opaque: the engine never inspects them, it only passes them
    back to ``execute_action`` and uses them as dictionary keys.
    """

    @abstractmethod
    def make_copy(self) -> Self:
        """Create an independent copy to be mutated by search.

        Mutating the copy must never affect the original. State that only
        matters for display can be left out.
        """
        ...

    @abstractmethod
    def status(self) -> GameStatus[P]:
        """Return whose turn it is, or the winner if the game has ended."""
        ...

    @abstractmethod
    def legal_actions(self, player: P) -> Iterator[A]:
        """Lazily enumerate the actions ``player`` can legally take.

        Enumeration order is the move ordering used by search: it decides
        tie-breaks and how much alpha-beta can prune, never which actions are
        legal. A player who is not currently acting has no legal actions.
        """
        ...

    @abstractmethod
    def execute_action(self, player: P, action: A) -> None:
        """Apply ``action`` for ``player`` in place.

        Raises:
            InvalidAction: If the action is not currently legal for ``player``.
        """
        ...

    def first_legal_action(self, player: P) -> A | None:
        """First action in enumeration order, or None if there are none."""
        return next(iter(self.legal_actions(player)), None)
