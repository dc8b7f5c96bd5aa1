"""The game of Nim, used to check search strategies against a known optimum.

Players alternate removing objects from one pile. Under normal play the
player who takes the last object wins (equivalently, the player left with
nothing to take loses); under misère play that player loses instead. An
optional ``max_take`` turns the game into a subtraction game.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Self

from tactician.core.errors import InvalidAction
from tactician.core.state import Completed, GameState, GameStatus, InProgress

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


class NimPlayer(Enum):
    ONE = 1
    TWO = 2

    @property
    def opponent(self) -> NimPlayer:
        return NimPlayer.TWO if self is NimPlayer.ONE else NimPlayer.ONE


@dataclass(frozen=True, order=True)
class NimAction:
    """Take ``amount`` objects from pile number ``pile``."""

    pile: int
    amount: int

    def __str__(self) -> str:
        return f"take {self.amount} from {pile_label(self.pile)}"


def pile_label(pile: int) -> str:
    """Letter name of a pile: 0 -> 'a', 1 -> 'b', ..."""
    return chr(ord("a") + pile)


class NimState(GameState[NimPlayer, NimAction]):
    """Nim position.

    Attributes:
        piles: Objects remaining in each pile.
        turn: Player to move next (or, once every pile is empty, the player
            who would have moved).
        max_take: Most objects one move may take (None = unlimited).
        misere: If True, taking the last object loses.
    """

    def __init__(
        self,
        piles: Sequence[int],
        turn: NimPlayer = NimPlayer.ONE,
        *,
        max_take: int | None = None,
        misere: bool = False,
    ) -> None:
        if not piles:
            msg = "Nim needs at least one pile"
            raise ValueError(msg)
        if any(size < 0 for size in piles):
            msg = f"Pile sizes must be non-negative, got {list(piles)}"
            raise ValueError(msg)
        if max_take is not None and max_take < 1:
            msg = f"max_take must be at least 1, got {max_take}"
            raise ValueError(msg)
        self.piles = list(piles)
        self.turn = turn
        self.max_take = max_take
        self.misere = misere

    @classmethod
    def new(cls, size: int, piles: int = 3, **kwargs: object) -> Self:
        """Start a game with ``piles`` piles of ``size`` objects each."""
        return cls([size] * piles, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def with_piles(cls, *sizes: int, **kwargs: object) -> Self:
        """Start a game with the given pile sizes."""
        return cls(sizes, **kwargs)  # type: ignore[arg-type]

    @property
    def is_over(self) -> bool:
        return not any(self.piles)

    def make_copy(self) -> Self:
        return type(self)(self.piles, self.turn, max_take=self.max_take, misere=self.misere)

    def status(self) -> GameStatus[NimPlayer]:
        if self.is_over:
            # ``turn`` is the player left with nothing to take
            winner = self.turn if self.misere else self.turn.opponent
            return Completed(winner)
        return InProgress(self.turn)

    def legal_actions(self, player: NimPlayer) -> Iterator[NimAction]:
        if player is not self.turn or self.is_over:
            return
        for pile, size in enumerate(self.piles):
            limit = size if self.max_take is None else min(size, self.max_take)
            for amount in range(1, limit + 1):
                yield NimAction(pile, amount)

    def execute_action(self, player: NimPlayer, action: NimAction) -> None:
        if self.is_over:
            msg = f"Game is over, cannot {action}"
            raise InvalidAction(msg)
        if player is not self.turn:
            msg = f"Not {player.name}'s turn (expected {self.turn.name})"
            raise InvalidAction(msg)
        if not 0 <= action.pile < len(self.piles):
            msg = f"No pile {action.pile} (have {len(self.piles)})"
            raise InvalidAction(msg)
        size = self.piles[action.pile]
        limit = size if self.max_take is None else min(size, self.max_take)
        if not 1 <= action.amount <= limit:
            msg = f"Cannot {action}: pile holds {size}, limit {limit}"
            raise InvalidAction(msg)

        self.piles[action.pile] -= action.amount
        self.turn = self.turn.opponent

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NimState):
            return NotImplemented
        return (
            self.piles == other.piles
            and self.turn is other.turn
            and self.max_take == other.max_take
            and self.misere == other.misere
        )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        piles = "  ".join(f"{pile_label(i)}:{size}" for i, size in enumerate(self.piles))
        return f"[{piles}] {self.turn.name} to move"

    def __repr__(self) -> str:
        return (
            f"NimState(piles={self.piles}, turn={self.turn}, "
            f"max_take={self.max_take}, misere={self.misere})"
        )
