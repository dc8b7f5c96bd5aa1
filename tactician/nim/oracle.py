"""Closed-form optimal play for Nim.

Normal play: a position is lost for the player to move iff the XOR of the
pile Grundy values is zero. Without a take limit a pile's Grundy value is its
size; with ``max_take = k`` it is ``size % (k + 1)``.

Misère play (unlimited takes only): identical, except when no pile holds more
than one object, where the player to move wins iff an even number of piles
is non-empty.
"""

from __future__ import annotations

from functools import reduce
from operator import xor
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tactician.nim.state import NimAction, NimState


def grundy_value(size: int, max_take: int | None = None) -> int:
    """Grundy value of a single pile."""
    return size if max_take is None else size % (max_take + 1)


def nim_sum(state: NimState) -> int:
    """XOR of the Grundy values of every pile."""
    return reduce(xor, (grundy_value(size, state.max_take) for size in state.piles), 0)


def has_closed_form(state: NimState) -> bool:
    """Whether the oracle can solve positions of this rule variant."""
    return not (state.misere and state.max_take is not None)


def is_winning(state: NimState) -> bool:
    """Whether the player to move wins with perfect play.

    Raises:
        ValueError: For misère play with a take limit, which has no simple
            closed form.
    """
    if not state.misere:
        return nim_sum(state) != 0
    if not has_closed_form(state):
        msg = "No closed-form oracle for misère Nim with a take limit"
        raise ValueError(msg)
    if all(size <= 1 for size in state.piles):
        return sum(state.piles) % 2 == 0
    return nim_sum(state) != 0


def winning_actions(state: NimState) -> list[NimAction]:
    """Actions that leave the opponent in a lost position, in enumeration order."""
    result = []
    for action in state.legal_actions(state.turn):
        child = state.make_copy()
        child.execute_action(state.turn, action)
        if not is_winning(child):
            result.append(action)
    return result


def is_perfect_action(state: NimState, action: NimAction) -> bool:
    """Whether ``action`` is consistent with perfect play.

    From a lost position every legal action is equally good.
    """
    if not is_winning(state):
        return True
    return action in winning_actions(state)
