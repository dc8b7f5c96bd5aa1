"""Running best (score, action) pair used by the tree search algorithms."""

from __future__ import annotations

from typing import Generic, TypeVar

from tactician.core.errors import MissingAction

A = TypeVar("A")


class ScoredAction(Generic[A]):
    """Keeps track of an evaluator score and the action that produced it.

    Replacement is strict: an equal score never displaces the stored action,
    so among ties the first action inserted (enumeration order) is kept.

    Attributes:
        score: Best score seen so far, or the baseline if nothing beat it.
        truncated: True if the deadline stopped the search before every child
            was scored. A truncated score is only a bound and must not be
            compared against complete siblings.
    """

    def __init__(self, score: float) -> None:
        self.score = score
        self.truncated = False
        self._action: A | None = None
        self._has_action = False

    @property
    def has_action(self) -> bool:
        return self._has_action

    def action(self) -> A:
        """The action that produced ``score``.

        Raises:
            MissingAction: If nothing was ever inserted above the baseline.
        """
        if not self._has_action:
            msg = f"Expected action (score={self.score})"
            raise MissingAction(msg)
        return self._action  # type: ignore[return-value]

    def insert_max(self, action: A, score: float) -> None:
        """Store this action & score if the score is greater than the current one."""
        if score > self.score:
            self._set(action, score)

    def insert_min(self, action: A, score: float) -> None:
        """Store this action & score if the score is lower than the current one."""
        if score < self.score:
            self._set(action, score)

    def with_fallback_action(self, action: A) -> ScoredAction[A]:
        """Use ``action`` if no action has been stored yet. The score is unchanged."""
        if not self._has_action:
            self._action = action
            self._has_action = True
        return self

    def mark_truncated(self) -> ScoredAction[A]:
        """Flag this result as cut short by the deadline."""
        self.truncated = True
        return self

    def _set(self, action: A, score: float) -> None:
        self.score = score
        self._action = action
        self._has_action = True

    def __repr__(self) -> str:
        action = repr(self._action) if self._has_action else "None"
        suffix = ", truncated" if self.truncated else ""
        return f"ScoredAction(score={self.score}, action={action}{suffix})"
