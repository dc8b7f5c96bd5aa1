"""Exceptions raised by the search engine.

Running out of time is not an error: every strategy returns the best action it
found so far. These exceptions cover the cases where there is genuinely nothing
sensible to return.
"""

from __future__ import annotations


class SearchError(Exception):
    """Base class for all search engine errors."""


class NoLegalAction(SearchError):
    """The acting player has no legal action, or the game is already over."""


class InvalidAction(SearchError):
    """An action was executed that is not legal in the current state."""


class MissingAction(SearchError):
    """A ScoredAction was queried before any action was inserted.

    Agents check for legal actions before searching, so seeing this means a
    strategy broke its own invariant.
    """


class UnknownAgent(SearchError, KeyError):
    """No agent is registered under the requested name."""
