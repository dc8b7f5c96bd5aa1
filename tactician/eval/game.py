"""Single game execution between agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from tactician.core.deadline import Deadline
from tactician.core.state import Completed

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tactician.ai.base import Agent
    from tactician.core.state import GameState

logger = logging.getLogger(__name__)


@dataclass
class GameResult:
    """Result of a single game.

    Attributes:
        winner: Winning player, or None for a draw or an unfinished game.
        turns: Number of actions played.
        actions: ``(player, action)`` pairs in the order they were played.
        completed: False if the game was stopped by ``max_turns``.
    """

    winner: Any | None
    turns: int
    actions: list[tuple[Any, Any]] = field(default_factory=list)
    completed: bool = True


def play_game(
    agents: Mapping[Any, Agent],
    state: GameState,
    *,
    move_time: float = 1.0,
    max_turns: int | None = None,
) -> GameResult:
    """Play ``state`` to the end, asking ``agents[player]`` for each move.

    Only this function mutates ``state``; agents receive it read-only and a
    fresh deadline of ``move_time`` seconds per move.

    Args:
        agents: Agent for each player.
        state: Starting position, advanced in place.
        move_time: Seconds each agent gets per move.
        max_turns: Stop after this many actions (None = play to completion).

    Returns:
        GameResult with the winner and the full action history.

    Raises:
        InvalidAction: If an agent returns an illegal action.
        ValueError: If no agent is given for the acting player.
    """
    history: list[tuple[Any, Any]] = []
    while True:
        status = state.status()
        if isinstance(status, Completed):
            logger.debug("Game over after %d turns, winner %s", len(history), status.winner)
            return GameResult(winner=status.winner, turns=len(history), actions=history)

        if max_turns is not None and len(history) >= max_turns:
            logger.debug("Game stopped at the %d turn limit", max_turns)
            return GameResult(winner=None, turns=len(history), actions=history, completed=False)

        player = status.current_turn
        agent = agents.get(player)
        if agent is None:
            msg = f"No agent for player {player}"
            raise ValueError(msg)

        action = agent.pick_action(Deadline.after(move_time), state)
        state.execute_action(player, action)
        history.append((player, action))
        logger.debug("Turn %d: %s (%s) played %s", len(history), player, agent.name, action)
