"""Multi-game evaluation of two agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from tactician.eval.game import GameResult, play_game

if TYPE_CHECKING:
    from collections.abc import Callable

    from tactician.ai.base import Agent
    from tactician.core.state import GameState

logger = logging.getLogger(__name__)


@dataclass
class EvalResult:
    """Aggregated results from multiple games.

    Attributes:
        n_games: Total games played.
        agent1_wins: Games won by agent 1.
        agent2_wins: Games won by agent 2.
        draws: Games ending in a draw (or unfinished).
        games: Individual game results.
    """

    n_games: int
    agent1_wins: int
    agent2_wins: int
    draws: int
    games: list[GameResult]

    @property
    def agent1_win_rate(self) -> float:
        """Win rate for agent 1 (excluding draws)."""
        decided = self.agent1_wins + self.agent2_wins
        return self.agent1_wins / decided if decided > 0 else 0.5

    def summary(self, agent1_name: str = "Agent1", agent2_name: str = "Agent2") -> str:
        """Human-readable summary."""
        games = max(self.n_games, 1)
        lines = [
            f"Evaluation: {agent1_name} vs {agent2_name}",
            f"Games: {self.n_games}",
            f"{agent1_name} wins: {self.agent1_wins} ({self.agent1_wins / games:.1%})",
            f"{agent2_name} wins: {self.agent2_wins} ({self.agent2_wins / games:.1%})",
            f"Draws: {self.draws} ({self.draws / games:.1%})",
        ]
        return "\n".join(lines)


def evaluate(
    agent1: Agent,
    agent2: Agent,
    make_state: Callable[[], GameState],
    players: tuple[Any, Any],
    n_games: int = 10,
    *,
    alternate_sides: bool = True,
    move_time: float = 1.0,
    max_turns: int | None = None,
) -> EvalResult:
    """Play ``n_games`` between two agents.

    Args:
        agent1: First agent, playing ``players[0]`` in even-numbered games.
        agent2: Second agent.
        make_state: Builds a fresh starting position for each game.
        players: The two seats, in turn order.
        n_games: Number of games to play.
        alternate_sides: If True, agents swap seats every other game.
        move_time: Seconds per move.
        max_turns: Optional per-game action limit.
    """
    first, second = players
    games: list[GameResult] = []
    agent1_wins = agent2_wins = draws = 0

    for i in range(n_games):
        swapped = alternate_sides and i % 2 == 1
        agent1_seat, agent2_seat = (second, first) if swapped else (first, second)

        result = play_game(
            {agent1_seat: agent1, agent2_seat: agent2},
            make_state(),
            move_time=move_time,
            max_turns=max_turns,
        )
        games.append(result)

        if result.winner == agent1_seat:
            agent1_wins += 1
            winner_name = agent1.name
        elif result.winner == agent2_seat:
            agent2_wins += 1
            winner_name = agent2.name
        else:
            draws += 1
            winner_name = "Draw"

        logger.info(
            "Game %d/%d: %s as %s vs %s, %d turns - %s",
            i + 1,
            n_games,
            agent1.name,
            agent1_seat,
            agent2.name,
            result.turns,
            winner_name,
        )

    return EvalResult(
        n_games=n_games,
        agent1_wins=agent1_wins,
        agent2_wins=agent2_wins,
        draws=draws,
        games=games,
    )
