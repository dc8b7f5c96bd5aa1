"""Round-robin Nim tournament between configured agents."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import Field, field_validator

from tactician.ai.config import AgentSpec  # noqa: TC001
from tactician.ai.registry import AgentRegistryBuilder
from tactician.config.base import StrictBaseModel
from tactician.eval.game import play_game
from tactician.nim.agents import NIM_EVALUATORS
from tactician.nim.state import NimPlayer, NimState

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from tactician.core.evaluator import StateEvaluator

logger = logging.getLogger(__name__)


class NimGameParams(StrictBaseModel):
    """Starting position for every tournament game."""

    piles: list[int] = Field(default_factory=lambda: [3, 4, 5], min_length=1)
    max_take: int | None = Field(default=None, ge=1)
    misere: bool = False

    @field_validator("piles")
    @classmethod
    def _non_negative(cls, piles: list[int]) -> list[int]:
        if any(size < 0 for size in piles):
            msg = f"Pile sizes must be non-negative, got {piles}"
            raise ValueError(msg)
        return piles

    def build(self) -> NimState:
        return NimState(self.piles, max_take=self.max_take, misere=self.misere)


class TournamentConfig(StrictBaseModel):
    """Round-robin tournament configuration."""

    agents: list[AgentSpec] = Field(min_length=2)
    games_per_matchup: int = Field(default=2, ge=1)
    move_time: float = Field(default=1.0, gt=0)
    max_turns: int | None = Field(default=None, ge=1)
    game: NimGameParams = Field(default_factory=NimGameParams)

    @field_validator("agents")
    @classmethod
    def _unique_names(cls, agents: list[AgentSpec]) -> list[AgentSpec]:
        names = [spec.name for spec in agents]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            msg = f"Duplicate agent names: {duplicates}"
            raise ValueError(msg)
        return agents


@dataclass
class MatchupResult:
    """Result of one matchup (A vs B over N games)."""

    agent_a: str
    agent_b: str
    wins_a: int
    draws: int
    wins_b: int

    @property
    def games(self) -> int:
        return self.wins_a + self.draws + self.wins_b

    def flipped(self) -> MatchupResult:
        """The same matchup seen from B's side."""
        return MatchupResult(
            agent_a=self.agent_b,
            agent_b=self.agent_a,
            wins_a=self.wins_b,
            draws=self.draws,
            wins_b=self.wins_a,
        )


@dataclass
class TournamentResult:
    """Full tournament results."""

    matchups: list[MatchupResult]
    agent_names: list[str]

    def matchup(self, a: str, b: str) -> MatchupResult | None:
        """Result of ``a`` vs ``b`` from ``a``'s perspective."""
        for m in self.matchups:
            if m.agent_a == a and m.agent_b == b:
                return m
            if m.agent_a == b and m.agent_b == a:
                return m.flipped()
        return None

    def points(self, name: str) -> float:
        """Chess-style score: 1 per win, 0.5 per draw."""
        total = 0.0
        for other in self.agent_names:
            m = self.matchup(name, other) if other != name else None
            if m:
                total += m.wins_a + 0.5 * m.draws
        return total

    def wdl_table(self) -> str:
        """W/D/L matrix, each cell from the row agent's perspective."""
        col_width = max(10, *(len(name) for name in self.agent_names))

        lines = ["Tournament Results (W/D/L from row's perspective)", "=" * 50]
        header = " " * (col_width + 2)
        for name in self.agent_names:
            header += f"{name:>{col_width}}  "
        lines.append(header)

        for row_name in self.agent_names:
            row = f"{row_name:<{col_width}}  "
            for col_name in self.agent_names:
                if row_name == col_name:
                    cell = "-"
                else:
                    m = self.matchup(row_name, col_name)
                    cell = f"{m.wins_a}/{m.draws}/{m.wins_b}" if m else "?"
                row += f"{cell:>{col_width}}  "
            lines.append(row)

        return "\n".join(lines)

    def standings_table(self) -> str:
        """Overall standings sorted by points, then wins."""
        totals: dict[str, list[int]] = {name: [0, 0, 0] for name in self.agent_names}
        for name in self.agent_names:
            for other in self.agent_names:
                m = self.matchup(name, other) if other != name else None
                if m:
                    totals[name][0] += m.wins_a
                    totals[name][1] += m.draws
                    totals[name][2] += m.wins_b

        ranked = sorted(
            self.agent_names,
            key=lambda n: (self.points(n), totals[n][0]),
            reverse=True,
        )

        name_width = max(15, *(len(name) + 2 for name in self.agent_names))
        width = 6 + name_width + 24
        lines = ["Standings", "=" * width]
        lines.append(f"{'Rank':<6}{'Agent':<{name_width}}{'W':>6}{'D':>6}{'L':>6}{'Pts':>6}")
        lines.append("-" * width)
        for i, name in enumerate(ranked, 1):
            wins, draws, losses = totals[name]
            lines.append(
                f"{i:<6}{name:<{name_width}}{wins:>6}{draws:>6}{losses:>6}"
                f"{self.points(name):>6.1f}"
            )

        return "\n".join(lines)


def run_tournament(
    config: TournamentConfig,
    evaluators: Mapping[str, Callable[[], StateEvaluator]] = NIM_EVALUATORS,
) -> TournamentResult:
    """Play every pair of agents ``games_per_matchup`` times.

    Games run one after another so each agent gets its full move time. Seats
    alternate between games, agent A moving first in even-numbered games.
    """
    builder = AgentRegistryBuilder()
    for spec in config.agents:
        builder.register_spec(spec, evaluators)
    registry = builder.build()
    agent_names = registry.names()

    pairs = list(itertools.combinations(agent_names, 2))
    logger.info(
        "Running %d games (%d matchups) between %s",
        len(pairs) * config.games_per_matchup,
        len(pairs),
        ", ".join(agent_names),
    )

    matchups: list[MatchupResult] = []
    for name_a, name_b in pairs:
        wins_a = wins_b = draws = 0
        for game_idx in range(config.games_per_matchup):
            seat_a = NimPlayer.ONE if game_idx % 2 == 0 else NimPlayer.TWO
            result = play_game(
                {seat_a: registry[name_a], seat_a.opponent: registry[name_b]},
                config.game.build(),
                move_time=config.move_time,
                max_turns=config.max_turns,
            )
            if result.winner is seat_a:
                wins_a += 1
            elif result.winner is seat_a.opponent:
                wins_b += 1
            else:
                draws += 1

        logger.info("%s vs %s: %d/%d/%d", name_a, name_b, wins_a, draws, wins_b)
        matchups.append(
            MatchupResult(agent_a=name_a, agent_b=name_b, wins_a=wins_a, draws=draws, wins_b=wins_b)
        )

    return TournamentResult(matchups=matchups, agent_names=agent_names)
