"""Reference Nim agents and the default Nim agent registry."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tactician.ai.base import AgentData
from tactician.ai.registry import AgentName, AgentRegistryBuilder
from tactician.mcts.monte_carlo import MonteCarloAlgorithm, RandomPlayoutEvaluator
from tactician.nim.evaluators import NimPerfectEvaluator, NimSumEvaluator, NimWinLossEvaluator
from tactician.tree_search import AlphaBetaAlgorithm, MinimaxAlgorithm, SingleLevel

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from tactician.ai.registry import AgentRegistry
    from tactician.core.evaluator import StateEvaluator
    from tactician.nim.state import NimState

# Evaluator factories addressable from agent configs
NIM_EVALUATORS: Mapping[str, Callable[[], StateEvaluator]] = {
    "win_loss": NimWinLossEvaluator,
    "perfect": NimPerfectEvaluator,
    "nim_sum": NimSumEvaluator,
    "random_playout": RandomPlayoutEvaluator,
}

NIM_PERFECT_AGENT: AgentData[NimState] = AgentData.omniscient(
    "PERFECT", SingleLevel(), NimPerfectEvaluator()
)

NIM_MINIMAX_AGENT: AgentData[NimState] = AgentData.omniscient(
    "MINIMAX", MinimaxAlgorithm(search_depth=25), NimWinLossEvaluator()
)

NIM_ALPHA_BETA_AGENT: AgentData[NimState] = AgentData.omniscient(
    "ALPHA_BETA", AlphaBetaAlgorithm(search_depth=25), NimWinLossEvaluator()
)

NIM_UCT1_AGENT: AgentData[NimState] = AgentData.omniscient(
    "UCT1", MonteCarloAlgorithm(), RandomPlayoutEvaluator()
)


def build_nim_registry() -> AgentRegistry:
    """Registry of the reference Nim agents, keyed by AgentName."""
    return (
        AgentRegistryBuilder()
        .register(AgentName.PERFECT, NIM_PERFECT_AGENT)
        .register(AgentName.MINIMAX, NIM_MINIMAX_AGENT)
        .register(AgentName.ALPHA_BETA, NIM_ALPHA_BETA_AGENT)
        .register(AgentName.UCT1, NIM_UCT1_AGENT)
        .build()
    )
