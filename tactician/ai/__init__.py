"""Agents, their declarative configs and the named-agent registry."""

from __future__ import annotations

from tactician.ai.base import Agent, AgentData
from tactician.ai.config import (
    AgentSpec,
    AlphaBetaConfig,
    MinimaxConfig,
    MonteCarloConfig,
    SingleLevelConfig,
    StrategyConfig,
)
from tactician.ai.registry import AgentName, AgentRegistry, AgentRegistryBuilder

__all__ = [
    "Agent",
    "AgentData",
    "AgentName",
    "AgentRegistry",
    "AgentRegistryBuilder",
    "AgentSpec",
    "AlphaBetaConfig",
    "MinimaxConfig",
    "MonteCarloConfig",
    "SingleLevelConfig",
    "StrategyConfig",
]
