"""Lookup of configured agents by name."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

from tactician.core.errors import UnknownAgent

if TYPE_CHECKING:
    from collections.abc import Callable

    from tactician.ai.base import Agent
    from tactician.ai.config import AgentSpec
    from tactician.core.evaluator import StateEvaluator


class AgentName(StrEnum):
    """Names of the reference agents."""

    PERFECT = "perfect"
    MINIMAX = "minimax"
    ALPHA_BETA = "alpha_beta"
    UCT1 = "uct1"


class AgentRegistry(Mapping[str, "Agent"]):
    """Immutable name -> agent mapping. Build one with AgentRegistryBuilder."""

    def __init__(self, agents: Mapping[str, Agent]) -> None:
        self._agents: Mapping[str, Agent] = MappingProxyType(dict(agents))

    def __getitem__(self, name: str) -> Agent:
        try:
            return self._agents[name]
        except KeyError:
            msg = f"No agent named {name!r}, known agents: {', '.join(self._agents)}"
            raise UnknownAgent(msg) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._agents)

    def __len__(self) -> int:
        return len(self._agents)

    def names(self) -> list[str]:
        """Registered names, in registration order."""
        return list(self._agents)

    def __repr__(self) -> str:
        return f"AgentRegistry({self.names()})"


class AgentRegistryBuilder:
    def __init__(self) -> None:
        self._agents: dict[str, Agent] = {}

    def register(self, name: str, agent: Agent) -> Self:
        """Add ``agent`` under ``name``.

        Raises:
            ValueError: If ``name`` is already registered.
        """
        key = str(name)
        if key in self._agents:
            msg = f"Agent {key!r} is already registered"
            raise ValueError(msg)
        self._agents[key] = agent
        return self

    def register_spec(
        self, spec: AgentSpec, evaluators: Mapping[str, Callable[[], StateEvaluator]]
    ) -> Self:
        """Build ``spec`` and register it under ``spec.name``."""
        return self.register(spec.name, spec.build(evaluators))

    def build(self) -> AgentRegistry:
        return AgentRegistry(self._agents)
