"""Declarative agent configuration.

Strategies use a discriminated union on ``variant``; each config builds the
corresponding SelectionAlgorithm. An AgentSpec pairs a strategy with the key
of an evaluator factory, so agents can be described entirely in YAML.

Example YAML:
    agents:
      - name: perfect
        strategy: {variant: single_level}
        evaluator: perfect
      - name: alpha_beta_4
        strategy: {variant: alpha_beta, search_depth: 4}
        evaluator: nim_sum
      - name: uct1
        strategy: {variant: uct1, exploration: 1.0, max_iterations: 2000}
        evaluator: random_playout
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import Field

from tactician.config.base import StrictBaseModel

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from tactician.ai.base import AgentData
    from tactician.core.evaluator import StateEvaluator
    from tactician.core.strategy import SelectionAlgorithm


class StrategyConfigBase(StrictBaseModel):
    """Base class for strategy configurations."""

    @abstractmethod
    def build(self) -> SelectionAlgorithm:
        """Construct the configured selection algorithm."""
        ...


class SingleLevelConfig(StrategyConfigBase):
    variant: Literal["single_level"] = "single_level"

    def build(self) -> SelectionAlgorithm:
        from tactician.tree_search.single_level import SingleLevel

        return SingleLevel()


class MinimaxConfig(StrategyConfigBase):
    variant: Literal["minimax"] = "minimax"
    search_depth: int = Field(default=4, ge=1)

    def build(self) -> SelectionAlgorithm:
        from tactician.tree_search.minimax import MinimaxAlgorithm

        return MinimaxAlgorithm(search_depth=self.search_depth)


class AlphaBetaConfig(StrategyConfigBase):
    variant: Literal["alpha_beta"] = "alpha_beta"
    search_depth: int = Field(default=4, ge=1)

    def build(self) -> SelectionAlgorithm:
        from tactician.tree_search.alpha_beta import AlphaBetaAlgorithm

        return AlphaBetaAlgorithm(search_depth=self.search_depth)


class MonteCarloConfig(StrategyConfigBase):
    """UCT Monte Carlo search.

    ``max_iterations`` caps the search independently of the deadline, which
    makes runs reproducible when the evaluator is seeded.
    """

    variant: Literal["uct1"] = "uct1"
    exploration: float = Field(default=1.0, ge=0.0)
    max_iterations: int | None = Field(default=None, ge=1)

    def build(self) -> SelectionAlgorithm:
        from tactician.mcts.monte_carlo import MonteCarloAlgorithm
        from tactician.mcts.uct1 import Uct1

        return MonteCarloAlgorithm(
            child_score_algorithm=Uct1(exploration=self.exploration),
            max_iterations=self.max_iterations,
        )


StrategyConfig = Annotated[
    SingleLevelConfig | MinimaxConfig | AlphaBetaConfig | MonteCarloConfig,
    Field(discriminator="variant"),
]


class AgentSpec(StrictBaseModel):
    """A named agent: strategy config plus evaluator key."""

    name: str = Field(min_length=1)
    strategy: StrategyConfig
    evaluator: str
    omniscient: bool = False

    def build(self, evaluators: Mapping[str, Callable[[], StateEvaluator]]) -> AgentData:
        """Build the agent, instantiating its evaluator from ``evaluators``.

        Raises:
            ValueError: If ``evaluator`` is not a key of ``evaluators``.
        """
        from tactician.ai.base import AgentData

        try:
            make_evaluator = evaluators[self.evaluator]
        except KeyError:
            msg = (
                f"Agent {self.name!r}: unknown evaluator {self.evaluator!r}, "
                f"expected one of {sorted(evaluators)}"
            )
            raise ValueError(msg) from None
        return AgentData(
            self.name,
            self.strategy.build(),
            make_evaluator(),
            omniscient=self.omniscient,
        )
