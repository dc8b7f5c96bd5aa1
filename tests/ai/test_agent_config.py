"""Tests for declarative strategy and agent configs."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from tactician.ai.config import (
    AgentSpec,
    AlphaBetaConfig,
    MinimaxConfig,
    MonteCarloConfig,
    SingleLevelConfig,
    StrategyConfig,
)
from tactician.mcts import MonteCarloAlgorithm, RandomPlayoutEvaluator, Uct1
from tactician.nim import NIM_EVALUATORS, NimSumEvaluator
from tactician.tree_search import AlphaBetaAlgorithm, MinimaxAlgorithm, SingleLevel

STRATEGY = TypeAdapter(StrategyConfig)


class TestStrategyConfig:
    def test_discriminates_on_variant(self) -> None:
        """The variant field selects the config class."""
        assert isinstance(STRATEGY.validate_python({"variant": "single_level"}), SingleLevelConfig)
        assert isinstance(
            STRATEGY.validate_python({"variant": "minimax", "search_depth": 3}), MinimaxConfig
        )
        assert isinstance(STRATEGY.validate_python({"variant": "alpha_beta"}), AlphaBetaConfig)
        assert isinstance(STRATEGY.validate_python({"variant": "uct1"}), MonteCarloConfig)

    def test_unknown_variant_rejected(self) -> None:
        with pytest.raises(ValidationError):
            STRATEGY.validate_python({"variant": "expectimax"})

    def test_depth_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            AlphaBetaConfig(search_depth=0)

    def test_rejects_typos(self) -> None:
        with pytest.raises(ValidationError):
            STRATEGY.validate_python({"variant": "minimax", "serach_depth": 3})

    def test_builds_algorithms(self) -> None:
        assert isinstance(SingleLevelConfig().build(), SingleLevel)
        assert MinimaxConfig(search_depth=3).build() == MinimaxAlgorithm(search_depth=3)
        assert AlphaBetaConfig(search_depth=5).build() == AlphaBetaAlgorithm(search_depth=5)

    def test_builds_monte_carlo(self) -> None:
        algorithm = MonteCarloConfig(exploration=0.5, max_iterations=100).build()
        assert isinstance(algorithm, MonteCarloAlgorithm)
        assert algorithm.child_score_algorithm == Uct1(exploration=0.5)
        assert algorithm.max_iterations == 100


class TestAgentSpec:
    def test_builds_agent(self) -> None:
        spec = AgentSpec.model_validate(
            {
                "name": "shallow",
                "strategy": {"variant": "alpha_beta", "search_depth": 2},
                "evaluator": "nim_sum",
                "omniscient": True,
            }
        )
        agent = spec.build(NIM_EVALUATORS)

        assert agent.name == "shallow"
        assert agent.strategy == AlphaBetaAlgorithm(search_depth=2)
        assert isinstance(agent.evaluator, NimSumEvaluator)
        assert agent.is_omniscient

    def test_not_omniscient_by_default(self) -> None:
        spec = AgentSpec(name="a", strategy=SingleLevelConfig(), evaluator="perfect")
        assert not spec.build(NIM_EVALUATORS).is_omniscient

    def test_fresh_evaluator_per_build(self) -> None:
        """Stateful evaluators are never shared between built agents."""
        spec = AgentSpec(name="mc", strategy=MonteCarloConfig(), evaluator="random_playout")
        first = spec.build(NIM_EVALUATORS)
        second = spec.build(NIM_EVALUATORS)
        assert isinstance(first.evaluator, RandomPlayoutEvaluator)
        assert first.evaluator is not second.evaluator

    def test_unknown_evaluator(self) -> None:
        spec = AgentSpec(name="a", strategy=SingleLevelConfig(), evaluator="material")
        with pytest.raises(ValueError, match="unknown evaluator 'material'"):
            spec.build(NIM_EVALUATORS)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AgentSpec(name="", strategy=SingleLevelConfig(), evaluator="perfect")
