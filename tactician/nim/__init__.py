"""Nim: a reference game with a known-optimal strategy for validating search."""

from tactician.nim.agents import (
    NIM_ALPHA_BETA_AGENT,
    NIM_EVALUATORS,
    NIM_MINIMAX_AGENT,
    NIM_PERFECT_AGENT,
    NIM_UCT1_AGENT,
    build_nim_registry,
)
from tactician.nim.evaluators import NimPerfectEvaluator, NimSumEvaluator, NimWinLossEvaluator
from tactician.nim.oracle import (
    grundy_value,
    has_closed_form,
    is_perfect_action,
    is_winning,
    nim_sum,
    winning_actions,
)
from tactician.nim.state import NimAction, NimPlayer, NimState

__all__ = [
    "NIM_ALPHA_BETA_AGENT",
    "NIM_EVALUATORS",
    "NIM_MINIMAX_AGENT",
    "NIM_PERFECT_AGENT",
    "NIM_UCT1_AGENT",
    "NimAction",
    "NimPerfectEvaluator",
    "NimPlayer",
    "NimState",
    "NimSumEvaluator",
    "NimWinLossEvaluator",
    "build_nim_registry",
    "grundy_value",
    "has_closed_form",
    "is_perfect_action",
    "is_winning",
    "nim_sum",
    "winning_actions",
]
