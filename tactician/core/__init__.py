"""Contracts shared by every search strategy."""

from tactician.core.deadline import Deadline
from tactician.core.errors import (
    InvalidAction,
    MissingAction,
    NoLegalAction,
    SearchError,
    UnknownAgent,
)
from tactician.core.evaluator import CompoundEvaluator, StateEvaluator
from tactician.core.state import Completed, GameState, GameStatus, InProgress
from tactician.core.strategy import SelectionAlgorithm

__all__ = [
    "Completed",
    "CompoundEvaluator",
    "Deadline",
    "GameState",
    "GameStatus",
    "InProgress",
    "InvalidAction",
    "MissingAction",
    "NoLegalAction",
    "SearchError",
    "SelectionAlgorithm",
    "StateEvaluator",
    "UnknownAgent",
]
