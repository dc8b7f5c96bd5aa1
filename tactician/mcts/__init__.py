"""Monte Carlo Tree Search with UCT1 selection."""

from tactician.mcts.monte_carlo import (
    DRAW_REWARD,
    LOSS_REWARD,
    WIN_REWARD,
    MonteCarloAlgorithm,
    RandomPlayoutEvaluator,
)
from tactician.mcts.tree import ROOT, SearchNode, SearchTree
from tactician.mcts.uct1 import ChildScoreAlgorithm, Uct1, best_child, most_visited_child

__all__ = [
    "DRAW_REWARD",
    "LOSS_REWARD",
    "ROOT",
    "WIN_REWARD",
    "ChildScoreAlgorithm",
    "MonteCarloAlgorithm",
    "RandomPlayoutEvaluator",
    "SearchNode",
    "SearchTree",
    "Uct1",
    "best_child",
    "most_visited_child",
]
