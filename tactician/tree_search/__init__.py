"""Tree search strategies: single level, minimax and alpha-beta."""

from tactician.tree_search.alpha_beta import AlphaBetaAlgorithm
from tactician.tree_search.minimax import DepthLimitedSearch, MinimaxAlgorithm
from tactician.tree_search.scored_action import ScoredAction
from tactician.tree_search.single_level import SingleLevel

__all__ = [
    "AlphaBetaAlgorithm",
    "DepthLimitedSearch",
    "MinimaxAlgorithm",
    "ScoredAction",
    "SingleLevel",
]
