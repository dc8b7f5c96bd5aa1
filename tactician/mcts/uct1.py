"""Child selection policies for Monte Carlo Tree Search."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from tactician.mcts.tree import SearchTree


class ChildScoreAlgorithm(ABC):
    """Scores the children of a node during the selection phase."""

    @abstractmethod
    def scores(
        self,
        parent_visits: int,
        child_visits: np.ndarray,
        child_rewards: np.ndarray,
    ) -> np.ndarray:
        """Score each child; the highest score is descended into.

        Args:
            parent_visits: Visit count of the parent node.
            child_visits: Visit count of each child.
            child_rewards: Total reward of each child, from the perspective
                of the player choosing among them.

        Returns:
            One score per child.
        """
        ...


@dataclass(frozen=True)
class Uct1(ChildScoreAlgorithm):
    """Upper Confidence bound applied to Trees.

    UCT1 = Q/N + C * sqrt(ln(N_parent) / N)

    Unvisited children score +inf, so they are always tried before any
    visited child.

    Attributes:
        exploration: Exploration constant C.
    """

    exploration: float = 1.0

    def scores(
        self,
        parent_visits: int,
        child_visits: np.ndarray,
        child_rewards: np.ndarray,
    ) -> np.ndarray:
        visits = child_visits.astype(np.float64)
        safe_visits = np.maximum(visits, 1.0)
        log_parent = np.log(max(parent_visits, 1))
        exploitation = child_rewards / safe_visits
        exploration = self.exploration * np.sqrt(log_parent / safe_visits)
        result: np.ndarray = np.where(visits == 0, np.inf, exploitation + exploration)
        return result


def best_child(tree: SearchTree, index: int, algorithm: ChildScoreAlgorithm) -> int:
    """Pick the child of node ``index`` with the highest score.

    Ties, including ties between unvisited children, go to the child expanded
    first (``np.argmax`` returns the first maximum).

    Raises:
        ValueError: If the node has no children.
    """
    children = tree.children(index)
    if not children:
        msg = f"Node {index} has no children"
        raise ValueError(msg)
    visits = np.array([tree[c].visit_count for c in children], dtype=np.int64)
    rewards = np.array([tree[c].total_reward for c in children], dtype=np.float64)
    scores = algorithm.scores(tree[index].visit_count, visits, rewards)
    return children[int(np.argmax(scores))]


def most_visited_child(tree: SearchTree, index: int) -> int:
    """Robust-child choice: the child with the most visits, first on ties."""
    children = tree.children(index)
    if not children:
        msg = f"Node {index} has no children"
        raise ValueError(msg)
    visits = np.array([tree[c].visit_count for c in children], dtype=np.int64)
    return children[int(np.argmax(visits))]
