"""Tests for UCT1 child scoring and child selection helpers."""

from __future__ import annotations

import math

import numpy as np
import pytest

from tactician.mcts.tree import ROOT, SearchTree
from tactician.mcts.uct1 import Uct1, best_child, most_visited_child
from tactician.nim import NimAction, NimPlayer, NimState


def _tree_with_children(stats: list[tuple[int, float]]) -> SearchTree:
    """Root with one child per (visits, total_reward) pair."""
    state = NimState.with_piles(len(stats))
    tree = SearchTree(state, NimPlayer.ONE)
    for amount, (visits, reward) in enumerate(stats, 1):
        index = tree.add_child(ROOT, NimAction(0, amount), state.make_copy(), NimPlayer.ONE)
        tree[index].visit_count = visits
        tree[index].total_reward = reward
    tree.root.visit_count = sum(visits for visits, _ in stats)
    return tree


class TestUct1Scores:
    def test_formula(self) -> None:
        """score = Q/N + C * sqrt(ln(N_parent) / N)"""
        scores = Uct1(exploration=1.0).scores(10, np.array([2, 5]), np.array([1.0, 4.0]))
        expected = [
            0.5 + math.sqrt(math.log(10) / 2),
            0.8 + math.sqrt(math.log(10) / 5),
        ]
        assert scores.tolist() == pytest.approx(expected)

    def test_exploration_constant_scales_bonus(self) -> None:
        greedy = Uct1(exploration=0.0).scores(10, np.array([2, 5]), np.array([1.0, 4.0]))
        assert greedy.tolist() == pytest.approx([0.5, 0.8])

    def test_unvisited_scores_infinite(self) -> None:
        scores = Uct1().scores(3, np.array([3, 0]), np.array([3.0, 0.0]))
        assert math.isinf(scores[1])
        assert math.isfinite(scores[0])


class TestChildSelection:
    def test_best_child_prefers_unvisited(self) -> None:
        tree = _tree_with_children([(10, 10.0), (0, 0.0)])
        assert best_child(tree, ROOT, Uct1()) == 2

    def test_unvisited_ties_go_to_first(self) -> None:
        """Among several unvisited children the first expanded is tried first."""
        tree = _tree_with_children([(5, 5.0), (0, 0.0), (0, 0.0)])
        assert best_child(tree, ROOT, Uct1()) == 2

    def test_best_child_ties_go_to_first(self) -> None:
        """Identical statistics: the first expanded child wins."""
        tree = _tree_with_children([(4, 2.0), (4, 2.0), (4, 2.0)])
        assert best_child(tree, ROOT, Uct1()) == 1

    def test_best_child_uses_scores(self) -> None:
        tree = _tree_with_children([(5, -5.0), (5, 5.0)])
        assert best_child(tree, ROOT, Uct1()) == 2

    def test_most_visited(self) -> None:
        tree = _tree_with_children([(3, 3.0), (7, -7.0), (7, 7.0)])
        assert most_visited_child(tree, ROOT) == 2

    def test_no_children_raises(self) -> None:
        tree = SearchTree(NimState.with_piles(1), NimPlayer.ONE)
        with pytest.raises(ValueError, match="no children"):
            best_child(tree, ROOT, Uct1())
        with pytest.raises(ValueError, match="no children"):
            most_visited_child(tree, ROOT)
