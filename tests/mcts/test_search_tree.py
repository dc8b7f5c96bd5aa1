"""Tests for the MCTS SearchTree arena."""

from __future__ import annotations

import pytest

from tactician.mcts.tree import ROOT, SearchTree
from tactician.nim import NimAction, NimPlayer, NimState


@pytest.fixture
def tree() -> SearchTree:
    """Root (ONE to move) -> child via a1 (ONE acted) -> grandchild via b1 (TWO acted)."""
    root_state = NimState.with_piles(2, 2)
    tree = SearchTree(root_state, NimPlayer.ONE)

    child_state = root_state.make_copy()
    child_state.execute_action(NimPlayer.ONE, NimAction(0, 1))
    child = tree.add_child(ROOT, NimAction(0, 1), child_state, NimPlayer.ONE)

    grandchild_state = child_state.make_copy()
    grandchild_state.execute_action(NimPlayer.TWO, NimAction(1, 1))
    tree.add_child(child, NimAction(1, 1), grandchild_state, NimPlayer.TWO)
    return tree


class TestSearchTree:
    def test_structure(self, tree: SearchTree) -> None:
        assert len(tree) == 3
        assert tree.root.parent is None
        assert tree.children(ROOT) == [1]
        assert tree[1].parent == ROOT
        assert tree[2].action == NimAction(1, 1)

    def test_children_in_expansion_order(self) -> None:
        state = NimState.with_piles(3)
        tree = SearchTree(state, NimPlayer.ONE)
        for amount in (2, 1, 3):
            tree.add_child(ROOT, NimAction(0, amount), state.make_copy(), NimPlayer.ONE)
        assert [tree[i].action.amount for i in tree.children(ROOT)] == [2, 1, 3]

    def test_duplicate_action_rejected(self, tree: SearchTree) -> None:
        with pytest.raises(ValueError, match="already expanded"):
            tree.add_child(ROOT, NimAction(0, 1), NimState.with_piles(1, 2), NimPlayer.ONE)

    def test_path_to_root(self, tree: SearchTree) -> None:
        assert list(tree.path_to_root(2)) == [2, 1, ROOT]

    def test_backup_negates_for_opponent_nodes(self, tree: SearchTree) -> None:
        """Rewards are stored from the view of the side that acted into each node."""
        tree.backup(2, 1.0)

        assert [tree[i].visit_count for i in range(3)] == [1, 1, 1]
        assert tree.root.total_reward == 1.0
        assert tree[1].total_reward == 1.0
        assert tree[2].total_reward == -1.0

    def test_average_reward(self, tree: SearchTree) -> None:
        assert tree[1].average_reward == 0.0
        tree.backup(1, 1.0)
        tree.backup(2, -1.0)
        assert tree[1].visit_count == 2
        assert tree[1].average_reward == pytest.approx(0.0)
        assert tree[2].average_reward == pytest.approx(1.0)
