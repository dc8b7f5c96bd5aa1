"""Search tree for Monte Carlo Tree Search, stored as an arena.

Nodes live in one flat list and refer to each other by index: a node knows
its parent's index and maps each explored action to a child index. No node
holds a reference to another, so the tree has no reference cycles and is
freed in one piece when the search that owns it returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tactician.core.state import GameState

ROOT = 0


@dataclass
class SearchNode:
    """One explored game state.

    Attributes:
        state: Private copy of the game state this node represents.
        side: Player who acted to create this node. For the root, the
            searching player.
        parent: Index of the parent node (None for the root).
        action: Action taken from the parent to reach this node.
        visit_count: N(v), playouts that passed through this node.
        total_reward: Q(v), summed playout rewards from ``side``'s view.
        children: Explored actions mapped to child indices, in the order they
            were expanded (which is enumeration order).
    """

    state: GameState
    side: Any
    parent: int | None = None
    action: Any = None
    visit_count: int = 0
    total_reward: float = 0.0
    children: dict[Any, int] = field(default_factory=dict)

    @property
    def average_reward(self) -> float:
        """Q(v) / N(v), or 0 for an unvisited node."""
        return self.total_reward / self.visit_count if self.visit_count else 0.0

    def __repr__(self) -> str:
        return (
            f"SearchNode(side={self.side}, action={self.action!r}, "
            f"visits={self.visit_count}, reward={self.total_reward}, "
            f"children={len(self.children)})"
        )


class SearchTree:
    """Arena of SearchNodes for a single ``pick_action`` call.

    Rewards are backed up from the searching player's perspective and stored
    at each node from the perspective of the side that acted into it, so a
    parent choosing among its children always maximizes for the player who
    is to move there.

    Attributes:
        player: The searching player (root perspective).
        nodes: All nodes, root at index 0.
    """

    def __init__(self, state: GameState, player: Any) -> None:
        self.player = player
        self.nodes: list[SearchNode] = [SearchNode(state=state, side=player)]

    @property
    def root(self) -> SearchNode:
        return self.nodes[ROOT]

    def __len__(self) -> int:
        return len(self.nodes)

    def __getitem__(self, index: int) -> SearchNode:
        return self.nodes[index]

    def add_child(self, parent: int, action: Any, state: GameState, side: Any) -> int:
        """Attach a new child reached from ``parent`` by ``action``.

        Returns:
            Index of the new node.
        """
        parent_node = self.nodes[parent]
        if action in parent_node.children:
            msg = f"Action {action!r} already expanded from node {parent}"
            raise ValueError(msg)
        index = len(self.nodes)
        self.nodes.append(SearchNode(state=state, side=side, parent=parent, action=action))
        parent_node.children[action] = index
        return index

    def children(self, index: int) -> list[int]:
        """Child indices of a node, in expansion order."""
        return list(self.nodes[index].children.values())

    def path_to_root(self, index: int) -> Iterator[int]:
        """Yield ``index`` and each of its ancestors, ending with the root."""
        current: int | None = index
        while current is not None:
            yield current
            current = self.nodes[current].parent

    def backup(self, index: int, reward: float) -> None:
        """Propagate a playout reward from ``index`` up to the root.

        Args:
            index: Node the playout started from.
            reward: Outcome from the searching player's perspective.
        """
        for node_index in self.path_to_root(index):
            node = self.nodes[node_index]
            node.visit_count += 1
            node.total_reward += reward if node.side == self.player else -reward
