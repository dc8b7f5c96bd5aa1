"""Monte Carlo Tree Search.

Each iteration runs four phases against a tree private to the current call:

1. Selection: descend from the root through fully expanded nodes, picking
   children with the configured ChildScoreAlgorithm (UCT1 by default).
2. Expansion: at the first node with an untried legal action, copy its state,
   apply the first such action in enumeration order, and attach a child.
3. Simulation: score the new child with the evaluator from the searching
   player's perspective. With RandomPlayoutEvaluator this plays the game
   out with uniformly random moves.
4. Backpropagation: add one visit and the reward to every node on the path
   back to the root, negating it for nodes the opponent acted into.

The final action is the root child with the most visits.

Deadline handling: the deadline is checked once per iteration, so the overrun
is bounded by the cost of a single iteration (one descent, one expansion and
one playout). Iterations are never interrupted midway.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from tactician.core.errors import NoLegalAction
from tactician.core.evaluator import StateEvaluator
from tactician.core.state import Completed, GameState
from tactician.core.strategy import SelectionAlgorithm
from tactician.mcts.tree import ROOT, SearchTree
from tactician.mcts.uct1 import ChildScoreAlgorithm, Uct1, best_child, most_visited_child

if TYPE_CHECKING:
    from tactician.core.deadline import Deadline

logger = logging.getLogger(__name__)

WIN_REWARD = 1
LOSS_REWARD = -1
DRAW_REWARD = 0

_NOT_FOUND = object()


class RandomPlayoutEvaluator(StateEvaluator[GameState]):
    """Scores a state by playing it out with uniformly random legal actions.

    Returns WIN_REWARD, LOSS_REWARD or DRAW_REWARD from ``side``'s view. The
    state passed in is copied first and never modified.

    Args:
        seed: Seed for the playout random generator (None = nondeterministic).
            The generator is rebuilt from the seed at the start of every
            search, so a shared instance replays the same playouts per search.
        max_actions: Optional cap on playout length; a playout that hits it
            is scored as a draw. None plays until the game completes.
    """

    def __init__(self, seed: int | None = None, max_actions: int | None = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self.max_actions = max_actions

    def evaluate(self, state: GameState, side: Any) -> int:
        game = state.make_copy()
        played = 0
        while True:
            status = game.status()
            if isinstance(status, Completed):
                if status.winner is None:
                    return DRAW_REWARD
                return WIN_REWARD if status.winner == side else LOSS_REWARD

            if self.max_actions is not None and played >= self.max_actions:
                return DRAW_REWARD

            player = status.current_turn
            actions = list(game.legal_actions(player))
            if not actions:
                msg = f"Player {player} has no legal actions during playout"
                raise NoLegalAction(msg)
            game.execute_action(player, actions[int(self._rng.integers(len(actions)))])
            played += 1

    def start_search(self) -> None:
        self._rng = np.random.default_rng(self.seed)


@dataclass(frozen=True)
class MonteCarloAlgorithm(SelectionAlgorithm):
    """MCTS bounded by the deadline and, optionally, an iteration count.

    Attributes:
        child_score_algorithm: Policy used during selection.
        max_iterations: Stop after this many iterations even if time remains
            (None = run until the deadline).
    """

    child_score_algorithm: ChildScoreAlgorithm = field(default_factory=Uct1)
    max_iterations: int | None = None

    def pick_action(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        player: Any,
    ) -> Any:
        tree = self.run_search(deadline, state, evaluator, player)
        if not tree.root.children:
            # Out of time before the first expansion
            logger.debug("%s: no iterations completed, using first legal action", self.name)
            return state.first_legal_action(player)
        return tree[most_visited_child(tree, ROOT)].action

    def run_search(
        self,
        deadline: Deadline,
        state: GameState,
        evaluator: StateEvaluator,
        player: Any,
    ) -> SearchTree:
        """Build a search tree for ``player`` until the deadline or iteration limit.

        Returns:
            The tree, so callers can inspect root statistics.
        """
        evaluator.start_search()
        tree = SearchTree(state.make_copy(), player)
        iterations = 0
        while not self._should_stop(deadline, iterations):
            leaf = self._tree_policy(tree)
            reward = evaluator.evaluate(tree[leaf].state, player)
            tree.backup(leaf, reward)
            iterations += 1

        logger.debug(
            "%s: %d iterations, %d nodes, root visits %d",
            self.name,
            iterations,
            len(tree),
            tree.root.visit_count,
        )
        return tree

    def _should_stop(self, deadline: Deadline, iterations: int) -> bool:
        if self.max_iterations is not None and iterations >= self.max_iterations:
            return True
        return deadline.exceeded()

    def _tree_policy(self, tree: SearchTree) -> int:
        """Selection and expansion. Returns the index of the node to simulate from."""
        index = ROOT
        while True:
            node = tree[index]
            status = node.state.status()
            if isinstance(status, Completed):
                return index

            side = status.current_turn
            untried = next(
                (a for a in node.state.legal_actions(side) if a not in node.children),
                _NOT_FOUND,
            )
            if untried is not _NOT_FOUND:
                return self._expand(tree, index, side, untried)
            if not node.children:
                # Acting player is stuck; nothing to expand
                return index
            index = best_child(tree, index, self.child_score_algorithm)

    def _expand(self, tree: SearchTree, index: int, side: Any, action: Any) -> int:
        state = tree[index].state.make_copy()
        state.execute_action(side, action)
        return tree.add_child(index, action, state, side)

    @property
    def name(self) -> str:
        if isinstance(self.child_score_algorithm, Uct1):
            return f"UCT1(C={self.child_score_algorithm.exploration})"
        return f"MonteCarlo({type(self.child_score_algorithm).__name__})"
