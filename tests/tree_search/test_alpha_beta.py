"""Tests for AlphaBetaAlgorithm."""

from __future__ import annotations

import pytest

from tactician.core.deadline import Deadline
from tactician.core.evaluator import StateEvaluator
from tactician.nim import (
    NimPlayer,
    NimState,
    NimSumEvaluator,
    NimWinLossEvaluator,
    is_perfect_action,
    is_winning,
    nim_sum,
    winning_actions,
)
from tactician.tree_search import AlphaBetaAlgorithm, MinimaxAlgorithm


def _reachable(start: NimState, plies: int) -> list[NimState]:
    """Distinct unfinished positions reachable from ``start`` within ``plies`` moves."""
    seen: dict[tuple[tuple[int, ...], NimPlayer], NimState] = {}
    frontier = [start]
    for _ in range(plies + 1):
        next_frontier = []
        for state in frontier:
            key = (tuple(state.piles), state.turn)
            if key in seen:
                continue
            seen[key] = state
            for action in state.legal_actions(state.turn):
                child = state.make_copy()
                child.execute_action(state.turn, action)
                next_frontier.append(child)
        frontier = next_frontier
    return [state for state in seen.values() if not state.is_over]


REACHABLE = _reachable(NimState.with_piles(1, 2, 3), plies=4)


class CountingEvaluator(StateEvaluator[NimState]):
    """Wraps another evaluator and counts calls."""

    def __init__(self, inner: StateEvaluator[NimState]) -> None:
        self.inner = inner
        self.calls = 0

    def evaluate(self, state: NimState, side: NimPlayer) -> int:
        self.calls += 1
        return self.inner.evaluate(state, side)


class TestAlphaBetaOracleAgreement:
    @pytest.mark.parametrize(
        "piles",
        [
            (1, 1, 1),
            (2, 2, 2),
            (3, 3, 3),
            (1, 2, 3),
            (2, 2, 3),
            (1, 1, 3),
            (4, 3, 2),
        ],
    )
    def test_agrees_with_oracle(self, piles: tuple[int, ...]) -> None:
        """Full-depth alpha-beta with win/loss scoring plays perfectly."""
        state = NimState(piles)
        result = AlphaBetaAlgorithm(search_depth=25).run_search(
            Deadline.never(), state, NimWinLossEvaluator(), state.turn
        )
        assert result.score == (1 if is_winning(state) else -1)
        assert is_perfect_action(state, result.action())

    def test_winning_move_leaves_zero_nim_sum(self) -> None:
        state = NimState.with_piles(2, 2, 3)
        action = AlphaBetaAlgorithm(search_depth=25).pick_action(
            Deadline.never(), state, NimWinLossEvaluator(), NimPlayer.ONE
        )
        child = state.make_copy()
        child.execute_action(NimPlayer.ONE, action)
        assert nim_sum(child) == 0


class TestPruningEquivalence:
    @pytest.mark.parametrize("piles", [(1, 2, 3), (2, 2, 3), (1, 1, 3), (3, 4, 5)])
    @pytest.mark.parametrize("depth", [1, 2, 3, 4])
    def test_same_action_and_score_as_minimax(self, piles: tuple[int, ...], depth: int) -> None:
        """Pruning never changes the chosen action or the root score."""
        state = NimState(piles)
        evaluator = NimSumEvaluator()
        plain = MinimaxAlgorithm(search_depth=depth).run_search(
            Deadline.never(), state, evaluator, NimPlayer.ONE
        )
        pruned = AlphaBetaAlgorithm(search_depth=depth).run_search(
            Deadline.never(), state, evaluator, NimPlayer.ONE
        )
        assert pruned.action() == plain.action()
        assert pruned.score == plain.score

    @pytest.mark.parametrize("depth", [1, 2, 3, 4])
    @pytest.mark.parametrize("player", list(NimPlayer), ids=lambda p: p.name)
    def test_every_reachable_position(self, depth: int, player: NimPlayer) -> None:
        """Equivalence holds at every position within four moves of [1, 2, 3]."""
        evaluator = NimSumEvaluator()
        for state in REACHABLE:
            plain = MinimaxAlgorithm(search_depth=depth).run_search(
                Deadline.never(), state, evaluator, player
            )
            pruned = AlphaBetaAlgorithm(search_depth=depth).run_search(
                Deadline.never(), state, evaluator, player
            )
            assert (pruned.score, pruned.action()) == (plain.score, plain.action()), state

    def test_prunes(self) -> None:
        """Alpha-beta evaluates fewer leaves than minimax on a wide tree."""
        state = NimState.with_piles(3, 4, 5)
        plain = CountingEvaluator(NimSumEvaluator())
        pruned = CountingEvaluator(NimSumEvaluator())
        MinimaxAlgorithm(search_depth=3).run_search(Deadline.never(), state, plain, NimPlayer.ONE)
        AlphaBetaAlgorithm(search_depth=3).run_search(
            Deadline.never(), state, pruned, NimPlayer.ONE
        )
        assert pruned.calls < plain.calls


class TestNoFalsePositives:
    @pytest.mark.parametrize("piles", [(1, 2, 3), (2, 2, 3), (3, 4, 5), (1, 3, 5, 7)])
    @pytest.mark.parametrize("depth", [1, 2, 3, 4, 5])
    def test_reported_outcomes_are_real(self, piles: tuple[int, ...], depth: int) -> None:
        """A reported win (or loss) within the horizon is confirmed by the oracle."""
        state = NimState(piles)
        result = AlphaBetaAlgorithm(search_depth=depth).run_search(
            Deadline.never(), state, NimWinLossEvaluator(), NimPlayer.ONE
        )
        if result.score == 1:
            assert result.action() in winning_actions(state)
        elif result.score == -1:
            assert not is_winning(state)


class TestAlphaBetaBehaviour:
    def test_expired_deadline_still_returns_legal_action(self) -> None:
        state = NimState.new(5)
        action = AlphaBetaAlgorithm(search_depth=6).pick_action(
            Deadline.after(-1), state, NimWinLossEvaluator(), NimPlayer.ONE
        )
        assert action in set(state.legal_actions(NimPlayer.ONE))

    def test_does_not_mutate_state(self) -> None:
        state = NimState.with_piles(2, 2, 3)
        snapshot = state.make_copy()
        AlphaBetaAlgorithm(search_depth=25).pick_action(
            Deadline.never(), state, NimWinLossEvaluator(), NimPlayer.ONE
        )
        assert state == snapshot

    def test_name(self) -> None:
        assert AlphaBetaAlgorithm(search_depth=7).name == "AlphaBeta(7)"
