#!/usr/bin/env python3
"""Play one game of Nim between two agents.

Agents are looked up by name in the default Nim registry; ``human`` reads
moves from stdin, written as a pile letter followed by an amount (``b3``).

Usage:
    python scripts/run_nim.py perfect uct1
    python scripts/run_nim.py alpha_beta minimax --piles 3 4 5 --move-time 0.5
    python scripts/run_nim.py human perfect --verbosity actions
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from tactician.ai.base import Agent
from tactician.core.errors import InvalidAction, UnknownAgent
from tactician.eval.game import play_game
from tactician.ai.registry import AgentName
from tactician.nim import (
    NimAction,
    NimPlayer,
    NimState,
    build_nim_registry,
    has_closed_form,
    winning_actions,
)

if TYPE_CHECKING:
    from tactician.core.deadline import Deadline

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

VERBOSITY = ("none", "match-outcomes", "actions")


class HumanNimAgent(Agent[NimState]):
    """Prompts on stdin until a legal move is entered. Ignores the deadline."""

    @property
    def name(self) -> str:
        return "HUMAN"

    def pick_action(self, deadline: Deadline, state: NimState) -> NimAction:
        print(state)
        legal = set(state.legal_actions(state.turn))
        while True:
            text = input(f"{state.turn.name}, your move (e.g. a1): ").strip().lower()
            action = parse_action(text)
            if action in legal:
                return action
            print(f"Illegal move {text!r}")


def parse_action(text: str) -> NimAction | None:
    """Parse ``b3`` into NimAction(pile=1, amount=3); None if malformed."""
    if len(text) < 2 or not text[0].isalpha() or not text[1:].isdigit():
        return None
    return NimAction(ord(text[0]) - ord("a"), int(text[1:]))


def describe_optimal(state: NimState) -> str:
    try:
        actions = winning_actions(state)
    except ValueError:
        return "unknown"
    return ", ".join(str(a) for a in actions) or "none (lost position)"


def resolve_agent(name: str) -> Agent[NimState]:
    if name == "human":
        return HumanNimAgent()
    return build_nim_registry()[name]


def main() -> None:
    parser = argparse.ArgumentParser(description="Play a game of Nim between two agents")
    parser.add_argument("player_one", help="Agent moving first (registry name or 'human')")
    parser.add_argument("player_two", help="Agent moving second (registry name or 'human')")
    parser.add_argument(
        "--piles", type=int, nargs="+", default=[3, 4, 5], help="Starting pile sizes"
    )
    parser.add_argument("--max-take", type=int, default=None, help="Most objects per move")
    parser.add_argument("--misere", action="store_true", help="Taking the last object loses")
    parser.add_argument("--move-time", type=float, default=1.0, help="Seconds per move")
    parser.add_argument("--verbosity", choices=VERBOSITY, default="match-outcomes")
    args = parser.parse_args()

    try:
        agents = {
            NimPlayer.ONE: resolve_agent(args.player_one),
            NimPlayer.TWO: resolve_agent(args.player_two),
        }
    except UnknownAgent as e:
        logger.error("%s (or 'human')", e.args[0])
        sys.exit(1)

    start = NimState(args.piles, max_take=args.max_take, misere=args.misere)
    if AgentName.PERFECT in (args.player_one, args.player_two) and not has_closed_form(start):
        logger.error("Agent %r cannot play misère Nim with --max-take", AgentName.PERFECT.value)
        sys.exit(1)

    try:
        result = play_game(agents, start.make_copy(), move_time=args.move_time)
    except InvalidAction as e:
        logger.error("Illegal action: %s", e)
        sys.exit(1)

    if args.verbosity == "actions":
        replay = start.make_copy()
        for player, action in result.actions:
            optimal = describe_optimal(replay)
            print(f"{replay}")
            print(f"  {agents[player].name} plays {action}; optimal: {optimal}")
            replay.execute_action(player, action)

    if args.verbosity != "none":
        winner = result.winner
        print(f"{agents[winner].name} ({winner.name}) wins after {result.turns} turns")


if __name__ == "__main__":
    main()
