"""Playing games between agents: single games, head-to-head series and tournaments."""

from __future__ import annotations

from tactician.eval.game import GameResult, play_game
from tactician.eval.runner import EvalResult, evaluate
from tactician.eval.tournament import (
    MatchupResult,
    NimGameParams,
    TournamentConfig,
    TournamentResult,
    run_tournament,
)

__all__ = [
    "EvalResult",
    "GameResult",
    "MatchupResult",
    "NimGameParams",
    "TournamentConfig",
    "TournamentResult",
    "evaluate",
    "play_game",
    "run_tournament",
]
