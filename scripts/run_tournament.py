#!/usr/bin/env python3
"""Run a round-robin Nim tournament from a YAML config.

Usage:
    python scripts/run_tournament.py configs/tournament/nim.yaml
    python scripts/run_tournament.py configs/tournament/nim.yaml --games 4
    python scripts/run_tournament.py configs/tournament/nim.yaml --show-config
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from tactician.config.loader import load_config, split_config_path
from tactician.eval.tournament import TournamentConfig, run_tournament

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run a Nim agent tournament")
    parser.add_argument("config", type=str, help="Path to tournament config YAML")
    parser.add_argument(
        "--games",
        type=int,
        default=None,
        help="Override games per matchup (default: from config)",
    )
    parser.add_argument(
        "--move-time",
        type=float,
        default=None,
        help="Override seconds per move (default: from config)",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the resolved config as YAML before running",
    )
    args = parser.parse_args()

    config_file = Path(args.config)
    if not config_file.with_suffix(".yaml").exists() and not config_file.exists():
        logger.error("Config file not found: %s", args.config)
        sys.exit(1)

    overrides: list[str] = []
    if args.games is not None:
        overrides.append(f"games_per_matchup={args.games}")
    if args.move_time is not None:
        overrides.append(f"move_time={args.move_time}")

    config_dir, config_name = split_config_path(args.config)
    config = load_config(TournamentConfig, config_dir, config_name, overrides=overrides or None)

    if args.show_config:
        print(yaml.safe_dump(config.model_dump(mode="json"), sort_keys=False))

    logger.info("Tournament: %s", config_name)
    logger.info("Agents: %s", [spec.name for spec in config.agents])
    logger.info("Games per matchup: %d, %.2fs per move", config.games_per_matchup, config.move_time)

    result = run_tournament(config)

    print()
    print(result.standings_table())
    print()
    print(result.wdl_table())


if __name__ == "__main__":
    main()
