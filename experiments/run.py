#!/usr/bin/env python3
"""CLI entry-point: run a batch of automated games from a YAML config + CLI overrides."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time

# Ensure project root is importable
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pairs_game.cardsets.catalog import CARD_SETS  # noqa: E402
from pairs_game.core.config import SimulationConfig, load_config  # noqa: E402
from pairs_game.core.rng import SeededRNG  # noqa: E402
from pairs_game.simulation.simulator import GameSimulator  # noqa: E402


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Play automated pairs-matching games and report statistics."
    )
    p.add_argument("--config", type=str, default=None,
                   help="Path to YAML config file")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--games", type=int, default=None)
    p.add_argument("--player_type", type=str, default=None,
                   choices=["memory", "random", "solver"])
    p.add_argument("--memory_k", type=int, default=None,
                   help="Items a memory player remembers (default: all)")
    p.add_argument("--card_set", type=str, default=None, choices=list(CARD_SETS))
    p.add_argument("--pairs", type=int, default=None,
                   help="Number of pairs to deal")
    p.add_argument("--give_up_after", type=int, default=None,
                   help="Replay the solution once this many attempts are used")
    p.add_argument("--unknown_item_policy", type=str, default=None,
                   choices=["raise", "ignore"])
    p.add_argument("--output_dir", type=str, default=None)
    p.add_argument("--log_level", type=str, default="WARNING")
    return p


def _apply_overrides(cfg: SimulationConfig, args: argparse.Namespace) -> None:
    """Mutate *cfg* in-place with any non-None CLI overrides."""
    if args.seed is not None:
        cfg.seed = args.seed
    if args.games is not None:
        cfg.games = args.games
    if args.player_type is not None:
        cfg.player.player_type = args.player_type
    if args.memory_k is not None:
        cfg.player.memory_k = args.memory_k
    if args.card_set is not None:
        cfg.card_set.name = args.card_set
    if args.pairs is not None:
        cfg.card_set.pairs = args.pairs
    if args.give_up_after is not None:
        cfg.player.give_up_after = args.give_up_after
    if args.unknown_item_policy is not None:
        cfg.engine.unknown_item_policy = args.unknown_item_policy
    if args.output_dir is not None:
        cfg.output_dir = args.output_dir


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # load config
    if args.config:
        cfg = load_config(args.config)
    else:
        cfg = SimulationConfig()
    _apply_overrides(cfg, args)

    # run
    rng = SeededRNG(cfg.seed)
    sim = GameSimulator(cfg, rng)

    print(
        f"Starting simulation: player_type={cfg.player.player_type}  "
        f"games={cfg.games}  card_set={cfg.card_set.name}  "
        f"pairs={cfg.card_set.pairs or 'all'}  seed={cfg.seed}"
    )
    t0 = time.time()
    sim.run()
    elapsed = time.time() - t0

    # summary to stdout
    summary_path = os.path.join(sim.run_dir, "summary.json")
    with open(summary_path) as f:
        summary = json.load(f)

    print(
        f"Done in {elapsed:.1f}s  |  {summary['total_games']} games  |  "
        f"avg attempts {summary['avg_attempts']:.2f}  |  "
        f"avg mismatches {summary['avg_mismatches']:.2f}  |  "
        f"gave up {summary['give_up_rate']:.1%}"
    )
    print(f"Results → {sim.run_dir}")


if __name__ == "__main__":
    main()
