#!/usr/bin/env python3
"""Parameter sweep: run a grid of configs and aggregate results."""
from __future__ import annotations

import argparse
import copy
import csv
import json
import os
import sys
import time
from itertools import product

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pairs_game.core.config import SimulationConfig, load_config  # noqa: E402
from pairs_game.core.rng import SeededRNG  # noqa: E402
from pairs_game.simulation.simulator import GameSimulator  # noqa: E402


def main() -> None:
    p = argparse.ArgumentParser(description="Run a parameter sweep.")
    p.add_argument("--config", type=str, default=None,
                   help="Base YAML config file")
    p.add_argument("--seeds", type=int, nargs="+", default=[42, 123, 456])
    p.add_argument("--player_types", type=str, nargs="+",
                   default=["random", "memory"])
    p.add_argument("--pairs_list", type=int, nargs="+", default=[2, 4, 8])
    p.add_argument("--games", type=int, default=None,
                   help="Override games per run (keep sweep fast)")
    p.add_argument("--output", type=str, default="outputs/sweep_results.csv")
    args = p.parse_args()

    base_cfg = load_config(args.config) if args.config else SimulationConfig()

    grid = list(product(args.seeds, args.player_types, args.pairs_list))
    all_summaries: list[dict] = []

    print(f"Sweep: {len(grid)} configurations")
    for i, (seed, player_type, pairs) in enumerate(grid, 1):
        cfg = copy.deepcopy(base_cfg)
        cfg.seed = seed
        cfg.player.player_type = player_type
        cfg.card_set.pairs = pairs
        if args.games is not None:
            cfg.games = args.games

        print(
            f"  [{i}/{len(grid)}] seed={seed}  player={player_type}  "
            f"pairs={pairs} ...",
            end="",
            flush=True,
        )
        t0 = time.time()
        sim = GameSimulator(cfg, SeededRNG(seed))
        sim.run()
        elapsed = time.time() - t0

        with open(os.path.join(sim.run_dir, "summary.json")) as f:
            summary = json.load(f)
        summary.pop("config", None)
        summary["seed"] = seed
        summary["player_type"] = player_type
        summary["pairs"] = pairs
        all_summaries.append(summary)
        print(f"  {elapsed:.1f}s")

    # write aggregated CSV
    os.makedirs(os.path.dirname(os.path.abspath(args.output)), exist_ok=True)
    if all_summaries:
        with open(args.output, "w", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=list(all_summaries[0].keys()))
            writer.writeheader()
            writer.writerows(all_summaries)

    print(f"\nSweep complete: {len(all_summaries)} runs → {args.output}")


if __name__ == "__main__":
    main()
