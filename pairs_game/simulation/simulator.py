"""Simulation engine: plays a batch of games and writes evaluation outputs."""
from __future__ import annotations

import os
import time

from pairs_game.cardsets.catalog import create_card_set
from pairs_game.core.config import SimulationConfig, config_to_dict
from pairs_game.core.logging import EventLogger
from pairs_game.core.rng import SeededRNG
from pairs_game.core.types import GameResult
from pairs_game.engine.matcher import PairsMatcher
from pairs_game.evaluation.metrics import compute_metrics
from pairs_game.evaluation.reports import write_games_csv, write_summary
from pairs_game.players.base import BasePlayer
from pairs_game.simulation.session import GameSession


class GameSimulator:
    """Runs ``config.games`` automated games with one player type.

    Each game gets its own forked RNG, shared by the layout shuffle and
    the player, so a seed reproduces the whole run.
    """

    def __init__(self, config: SimulationConfig, rng: SeededRNG):
        self.config = config
        self.rng = rng

        # run directory
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.run_dir = os.path.join(
            config.output_dir, f"{timestamp}_s{config.seed}"
        )
        os.makedirs(self.run_dir, exist_ok=True)

        self.card_set = create_card_set(config.card_set)
        self.event_logger = EventLogger(self.run_dir)

        self.results: list[GameResult] = []

    # ── player creation ──────────────────────────────────────────────────

    def _create_player(self, player_type: str, rng: SeededRNG) -> BasePlayer:
        from pairs_game.players.memory_player import MemoryPlayer
        from pairs_game.players.random_player import RandomPlayer
        from pairs_game.players.solver import SolverPlayer

        if player_type == "random":
            return RandomPlayer(rng)
        if player_type == "memory":
            return MemoryPlayer(rng, memory_k=self.config.player.memory_k)
        if player_type == "solver":
            return SolverPlayer()
        raise ValueError(f"Unknown player type: {player_type}")

    # ── main loop ────────────────────────────────────────────────────────

    def run(self) -> list[GameResult]:
        cfg = self.config
        try:
            for game_index in range(cfg.games):
                game_rng = self.rng.fork()
                matcher = PairsMatcher(
                    rng=game_rng,
                    unknown_item_policy=cfg.engine.unknown_item_policy,
                )
                session = GameSession(
                    matcher=matcher,
                    player=self._create_player(cfg.player.player_type, game_rng),
                    card_set=self.card_set,
                    event_logger=self.event_logger,
                    game_index=game_index,
                    give_up_after=cfg.player.give_up_after,
                    give_up_delay_sec=cfg.player.give_up_delay_sec,
                    max_selections=cfg.max_selections,
                )
                self.results.append(session.run())
        finally:
            self.event_logger.close()

        # ── finalise ─────────────────────────────────────────────────────
        metrics = compute_metrics(self.results)
        metrics["config"] = config_to_dict(cfg)

        write_summary(metrics, self.run_dir)
        write_games_csv(self.results, self.run_dir)
        return self.results
