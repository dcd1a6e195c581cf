"""Configuration loading and defaults."""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional

import yaml


@dataclass
class EngineConfig:
    unknown_item_policy: str = "raise"    # "raise" | "ignore"


@dataclass
class CardSetConfig:
    name: str = "colors"                  # "colors" | "sequential"
    pairs: Optional[int] = None           # None = the whole deck


@dataclass
class PlayerConfig:
    player_type: str = "memory"           # "memory" | "random" | "solver"
    memory_k: Optional[int] = None        # None = perfect recall
    give_up_after: Optional[int] = None   # attempts before replaying the solution
    give_up_delay_sec: float = 0.0


@dataclass
class SimulationConfig:
    games: int = 20
    seed: int = 42
    output_dir: str = "outputs/runs"
    max_selections: int = 10000
    engine: EngineConfig = field(default_factory=EngineConfig)
    card_set: CardSetConfig = field(default_factory=CardSetConfig)
    player: PlayerConfig = field(default_factory=PlayerConfig)


def load_config(path: str) -> SimulationConfig:
    """Load configuration from a YAML file."""
    with open(path, "r") as f:
        data = yaml.safe_load(f) or {}
    return _dict_to_config(data)


_NESTED = {
    "engine": EngineConfig,
    "card_set": CardSetConfig,
    "player": PlayerConfig,
}

_TOP_SCALARS = ("games", "seed", "output_dir", "max_selections")


def _dict_to_config(data: dict[str, Any]) -> SimulationConfig:
    cfg = SimulationConfig()
    for key in _TOP_SCALARS:
        if key in data:
            setattr(cfg, key, data[key])
    for section, cls in _NESTED.items():
        raw = data.get(section)
        if not isinstance(raw, dict):
            continue
        # unknown keys are dropped
        names = {f.name for f in fields(cls)}
        setattr(cfg, section, cls(**{k: v for k, v in raw.items() if k in names}))
    return cfg


def config_to_dict(cfg: SimulationConfig) -> dict[str, Any]:
    """Return a JSON-serialisable view of *cfg* for run summaries."""
    return {
        "games": cfg.games,
        "seed": cfg.seed,
        "max_selections": cfg.max_selections,
        "unknown_item_policy": cfg.engine.unknown_item_policy,
        "card_set": cfg.card_set.name,
        "pairs": cfg.card_set.pairs,
        "player_type": cfg.player.player_type,
        "memory_k": cfg.player.memory_k,
        "give_up_after": cfg.player.give_up_after,
    }
