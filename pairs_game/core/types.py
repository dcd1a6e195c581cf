"""Core domain types for the pairs-matching game."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Optional, Union


class ItemState(str, Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"
    MATCHED = "matched"


class EventKind(str, Enum):
    ITEM_ACTIVATED = "item_activated"
    PAIR_MATCHED = "pair_matched"
    PAIR_MISMATCHED = "pair_mismatched"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class ItemDescriptor:
    """One playable item as supplied by a card set."""
    id: int
    pair_id: int


@dataclass
class Item:
    id: int
    pair_id: int
    state: ItemState = ItemState.INACTIVE


@dataclass(frozen=True)
class GameStats:
    """Statistics snapshot for one game.

    ``end_time`` stays None and ``elapsed`` stays 0 until the last pair
    is matched.
    """
    start_time: float
    end_time: Optional[float] = None
    elapsed: float = 0.0
    attempts: int = 0


# ── events ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ItemActivated:
    item_id: int
    kind: ClassVar[EventKind] = EventKind.ITEM_ACTIVATED


@dataclass(frozen=True)
class PairMatched:
    item_ids: tuple[int, int]
    kind: ClassVar[EventKind] = EventKind.PAIR_MATCHED


@dataclass(frozen=True)
class PairMismatched:
    item_ids: tuple[int, int]
    kind: ClassVar[EventKind] = EventKind.PAIR_MISMATCHED


@dataclass(frozen=True)
class GameOver:
    stats: GameStats
    kind: ClassVar[EventKind] = EventKind.GAME_OVER


GameEvent = Union[ItemActivated, PairMatched, PairMismatched, GameOver]


# ── simulation ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class BoardView:
    """What an automated player sees before choosing an item."""
    face_down: tuple[int, ...]
    pending: Optional[int] = None      # id of the revealed first pick
    attempts: int = 0


@dataclass
class GameResult:
    game_index: int
    player_type: str
    card_set: str
    pair_count: int
    attempts: int
    mismatches: int
    elapsed: float
    gave_up: bool = False
    completed: bool = True
    layout: list[int] = field(default_factory=list)
