from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .utils import Cell


class EventKind(str, Enum):
    TARGETING_FOOD = "TARGETING_FOOD"
    FOLLOWING_TAIL = "FOLLOWING_TAIL"
    ATE_FOOD = "ATE_FOOD"
    CRASHED = "CRASHED"


@dataclass
class Snake:
    id: int
    body: List[Cell]            # head first
    direction: str
    target: Optional[Cell] = None

    @property
    def head(self) -> Cell:
        return self.body[0]

    @property
    def tail(self) -> Cell:
        return self.body[-1]


@dataclass(frozen=True)
class Intent:
    author: int
    wants_food: bool
    target_cell: Optional[Cell]


@dataclass(frozen=True)
class Event:
    agent_id: int
    kind: EventKind
    detail: Optional[Cell] = None
    yielded: bool = False


@dataclass(frozen=True)
class TickResult:
    alive_agent1: bool
    alive_agent2: bool
    score_delta: int
    events: Tuple[Event, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Snapshot:
    """Read-only copy of the state a renderer needs."""
    agent1_body: Tuple[Cell, ...]
    agent2_body: Tuple[Cell, ...]
    food_cells: Tuple[Cell, ...]
    score: int
    terminal: bool
