from dataclasses import dataclass, field
from typing import Tuple, Dict, Optional

from .utils import DIRECTIONS


@dataclass
class CFG:
    # World
    GRID_SIZE: int = 25
    SEED: Optional[int] = None   # None -> fresh entropy each run

    # Food
    INITIAL_FOOD_COUNT: int = 3
    MAX_SPAWN_ATTEMPTS: int = 100    # after this many rejections the last candidate is kept

    # Snakes (head cell, starting heading)
    SNAKE1_START: Tuple[int, int] = (5, 12)
    SNAKE1_DIRECTION: str = "RIGHT"
    SNAKE2_START: Tuple[int, int] = (19, 12)
    SNAKE2_DIRECTION: str = "LEFT"

    # Timing (driver only)
    TICK_MS: int = 150

    # Visualization
    CELL_SIZE: int = 20
    LOG_LINES: int = 5
    SNAKE_COLORS: Dict[int, Tuple[Tuple[int, int, int], Tuple[int, int, int]]] = field(default_factory=lambda: {
        1: ((0, 255, 0), (0, 170, 0)),      # head, body
        2: ((0, 255, 255), (0, 136, 170)),
    })

    def __post_init__(self):
        if self.GRID_SIZE <= 0:
            raise ValueError(f"GRID_SIZE must be positive, got {self.GRID_SIZE}")
        for name in ("SNAKE1_START", "SNAKE2_START"):
            x, y = getattr(self, name)
            if not (0 <= x < self.GRID_SIZE and 0 <= y < self.GRID_SIZE):
                raise ValueError(f"{name}={(x, y)} lies outside a {self.GRID_SIZE}x{self.GRID_SIZE} grid")
        if tuple(self.SNAKE1_START) == tuple(self.SNAKE2_START):
            raise ValueError("snakes cannot start on the same cell")
        for name in ("SNAKE1_DIRECTION", "SNAKE2_DIRECTION"):
            if getattr(self, name) not in DIRECTIONS:
                raise ValueError(f"{name} must be one of {tuple(DIRECTIONS)}, got {getattr(self, name)!r}")
        if self.INITIAL_FOOD_COUNT < 0:
            raise ValueError("INITIAL_FOOD_COUNT cannot be negative")
        if self.MAX_SPAWN_ATTEMPTS < 1:
            raise ValueError("MAX_SPAWN_ATTEMPTS must be at least 1")
