import numpy as np
from typing import Iterator, List, Optional, Tuple

from .config import CFG
from .entities import Snake
from .utils import Cell, manhattan


class Grid:
    """Bounds and occupancy queries over a square GRID_SIZE board."""

    def __init__(self, cfg: CFG):
        self.size = cfg.GRID_SIZE

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.size and 0 <= y < self.size

    def is_occupied(self, cell: Cell, a: Snake, b: Snake) -> bool:
        return cell in a.body or cell in b.body

    def is_valid_move(self, cell: Cell, snake: Snake, other: Snake) -> bool:
        return self.in_bounds(cell) and not self.is_occupied(cell, snake, other)


class FoodPool:
    """Uneaten food cells, kept in insertion order."""

    def __init__(self, cfg: CFG, rng: np.random.Generator):
        self.cfg = cfg
        self.rng = rng
        self.cells: List[Cell] = []

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __contains__(self, cell) -> bool:
        return tuple(cell) in self.cells

    def add(self, cell: Cell):
        cell = (int(cell[0]), int(cell[1]))
        if cell not in self.cells:
            self.cells.append(cell)

    def remove(self, cell: Cell):
        cell = tuple(cell)
        if cell in self.cells:
            self.cells.remove(cell)

    def clear(self):
        self.cells.clear()

    def spawn(self, *snakes: Snake) -> Tuple[Cell, bool]:
        """Place one food on a random free cell.

        Candidates hitting a snake body or existing food are redrawn up to
        MAX_SPAWN_ATTEMPTS times; after that the last candidate is kept anyway.
        Returns (cell, forced) where forced means the cap was reached with no
        free candidate.
        """
        n = self.cfg.GRID_SIZE
        occupied = set(self.cells)
        for s in snakes:
            occupied.update(s.body)

        forced = True
        for _ in range(self.cfg.MAX_SPAWN_ATTEMPTS):
            cell = (int(self.rng.integers(0, n)), int(self.rng.integers(0, n)))
            if cell not in occupied:
                forced = False
                break
        # a forced cell may already hold food; keep the pool duplicate-free
        self.add(cell)
        return cell, forced

    def nearest(self, frm: Cell, exclude: Optional[Cell] = None) -> Optional[Cell]:
        """Closest food by Manhattan distance; ties go to the earliest added."""
        best = None
        bestd = 10**9
        for c in self.cells:
            if exclude is not None and c == tuple(exclude):
                continue
            d = manhattan(frm, c)
            if d < bestd:
                bestd = d
                best = c
        return best
