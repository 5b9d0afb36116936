from typing import Dict, Tuple

Cell = Tuple[int, int]

# enumeration order doubles as the tie-break order for direction choice
DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}


def manhattan(a: Cell, b: Cell) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def next_cell(head: Cell, direction: str) -> Cell:
    dx, dy = DIRECTIONS[direction]
    return (head[0] + dx, head[1] + dy)
