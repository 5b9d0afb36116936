import numpy as np
from typing import List, Optional, Tuple

from .config import CFG
from .entities import Event, EventKind, Intent, Snake, Snapshot, TickResult
from .intents import IntentChannel
from .utils import Cell, DIRECTIONS, manhattan, next_cell
from .world import FoodPool, Grid


class Sim:
    def __init__(self, cfg: CFG):
        self.cfg = cfg
        self.rng = np.random.default_rng(cfg.SEED)
        self.grid = Grid(cfg)
        self.food = FoodPool(cfg, self.rng)
        self.intents = IntentChannel()
        self.reset()

    # ----- lifecycle -----

    def reset(self):
        """Put both snakes back at their start cells and lay fresh food."""
        cfg = self.cfg
        self.snake1 = Snake(id=1, body=[tuple(cfg.SNAKE1_START)], direction=cfg.SNAKE1_DIRECTION)
        self.snake2 = Snake(id=2, body=[tuple(cfg.SNAKE2_START)], direction=cfg.SNAKE2_DIRECTION)
        self.food.clear()
        self.intents.clear()
        self.score = 0
        self.terminal = False
        self.crashed: Optional[int] = None
        self.last_result: Optional[TickResult] = None
        self.tick_count = 0
        print(f"[0] RESET grid={cfg.GRID_SIZE} snake1={self.snake1.head} snake2={self.snake2.head}")
        for _ in range(cfg.INITIAL_FOOD_COUNT):
            self._spawn_food()

    @property
    def snakes(self) -> Tuple[Snake, Snake]:
        return self.snake1, self.snake2

    def snapshot(self) -> Snapshot:
        return Snapshot(
            agent1_body=tuple(self.snake1.body),
            agent2_body=tuple(self.snake2.body),
            food_cells=tuple(self.food),
            score=self.score,
            terminal=self.terminal,
        )

    def _spawn_food(self) -> Cell:
        (x, y), forced = self.food.spawn(self.snake1, self.snake2)
        print(f"[{self.tick_count}] SPAWN food=({x},{y}) forced={forced}")
        return (x, y)

    # ----- per-snake decision -----

    def choose_target(self, snake: Snake) -> Tuple[Optional[Cell], bool]:
        """Pick a food target, avoiding the cell the other snake has claimed.

        Returns (target, yielded). yielded is True when the other snake's claim
        removed a cell from consideration. If the claimed cell is the only food
        left the target is None and the snake falls back to chasing its tail.
        """
        if not self.food:
            return None, False
        other = self.intents.peek_other(snake.id)
        if other is not None and other.wants_food and other.target_cell is not None:
            yielded = other.target_cell in self.food
            return self.food.nearest(snake.head, exclude=other.target_cell), yielded
        return self.food.nearest(snake.head), False

    def best_direction(self, snake: Snake, aim: Cell, other: Snake) -> str:
        """One greedy step: the valid neighbour closest to aim, ties in UP/DOWN/LEFT/RIGHT order."""
        head = snake.head
        valid = [d for d in DIRECTIONS if self.grid.is_valid_move(next_cell(head, d), snake, other)]
        if not valid:
            return snake.direction
        return min(valid, key=lambda d: manhattan(next_cell(head, d), aim))

    def process_snake(self, snake: Snake, other: Snake, events: List[Event]) -> bool:
        """Decide and move one snake. Returns False if its move was rejected."""
        target, yielded = self.choose_target(snake)
        snake.target = target
        self.intents.publish(snake.id, Intent(author=snake.id, wants_food=target is not None, target_cell=target))

        if target is not None:
            aim = target
            events.append(Event(snake.id, EventKind.TARGETING_FOOD, target, yielded))
        else:
            aim = snake.tail
            events.append(Event(snake.id, EventKind.FOLLOWING_TAIL, aim, yielded))

        snake.direction = self.best_direction(snake, aim, other)
        new_head = next_cell(snake.head, snake.direction)

        if not self.grid.is_valid_move(new_head, snake, other):
            events.append(Event(snake.id, EventKind.CRASHED, new_head))
            print(f"[{self.tick_count}] CRASH snake={snake.id} pos={new_head} dir={snake.direction} len={len(snake.body)}")
            return False

        snake.body.insert(0, new_head)
        if new_head in self.food:
            self.food.remove(new_head)
            self.score += 1
            events.append(Event(snake.id, EventKind.ATE_FOOD, new_head))
            print(f"[{self.tick_count}] EAT snake={snake.id} pos={new_head} score={self.score} len={len(snake.body)}")
            self._spawn_food()
            snake.target = None
        else:
            snake.body.pop()
        return True

    # ----- per-tick mechanics -----

    def tick(self) -> TickResult:
        """Advance one step: snake 1 decides and moves, then snake 2.

        Once a snake has crashed the game is over and further calls return the
        last result unchanged until reset().
        """
        if self.terminal:
            return self.last_result

        self.tick_count += 1
        score_before = self.score
        events: List[Event] = []

        alive1 = self.process_snake(self.snake1, self.snake2, events)
        alive2 = True
        if not alive1:
            self._game_over(1)
        else:
            alive2 = self.process_snake(self.snake2, self.snake1, events)
            if not alive2:
                self._game_over(2)

        self.last_result = TickResult(
            alive_agent1=alive1,
            alive_agent2=alive2,
            score_delta=self.score - score_before,
            events=tuple(events),
        )
        return self.last_result

    def _game_over(self, snake_id: int):
        self.terminal = True
        self.crashed = snake_id
        print(f"[{self.tick_count}] GAMEOVER cause=snake{snake_id}_collided score={self.score}")
