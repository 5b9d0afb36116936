import pytest

from coopsnake.config import CFG
from coopsnake.entities import Snake
from coopsnake.sim import Sim


@pytest.fixture
def cfg():
    return CFG(SEED=7)


@pytest.fixture
def sim(cfg):
    return Sim(cfg)


def place(sim, body1, dir1, body2, dir2, food=()):
    """Overwrite the board with hand-built snakes and food."""
    sim.snake1 = Snake(id=1, body=list(body1), direction=dir1)
    sim.snake2 = Snake(id=2, body=list(body2), direction=dir2)
    sim.food.clear()
    for cell in food:
        sim.food.add(cell)
    sim.intents.clear()
