import pytest

from coopsnake.config import CFG
from coopsnake.entities import EventKind, Intent
from coopsnake.sim import Sim

from conftest import place


def check_invariants(sim):
    n = sim.cfg.GRID_SIZE
    b1, b2 = sim.snake1.body, sim.snake2.body
    for body in (b1, b2):
        assert len(body) >= 1
        assert all(0 <= x < n and 0 <= y < n for x, y in body)
        assert len(set(body)) == len(body)
    assert not set(b1) & set(b2)
    assert not set(sim.food) & (set(b1) | set(b2))
    assert len(sim.intents) <= 2


def test_reset_gives_initial_state(sim):
    snap = sim.snapshot()
    assert snap.agent1_body == ((5, 12),)
    assert snap.agent2_body == ((19, 12),)
    assert snap.score == 0
    assert len(snap.food_cells) == 3
    assert len(set(snap.food_cells)) == 3
    assert snap.terminal is False


def test_reset_after_play_is_idempotent(sim):
    for _ in range(300):
        sim.tick()
    sim.reset()
    first = sim.snapshot()
    sim.reset()
    second = sim.snapshot()
    for snap in (first, second):
        assert snap.agent1_body == ((5, 12),)
        assert snap.agent2_body == ((19, 12),)
        assert snap.score == 0
        assert len(snap.food_cells) == 3
        assert snap.terminal is False
    assert sim.snake1.direction == "RIGHT"
    assert sim.snake2.direction == "LEFT"
    assert len(sim.intents) == 0
    assert sim.last_result is None


def test_greedy_step_moves_toward_target(sim):
    place(sim, [(5, 5)], "UP", [(20, 20)], "LEFT")
    assert sim.best_direction(sim.snake1, (7, 5), sim.snake2) == "RIGHT"


def test_greedy_ties_follow_enumeration_order(sim):
    place(sim, [(5, 5)], "UP", [(20, 20)], "LEFT")
    # DOWN and RIGHT both reach distance 3
    assert sim.best_direction(sim.snake1, (7, 7), sim.snake2) == "DOWN"
    # every neighbour is distance 1 from the head itself
    assert sim.best_direction(sim.snake1, (5, 5), sim.snake2) == "UP"


def test_greedy_skips_blocked_cells(sim):
    place(sim, [(5, 5)], "UP", [(6, 5), (6, 4)], "LEFT")
    # UP, DOWN and LEFT all end up three away
    assert sim.best_direction(sim.snake1, (7, 5), sim.snake2) == "UP"


def test_no_valid_direction_keeps_heading(sim):
    place(sim, [(0, 0)], "LEFT", [(1, 0), (1, 1), (0, 1)], "LEFT")
    assert sim.best_direction(sim.snake1, (10, 10), sim.snake2) == "LEFT"


def test_second_mover_yields_last_food(sim):
    place(sim, [(5, 12)], "RIGHT", [(19, 12)], "LEFT", food=[(10, 12)])

    result = sim.tick()

    assert sim.intents.get(1) == Intent(1, True, (10, 12))
    assert sim.snake2.target is None
    assert sim.intents.get(2) == Intent(2, False, None)
    kinds = [(e.agent_id, e.kind) for e in result.events]
    assert (1, EventKind.TARGETING_FOOD) in kinds
    assert (2, EventKind.FOLLOWING_TAIL) in kinds
    assert (2, EventKind.TARGETING_FOOD) not in kinds


def test_second_mover_picks_other_food(sim):
    place(sim, [(5, 12)], "RIGHT", [(19, 12)], "LEFT", food=[(12, 12), (5, 0)])

    result = sim.tick()

    assert sim.snake1.target == (12, 12)
    assert sim.snake2.target == (5, 0)
    event = [e for e in result.events if e.agent_id == 2][0]
    assert event.kind == EventKind.TARGETING_FOOD
    assert event.yielded


def test_first_mover_reads_previous_tick_intent(sim):
    place(sim, [(5, 12)], "RIGHT", [(19, 12)], "LEFT", food=[(10, 12)])
    # snake 2 claimed the only food last tick
    sim.intents.publish(2, Intent(2, True, (10, 12)))

    sim.tick()

    assert sim.snake1.target is None
    assert sim.intents.get(1) == Intent(1, False, None)
    # snake 2 then sees snake 1's fresh, empty claim
    assert sim.snake2.target == (10, 12)


def test_stale_claim_on_eaten_food_is_ignored(sim):
    place(sim, [(5, 12)], "RIGHT", [(19, 12)], "LEFT", food=[(8, 12)])
    sim.intents.publish(2, Intent(2, True, (0, 0)))

    result = sim.tick()

    assert sim.snake1.target == (8, 12)
    assert not result.events[0].yielded


def test_crash_ends_game_before_second_snake(sim):
    place(sim, [(0, 0)], "LEFT", [(1, 0), (1, 1), (0, 1)], "LEFT", food=[(10, 10)])

    result = sim.tick()

    assert result.alive_agent1 is False
    assert result.alive_agent2 is True
    assert result.score_delta == 0
    assert sim.terminal
    assert sim.crashed == 1
    assert sim.snake1.body == [(0, 0)]
    assert sim.snake1.direction == "LEFT"
    assert sim.snake2.body == [(1, 0), (1, 1), (0, 1)]
    assert result.events[-1].kind == EventKind.CRASHED
    assert result.events[-1].detail == (-1, 0)
    assert all(e.agent_id == 1 for e in result.events)
    assert sim.intents.get(2) is None


def test_second_snake_crash(sim):
    place(sim, [(10, 10)], "RIGHT", [(24, 24), (24, 23), (23, 23), (23, 24)], "RIGHT", food=[(12, 10)])

    result = sim.tick()

    assert result.alive_agent1 is True
    assert result.alive_agent2 is False
    assert sim.crashed == 2
    assert sim.snake1.body == [(11, 10)]
    assert result.events[-1].agent_id == 2
    assert result.events[-1].kind == EventKind.CRASHED


def test_tick_after_game_over_is_noop(sim):
    place(sim, [(0, 0)], "LEFT", [(1, 0), (1, 1), (0, 1)], "LEFT", food=[(10, 10)])
    last = sim.tick()
    before = sim.snapshot()

    again = sim.tick()

    assert again is last
    assert sim.snapshot() == before

    sim.reset()
    assert sim.snapshot().terminal is False
    assert sim.tick().alive_agent1


def test_eating_grows_and_respawns(sim):
    place(sim, [(5, 12)], "RIGHT", [(19, 12)], "LEFT", food=[(6, 12)])

    result = sim.tick()

    assert sim.snake1.body == [(6, 12), (5, 12)]
    assert sim.snake1.target is None
    assert sim.score >= 1
    eaten = [e for e in result.events if e.kind == EventKind.ATE_FOOD]
    assert eaten[0].agent_id == 1
    assert eaten[0].detail == (6, 12)
    assert result.score_delta == len(eaten) == sim.score
    assert (6, 12) not in sim.food
    assert len(sim.food) == 1


def test_plain_move_drops_tail(sim):
    place(sim, [(5, 12), (4, 12), (3, 12)], "RIGHT", [(19, 12)], "LEFT", food=[(9, 12)])

    result = sim.tick()

    assert sim.snake1.body == [(6, 12), (5, 12), (4, 12)]
    assert result.score_delta == 0


def test_tail_chase_when_no_food(sim):
    place(sim, [(5, 5), (5, 6), (6, 6)], "UP", [(19, 12)], "LEFT")

    result = sim.tick()

    assert result.events[0].kind == EventKind.FOLLOWING_TAIL
    assert result.events[0].detail == (6, 6)
    # RIGHT is the only step that gets closer to the tail
    assert sim.snake1.body == [(6, 5), (5, 5), (5, 6)]


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_invariants_hold_over_long_runs(seed):
    sim = Sim(CFG(SEED=seed))
    check_invariants(sim)
    for _ in range(1500):
        len1, len2 = len(sim.snake1.body), len(sim.snake2.body)
        result = sim.tick()
        ate = {e.agent_id for e in result.events if e.kind == EventKind.ATE_FOOD}
        assert len(sim.snake1.body) == len1 + (1 in ate)
        assert len(sim.snake2.body) == len2 + (2 in ate)
        assert result.score_delta == sum(1 for e in result.events if e.kind == EventKind.ATE_FOOD)
        check_invariants(sim)
        if sim.terminal:
            break
        assert len(sim.food) == sim.cfg.INITIAL_FOOD_COUNT


def test_same_seed_same_game():
    a, b = Sim(CFG(SEED=11)), Sim(CFG(SEED=11))
    for _ in range(200):
        assert a.tick() == b.tick()
    assert a.snapshot() == b.snapshot()


def test_snapshot_is_a_copy(sim):
    snap = sim.snapshot()
    sim.snake1.body.insert(0, (6, 12))
    assert snap.agent1_body == ((5, 12),)


def test_config_validation():
    with pytest.raises(ValueError):
        CFG(GRID_SIZE=0)
    with pytest.raises(ValueError):
        CFG(GRID_SIZE=10)
    with pytest.raises(ValueError):
        CFG(SNAKE1_DIRECTION="NORTH")
    with pytest.raises(ValueError):
        CFG(SNAKE2_START=(5, 12))
    with pytest.raises(ValueError):
        CFG(MAX_SPAWN_ATTEMPTS=0)
