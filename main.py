import argparse
import sys
import time
from typing import List, Optional

from coopsnake.config import CFG
from coopsnake.sim import Sim


def build_cfg(ns: argparse.Namespace) -> CFG:
    kwargs = {}
    if ns.seed is not None:
        kwargs["SEED"] = ns.seed
    if ns.grid_size is not None:
        kwargs["GRID_SIZE"] = ns.grid_size
    if ns.tick_ms is not None:
        kwargs["TICK_MS"] = ns.tick_ms
    return CFG(**kwargs)


def run_headless(sim: Sim, ticks: int) -> int:
    for _ in range(ticks):
        sim.tick()
        if sim.terminal:
            break
    snap = sim.snapshot()
    print(f"Finished after {sim.tick_count} ticks: score={snap.score} terminal={snap.terminal} "
          f"snake1_len={len(snap.agent1_body)} snake2_len={len(snap.agent2_body)}")
    return 0


def run(sim: Sim, cfg: CFG) -> int:
    from visualization.pygame.monitor import PygameMonitor

    monitor = PygameMonitor(sim, cfg)
    tick_interval = cfg.TICK_MS / 1000.0
    last_tick_time = time.time()

    try:
        while True:
            now = time.time()
            # only advance sim if enough time has passed
            if now - last_tick_time >= tick_interval:
                last_tick_time = now
                if not monitor.is_paused and not sim.terminal:
                    result = sim.tick()
                    monitor.record(result)

            # always render monitor
            if not monitor.render():
                print("Simulation stopped by user")
                return 0
    finally:
        monitor.cleanup()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="coopsnake",
        description="Two cooperating snakes collecting food on a shared grid.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food placement.")
    parser.add_argument("--grid-size", type=int, default=None, help="Board side length in cells (default 25).")
    parser.add_argument("--tick-ms", type=int, default=None, help="Milliseconds between ticks (default 150).")
    parser.add_argument("--headless", action="store_true", help="Run without a window and print the outcome.")
    parser.add_argument("--ticks", type=int, default=1000, help="Tick limit for --headless runs.")
    ns = parser.parse_args(argv)

    try:
        cfg = build_cfg(ns)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    sim = Sim(cfg)
    if ns.headless:
        return run_headless(sim, ns.ticks)
    return run(sim, cfg)


if __name__ == "__main__":
    sys.exit(main())
