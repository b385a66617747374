"""Profile headless simulation frames using :mod:`blockfall.timing`.

Run with::

    PYTHONPATH=src python examples/profile_simulation.py

Pass ``--help`` to see options for the number of frames and logging.
"""

from __future__ import annotations

import argparse
import logging
import random

from blockfall.config import GameConfig
from blockfall.engine import Simulation
from blockfall.piece import Direction
from blockfall.timing import FrameTimer


LOGGER = logging.getLogger(__name__)

DIRECTIONS = list(Direction)


def run_simulation(frames: int, timer: FrameTimer, seed: int = 42) -> Simulation:
    """Drive a simulation with random key presses for ``frames`` frames."""

    rng = random.Random(seed)
    sim = Simulation(GameConfig(seed=seed))
    for _ in range(frames):
        direction = rng.choice(DIRECTIONS)
        with timer.section("update"):
            sim.step(direction)
    return sim


def log_summary(timer: FrameTimer, sim: Simulation) -> list[dict[str, float | int]]:
    summary = timer.summary()
    LOGGER.info(
        "%d piece(s), %d line(s), %d game(s): %s",
        sim.state.pieces,
        sim.state.lines,
        sim.games,
        timer.format_summary(),
    )
    return summary


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--frames", type=int, default=5000, help="Number of frames to simulate.")
    parser.add_argument("--seed", type=int, default=42, help="Seed for shapes and key presses.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    timer = FrameTimer()
    sim = run_simulation(args.frames, timer, seed=args.seed)
    log_summary(timer, sim)


if __name__ == "__main__":
    main()
