"""Command line entry point.

Run with: `python -m blockfall` (falling-block simulator) or
`python -m blockfall life` (text-mode Game of Life).

Pass ``--help`` to either subcommand to see its options.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import sleep
from typing import List, Optional, Sequence

from .config import (
    BOX_SIZE,
    CANVAS_SIZE,
    FALL_STEPS,
    FPS,
    GameConfig,
    InputMode,
    LifeConfig,
)
from .life import Universe
from .shapes import SHAPE_NAMES

COMMANDS = ("play", "life")


def build_parser() -> argparse.ArgumentParser:
    log_help = "Logging level (e.g. DEBUG, INFO, WARNING)."
    # Accepted before or after the subcommand; the subcommand copy only
    # overrides the top-level value when it is given
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--log-level", default=argparse.SUPPRESS, help=log_help)

    parser = argparse.ArgumentParser(prog="blockfall", description=__doc__)
    parser.add_argument("--log-level", default="INFO", help=log_help)
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", parents=[common], help="Run the falling-block simulator.")
    play.add_argument("--width", type=int, default=CANVAS_SIZE[0], help="Grid width in cells.")
    play.add_argument("--height", type=int, default=CANVAS_SIZE[1], help="Grid height in cells.")
    play.add_argument("--box-size", type=int, default=BOX_SIZE, help="Cell size in pixels.")
    play.add_argument("--fps", type=int, default=FPS, help="Frames per second.")
    play.add_argument(
        "--fall-steps",
        type=int,
        default=FALL_STEPS,
        help="Step counter value at which the piece falls one row.",
    )
    play.add_argument(
        "--input",
        dest="input_mode",
        choices=[mode.value for mode in InputMode],
        default=InputMode.SINGLE.value,
        help="'single' applies one key press per frame, 'held' repeats held keys.",
    )
    play.add_argument(
        "--shape",
        dest="shapes",
        action="append",
        choices=SHAPE_NAMES,
        help="Shape to spawn; repeat to allow several (default: all).",
    )
    play.add_argument("--sprite", type=Path, default=None, help="Image drawn for each piece cell.")
    play.add_argument("--seed", type=int, default=None, help="Seed for the shape sequence.")
    play.add_argument(
        "--profile",
        action="store_true",
        help="Log per-frame section timings when the game stops.",
    )

    life = sub.add_parser("life", parents=[common], help="Print Game of Life generations.")
    life.add_argument("--width", type=int, default=16, help="Universe width.")
    life.add_argument("--height", type=int, default=8, help="Universe height.")
    life.add_argument("--generations", type=int, default=4, help="Generations to print after the first.")
    life.add_argument("--delay", type=float, default=0.0, help="Seconds to wait between generations.")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    args: List[str] = list(sys.argv[1:] if argv is None else argv)
    # ``play`` is the default subcommand
    if not any(arg in COMMANDS for arg in args) and args[:1] not in (["-h"], ["--help"]):
        args = ["play", *args]
    return build_parser().parse_args(args)


def game_config_from_args(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        width=args.width,
        height=args.height,
        box_size=args.box_size,
        fps=args.fps,
        fall_steps=args.fall_steps,
        input_mode=InputMode(args.input_mode),
        shapes=tuple(args.shapes) if args.shapes else SHAPE_NAMES,
        sprite=args.sprite,
        seed=args.seed,
        profile=args.profile,
    )


def life_config_from_args(args: argparse.Namespace) -> LifeConfig:
    return LifeConfig(
        width=args.width,
        height=args.height,
        generations=args.generations,
        delay=args.delay,
    )


def run_life(config: LifeConfig) -> Universe:
    universe = Universe.new(config.width, config.height)
    for generation in range(config.generations + 1):
        if generation:
            universe.tick()
            if config.delay:
                sleep(config.delay)
        print(f"Generation {generation} (population {universe.population()})")
        print(universe.render())
        print()
    return universe


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(message)s",
    )
    try:
        if args.command == "life":
            config = life_config_from_args(args)
        else:
            config = game_config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    if isinstance(config, LifeConfig):
        run_life(config)
        return

    # pygame is only needed for the window
    from .run_pygame import GameRunner

    GameRunner(config).run()


if __name__ == "__main__":
    main()
