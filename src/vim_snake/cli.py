"""Command-line tools for running a headless simulation."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from vim_snake.config import SimulationConfig
from vim_snake.controls import KEY_LAYOUTS
from vim_snake.grid import CellType
from vim_snake.simulation import Simulation

logger = logging.getLogger(__name__)

_BOARD_CHARS: dict[int, str] = {
    CellType.EMPTY: ".",
    CellType.SEGMENT: "o",
    CellType.HEAD: "@",
    CellType.FOOD: "*",
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vim-snake",
        description="Headless snake simulation tools.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Run a headless simulation.")
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    run_p.add_argument("--frames", type=int, default=600)
    run_p.add_argument(
        "--frame-ms", type=float, default=None,
        help="Simulated milliseconds per frame (default: from config).",
    )
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument(
        "--layout", choices=sorted(KEY_LAYOUTS), default=None,
    )
    run_p.add_argument(
        "--keys", type=str, default=None,
        help=(
            "Comma-separated raw key names, one held per frame and cycled; "
            "an empty entry means no key held."
        ),
    )
    run_p.add_argument(
        "--board", action="store_true",
        help="Print the final board after the summary.",
    )

    # --- config ---
    config_p = sub.add_parser(
        "config", help="Write the default configuration as JSON.",
    )
    config_p.add_argument("output", help="Path for the config file.")

    return parser


def format_board(simulation: Simulation) -> str:
    """Render the arena as text, highest y on the top line."""
    cells = simulation.occupancy()
    return "\n".join(
        "".join(_BOARD_CHARS[int(c)] for c in row) for row in cells[::-1]
    )


def _run_simulation(args: argparse.Namespace) -> int:
    config = (
        SimulationConfig.load(args.config)
        if args.config else SimulationConfig()
    )

    overrides: dict = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.layout is not None:
        overrides["key_layout"] = args.layout
    if overrides:
        config = dataclasses.replace(config, **overrides)

    script = args.keys.split(",") if args.keys else []
    frame_ms = args.frame_ms if args.frame_ms is not None else config.frame_interval_ms

    simulation = Simulation(config)
    eaten = 0
    for i in range(args.frames):
        raw = [script[i % len(script)].strip()] if script else []
        report = simulation.update(frame_ms, simulation.decode(raw))
        if report.tick is not None:
            eaten += report.tick.eaten

    summary = {
        "frames": simulation.frame,
        "ticks": simulation.tick,
        "rounds": simulation.round,
        "food_eaten": eaten,
        "length": len(simulation.store.segments),
        "live_food": len(simulation.store.foods()),
    }
    logger.info(
        "Simulated %d frames (%d ticks, %d rounds).",
        simulation.frame, simulation.tick, simulation.round,
    )
    print(json.dumps(summary, indent=2))  # noqa: T201
    if args.board:
        print(format_board(simulation))  # noqa: T201
    return 0


def _write_config(args: argparse.Namespace) -> int:
    SimulationConfig().save(args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``vim-snake`` CLI."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_simulation,
        "config": _write_config,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
