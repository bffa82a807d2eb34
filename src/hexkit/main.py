"""Command-line entry point.

Loads a grid file (or builds an empty grid from the configured radius and
default tile) and runs one query against it, printing one ``q,r`` per
line so results can be piped into other tools:

1. Load configuration (config/hexkit.yaml, optional)
2. Load the grid and its obstacles, or build the default grid
3. Run the query and print the points

Usage:
    python -m hexkit.main --grid maps/arena.yaml path 0,0 2,0
    # or via entry point:
    hexkit reach 0,0 2
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import yaml
from pydantic import ValidationError

from hexkit.engine.fringe import fringes
from hexkit.engine.hex_pathfinding import find_path, find_weighted_path, obstacle_cost
from hexkit.engine.line_of_sight import fog_of_war
from hexkit.loaders.config_loader import DEFAULT_CONFIG_PATH, HexConfig, load_config
from hexkit.loaders.grid_loader import LoadedGrid, load_grid
from hexkit.models.grid import Grid
from hexkit.models.grid_document import format_point, parse_point
from hexkit.models.hex import Point

log = logging.getLogger(__name__)


def _point_arg(text: str) -> Point:
    try:
        return parse_point(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hexkit", description="Hex grid queries.")
    parser.add_argument("--grid", default=None,
                        help="grid YAML file (default: empty grid from config)")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="config YAML file")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("path", help="shortest unweighted path")
    p.add_argument("start", type=_point_arg)
    p.add_argument("end", type=_point_arg)

    p = sub.add_parser("weighted", help="cheapest path, obstacles as blocked cost")
    p.add_argument("start", type=_point_arg)
    p.add_argument("end", type=_point_arg)

    p = sub.add_parser("reach", help="reachable points by step count")
    p.add_argument("start", type=_point_arg)
    p.add_argument("steps", type=int, nargs="?", default=None)

    p = sub.add_parser("fog", help="points hidden from an observer")
    p.add_argument("eye", type=_point_arg)
    return parser


def default_grid(config: HexConfig) -> LoadedGrid:
    """Empty grid of the configured radius, every tile the default tile."""
    grid = Grid.empty(config.grid_radius, config.default_tile)
    return LoadedGrid(grid=grid, obstacles=frozenset())


def run_query(args: argparse.Namespace, config: HexConfig, loaded: LoadedGrid) -> list[str]:
    """Run the query named by ``args.command`` and return the output lines."""
    grid, obstacles = loaded.grid, loaded.obstacles

    if args.command == "path":
        points = find_path(args.start, args.end, obstacles, grid)
        return [format_point(p) for p in points]

    if args.command == "weighted":
        cost = obstacle_cost(obstacles, blocked=config.blocked_cost, base=config.base_cost)
        points = find_weighted_path(args.start, args.end, cost, grid)
        return [format_point(p) for p in points]

    if args.command == "reach":
        steps = config.max_steps if args.steps is None else args.steps
        lines: list[str] = []
        for i, level in enumerate(fringes(args.start, steps, obstacles, grid)):
            for p in sorted(level, key=lambda h: (h.q, h.r)):
                lines.append(f"{i} {format_point(p)}")
        return lines

    if args.command == "fog":
        hidden = fog_of_war(args.eye, obstacles, grid)
        return [format_point(p) for p in sorted(hidden, key=lambda h: (h.q, h.r))]

    raise ValueError(f"unknown command {args.command!r}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``hexkit`` command."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    config = load_config(args.config)
    logging.getLogger().setLevel(getattr(logging, config.log_level.upper(), logging.INFO))

    if args.grid is None:
        loaded = default_grid(config)
    else:
        try:
            loaded = load_grid(args.grid)
        except FileNotFoundError:
            print(f"Error: grid file not found: {args.grid}", file=sys.stderr)
            return 1
        except (ValidationError, yaml.YAMLError) as exc:
            print(f"Error: invalid grid file {args.grid}:\n{exc}", file=sys.stderr)
            return 1

    log.debug("Running %s on %s", args.command, args.grid or "default grid")
    for text in run_query(args, config, loaded):
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
