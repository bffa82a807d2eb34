"""Reachability — breadth-first wavefront expansion over a hex grid.

A fringe is the list of frontier sets produced by expanding from a start
point one unweighted step at a time:

    fringe[0] = {start}
    fringe[i] = neighbors of fringe[i - 1], minus obstacles, minus every
                point already seen at an earlier step

Levels are disjoint, and the fringe always has ``max_steps + 1`` levels
(trailing levels may be empty once the wave is boxed in). A start point
that is itself an obstacle reaches nothing, not even itself.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Any, Optional

from hexkit.models.grid import Grid
from hexkit.models.hex import Point

log = logging.getLogger(__name__)

Fringe = list[frozenset[Point]]


def fringes(
    start: Point,
    max_steps: int,
    obstacles: AbstractSet[Point],
    grid: Optional[Grid[Any]] = None,
) -> Fringe:
    """Expand from `start` for `max_steps` steps.

    Args:
        start: Origin of the wave.
        max_steps: Number of expansion steps after level 0.
        obstacles: Points the wave may not enter.
        grid: Optional bound; when given, points outside it are never entered.

    Returns:
        One frozenset per step level, or an empty list if start is blocked.
    """
    if start in obstacles:
        return []

    visited: set[Point] = {start}
    levels: Fringe = [frozenset({start})]
    for _ in range(max_steps):
        level: set[Point] = set()
        for p in levels[-1]:
            for n in p.neighbors():
                if n in visited or n in obstacles:
                    continue
                if grid is not None and not grid.contains(n):
                    continue
                visited.add(n)
                level.add(n)
        levels.append(frozenset(level))

    log.debug("fringe from %s: %d levels, %d points", start, len(levels), len(visited))
    return levels


def reachable(
    start: Point,
    max_steps: int,
    obstacles: AbstractSet[Point],
    grid: Optional[Grid[Any]] = None,
) -> set[Point]:
    """All points reachable from `start` within `max_steps` steps."""
    result: set[Point] = set()
    for level in fringes(start, max_steps, obstacles, grid):
        result |= level
    return result


def step_counts(
    start: Point,
    max_steps: int,
    obstacles: AbstractSet[Point],
    grid: Optional[Grid[Any]] = None,
) -> dict[Point, int]:
    """Map every reachable point to the number of steps needed to reach it.

    Prefer this over repeated ``count_steps`` calls when querying many
    destinations from the same start.
    """
    return {
        p: steps
        for steps, level in enumerate(fringes(start, max_steps, obstacles, grid))
        for p in level
    }


def count_steps(
    start: Point,
    end: Point,
    max_steps: int,
    obstacles: AbstractSet[Point],
    grid: Optional[Grid[Any]] = None,
) -> Optional[int]:
    """Number of steps from `start` to `end`, or None if out of reach."""
    for steps, level in enumerate(fringes(start, max_steps, obstacles, grid)):
        if end in level:
            return steps
    return None
