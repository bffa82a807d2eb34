"""Line of sight — which grid cells an observer cannot see.

Every cell of the grid is tested with a straight hex line from the eye.
Walking that line outward, the first obstacle blocks the ray: the obstacle
itself and every later point on the same line are obstructed, even points
that are not obstacles. Obstructed points are collected across all rays.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Any

from hexkit.models.grid import Grid
from hexkit.models.hex import Point
from hexkit.util.hex_math import line

log = logging.getLogger(__name__)


def _blocked_tail(points: list[Point], obstacles: AbstractSet[Point]) -> list[Point]:
    """Points of a ray from the first obstacle onward."""
    for i, p in enumerate(points):
        if p in obstacles:
            return points[i:]
    return []


def fog_of_war(eye: Point, obstacles: AbstractSet[Point], grid: Grid[Any]) -> set[Point]:
    """All points hidden from `eye` by `obstacles`.

    An eye standing on an obstacle blocks every ray at its first point.
    """
    hidden: set[Point] = set()
    for end in grid:
        hidden.update(_blocked_tail(line(eye, end), obstacles))
    log.debug("fog from %s: %d of %d cells hidden", eye, len(hidden), len(grid))
    return hidden


def visible_points(eye: Point, obstacles: AbstractSet[Point], grid: Grid[Any]) -> set[Point]:
    """Grid points not hidden by ``fog_of_war``."""
    return set(grid) - fog_of_war(eye, obstacles, grid)


def is_visible(eye: Point, target: Point, obstacles: AbstractSet[Point]) -> bool:
    """Whether the direct line from `eye` to `target` is clear.

    Only the ray aimed at `target` is considered; ``fog_of_war`` may still
    hide the target when a ray aimed further out passes through it after an
    obstacle.
    """
    return not any(p in obstacles for p in line(eye, target))
