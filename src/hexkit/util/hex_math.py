"""Hex math utilities — geometry functions for hexagonal grids.

All functions operate on Point (axial coordinates) and are pure.
Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from typing import Optional

from hexkit.models.hex import DIAGONALS, DIRECTIONS, HexDirection, Point, Rotation


def axial_to_cube(p: Point) -> tuple[int, int, int]:
    """Return the cube coordinate (x, y, z) of an axial point."""
    return p.cube


def distance(a: Point, b: Point) -> int:
    """Compute the hex grid distance between two points."""
    return a.distance_to(b)


def neighbor(direction: int, p: Point) -> Point:
    """Step one hex from `p` in the given direction (index taken modulo 6)."""
    return p + DIRECTIONS[direction % 6]


def neighbors(p: Point) -> list[Point]:
    """Return the 6 neighbors of a point."""
    return p.neighbors()


def diagonals(p: Point) -> list[Point]:
    """Return the 6 diagonal points of the second ring."""
    return [p + d for d in DIAGONALS]


def rotate(rotation: Rotation, p: Point) -> Point:
    """Rotate a point 60° about the origin.

    Callers wanting to rotate about another pivot translate first:
    ``rotate(Rotation.LEFT, p - pivot) + pivot``.
    """
    if rotation is Rotation.RIGHT:
        return Point(-p.z, -p.y)
    return Point(-p.y, -p.x)


def line(a: Point, b: Point) -> list[Point]:
    """Draw a line between two points using linear interpolation.

    Returns a list of points from a to b (inclusive), one per step, so the
    result always holds distance(a, b) + 1 points. A zero-length line
    (a == b) is the single point ``[a]``, not an empty list.
    Uses cube coordinate interpolation with rounding.
    """
    n = a.distance_to(b)
    if n == 0:
        return [a]

    results: list[Point] = []
    for i in range(n + 1):
        t = i / n
        # Interpolate in cube space
        fx = a.x + (b.x - a.x) * t
        fy = a.y + (b.y - a.y) * t
        fz = a.z + (b.z - a.z) * t
        results.append(_cube_round(fx, fy, fz))
    return results


def hex_range(n: int, center: Point) -> list[Point]:
    """Return all points within distance `n` of center (inclusive)."""
    results: list[Point] = []
    for dx in range(-n, n + 1):
        for dz in range(max(-n, -dx - n), min(n, -dx + n) + 1):
            results.append(Point(center.q + dx, center.r + dz))
    return results


def ring(radius: int, center: Point) -> list[Point]:
    """Return all points at exactly `radius` distance from center.

    The walk starts `radius` steps south-west of center and follows the six
    directions in order, so the result is in walk order, not sorted.
    """
    if radius < 0:
        return []
    if radius == 0:
        return [center]
    results: list[Point] = []
    h = center + DIRECTIONS[HexDirection.SOUTH_WEST] * radius
    for direction in HexDirection:
        for _ in range(radius):
            results.append(h)
            h = neighbor(direction, h)
    return results


def spiral(center: Point, radius: int) -> list[Point]:
    """Return center followed by each ring out to `radius`, near to far."""
    results = [center]
    for k in range(1, radius + 1):
        results.extend(ring(k, center))
    return results


def direction_to(a: Point, b: Point) -> Optional[HexDirection]:
    """Return the direction of the first step on the line from a to b.

    None when a == b.
    """
    points = line(a, b)
    if len(points) < 2:
        return None
    step = points[1] - a
    try:
        return HexDirection(DIRECTIONS.index(step))
    except ValueError:
        return None


def _cube_round(fx: float, fy: float, fz: float) -> Point:
    """Round fractional cube coordinates to the nearest hex."""
    x = round(fx)
    y = round(fy)
    z = round(fz)

    x_diff = abs(x - fx)
    y_diff = abs(y - fy)
    z_diff = abs(z - fz)

    if x_diff > y_diff and x_diff > z_diff:
        x = -y - z
    elif z_diff >= y_diff:
        z = -x - y
    # else: y = -x - z (implicit, not stored)

    return Point(x, z)
