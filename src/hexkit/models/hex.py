"""Hexagonal coordinate system using axial coordinates (q, r).

Axial coordinates define position on a hex grid where:
- q axis runs roughly east
- r axis runs roughly south-east

The derived cube coordinate is x = q, z = r, y = -x - z, so that
x + y + z == 0 for every point.

Reference: https://www.redblobgames.com/grids/hexagons/
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum


class HexDirection(IntEnum):
    """The six neighbor directions, indexed the way ``neighbors`` orders them."""

    EAST = 0
    NORTH_EAST = 1
    NORTH_WEST = 2
    WEST = 3
    SOUTH_WEST = 4
    SOUTH_EAST = 5


class Rotation(Enum):
    """60° rotation sense about the origin."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Point:
    """Immutable axial hex coordinate.

    Attributes:
        q: Column coordinate (east axis).
        r: Row coordinate (south-east axis).
    """

    q: int
    r: int

    # -- Cube coordinate -------------------------------------------------

    @property
    def x(self) -> int:
        return self.q

    @property
    def z(self) -> int:
        return self.r

    @property
    def y(self) -> int:
        """Implicit cube coordinate: y = -x - z."""
        return -self.q - self.r

    @property
    def cube(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    # -- Arithmetic ------------------------------------------------------

    def __add__(self, other: Point) -> Point:
        return Point(self.q + other.q, self.r + other.r)

    def __sub__(self, other: Point) -> Point:
        return Point(self.q - other.q, self.r - other.r)

    def __mul__(self, k: int) -> Point:
        return Point(self.q * k, self.r * k)

    # -- Geometry --------------------------------------------------------

    def distance_to(self, other: Point) -> int:
        """Hex grid distance (number of steps along hex edges)."""
        dx = abs(self.x - other.x)
        dy = abs(self.y - other.y)
        dz = abs(self.z - other.z)
        return (dx + dy + dz) // 2

    def neighbors(self) -> list[Point]:
        """Return the 6 adjacent points in HexDirection order."""
        return [self + d for d in DIRECTIONS]

    def ring(self, radius: int) -> list[Point]:
        """Return all points at exactly `radius` steps away, in walk order."""
        from hexkit.util.hex_math import ring

        return ring(radius, self)

    def disk(self, radius: int) -> set[Point]:
        """Return all points within `radius` steps (inclusive)."""
        from hexkit.util.hex_math import hex_range

        return set(hex_range(radius, self))

    def line_to(self, other: Point) -> list[Point]:
        """Return the hex line from self to other, both ends included."""
        from hexkit.util.hex_math import line

        return line(self, other)

    # -- Serialization ---------------------------------------------------

    def __repr__(self) -> str:
        return f"Point({self.q},{self.r})"


ORIGIN = Point(0, 0)

# Axial offsets, indexed by HexDirection
DIRECTIONS: list[Point] = [
    Point(1, 0),   # E
    Point(1, -1),  # NE
    Point(0, -1),  # NW
    Point(-1, 0),  # W
    Point(-1, 1),  # SW
    Point(0, 1),   # SE
]

# Diagonal i sits between DIRECTIONS[i] and DIRECTIONS[i + 1]
DIAGONALS: list[Point] = [
    Point(2, -1),
    Point(1, -2),
    Point(-1, -1),
    Point(-2, 1),
    Point(-1, 2),
    Point(1, 1),
]
