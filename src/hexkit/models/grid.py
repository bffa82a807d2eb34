"""Hexagonal grid model.

A bounded hexagon of radius N centred on the origin, mapping each member
point to an opaque payload. Grids are values: every write returns a new
Grid and leaves the original untouched. The underlying dict is copied
shallowly on write, so payloads are shared between versions.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from hexkit.models.hex import ORIGIN, Point
from hexkit.util.hex_math import hex_range

T = TypeVar("T")
U = TypeVar("U")
A = TypeVar("A")


class Grid(Generic[T]):
    """Immutable hexagonal map from Point to payload.

    Args:
        radius: Bounding radius; a point is a member iff all of |x|, |y|, |z|
            are at most this value.
        cells: Initial contents. Taken as-is; use ``empty`` or ``from_list``
            to build a grid with bounds checking.
    """

    __slots__ = ("_radius", "_cells")

    def __init__(self, radius: int, cells: Optional[dict[Point, T]] = None) -> None:
        if radius < 0:
            raise ValueError(f"grid radius must be non-negative, got {radius}")
        self._radius = radius
        self._cells: dict[Point, T] = cells if cells is not None else {}

    # -- Construction ----------------------------------------------------

    @classmethod
    def empty(cls, radius: int, default: T) -> Grid[T]:
        """Create a grid with every in-bounds point set to `default`."""
        return cls(radius, {p: default for p in hex_range(radius, ORIGIN)})

    @classmethod
    def from_list(
        cls, radius: int, default: T, pairs: Iterable[tuple[Point, T]]
    ) -> Grid[T]:
        """Create a filled grid, then overwrite with `pairs`.

        Pairs outside the bounds are dropped.
        """
        cells = {p: default for p in hex_range(radius, ORIGIN)}
        for p, value in pairs:
            if p in cells:
                cells[p] = value
        return cls(radius, cells)

    # -- Queries ---------------------------------------------------------

    @property
    def radius(self) -> int:
        return self._radius

    def contains(self, p: Point) -> bool:
        """Hexagonal bounds test. Holes left by ``remove`` still count."""
        n = self._radius
        return abs(p.x) <= n and abs(p.y) <= n and abs(p.z) <= n

    def value_at(self, p: Point) -> Optional[T]:
        return self._cells.get(p)

    def points(self) -> list[Point]:
        return list(self._cells)

    def items(self) -> list[tuple[Point, T]]:
        return list(self._cells.items())

    def values(self) -> list[T]:
        return list(self._cells.values())

    def outermost(self) -> list[tuple[Point, T]]:
        """Cells on the outer ring of the hexagon."""
        n = self._radius
        return [
            (p, v) for p, v in self._cells.items()
            if n in (abs(p.x), abs(p.y), abs(p.z))
        ]

    def equal(self, other: object) -> bool:
        """Same radius and identical (point, value) contents."""
        if not isinstance(other, Grid):
            return False
        return self._radius == other._radius and self._cells == other._cells

    # -- Writes (each returns a new grid) --------------------------------

    def insert(self, p: Point, value: T) -> Grid[T]:
        """Set the value at `p`. No-op for points outside the bounds."""
        if not self.contains(p):
            return self
        cells = dict(self._cells)
        cells[p] = value
        return Grid(self._radius, cells)

    def update(self, p: Point, f: Callable[[T], T]) -> Grid[T]:
        """Replace the value at `p` with ``f(value)``.

        No-op for points outside the bounds or without a current value.
        """
        if not self.contains(p) or p not in self._cells:
            return self
        cells = dict(self._cells)
        cells[p] = f(cells[p])
        return Grid(self._radius, cells)

    def remove(self, p: Point) -> Grid[T]:
        """Drop the value at `p`, leaving a hole if it was in bounds."""
        cells = dict(self._cells)
        cells.pop(p, None)
        return Grid(self._radius, cells)

    # -- Traversals ------------------------------------------------------

    def map(self, f: Callable[[Point, T], U]) -> Grid[U]:
        return Grid(self._radius, {p: f(p, v) for p, v in self._cells.items()})

    def foldl(self, step: Callable[[A, Point, T], A], init: A) -> A:
        acc = init
        for p, v in self._cells.items():
            acc = step(acc, p, v)
        return acc

    def filter(self, pred: Callable[[Point, T], bool]) -> Grid[T]:
        return Grid(
            self._radius, {p: v for p, v in self._cells.items() if pred(p, v)}
        )

    # -- Dunder ----------------------------------------------------------

    def __contains__(self, p: object) -> bool:
        return isinstance(p, Point) and self.contains(p)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid(radius={self._radius}, cells={len(self._cells)})"
