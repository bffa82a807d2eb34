"""Grid document schema.

Typed Pydantic model for grid files. Points are written as ``"q,r"``
strings, the same key format the tile dictionaries use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from hexkit.models.hex import Point


def parse_point(text: str) -> Point:
    """Parse a ``"q,r"`` string into a Point.

    Raises:
        ValueError: If the text is not two comma-separated integers.
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"expected 'q,r', got {text!r}")
    try:
        return Point(int(parts[0]), int(parts[1]))
    except ValueError:
        raise ValueError(f"expected 'q,r', got {text!r}") from None


def format_point(p: Point) -> str:
    return f"{p.q},{p.r}"


class GridDocument(BaseModel):
    """A grid file: radius, fill value, per-tile overrides and obstacles."""

    radius: int = Field(ge=0)
    default: Any = None
    tiles: dict[str, Any] = {}
    obstacles: list[str] = []

    @field_validator("tiles")
    @classmethod
    def _check_tile_keys(cls, tiles: dict[str, Any]) -> dict[str, Any]:
        for key in tiles:
            parse_point(key)
        return tiles

    @field_validator("obstacles")
    @classmethod
    def _check_obstacles(cls, obstacles: list[str]) -> list[str]:
        for key in obstacles:
            parse_point(key)
        return obstacles

    def tile_pairs(self) -> list[tuple[Point, Any]]:
        return [(parse_point(k), v) for k, v in self.tiles.items()]

    def obstacle_points(self) -> frozenset[Point]:
        return frozenset(parse_point(k) for k in self.obstacles)
