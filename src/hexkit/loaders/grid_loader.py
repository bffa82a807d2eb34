"""Grid loader — parses grid definitions into Grid models.

Format::

    radius: 3
    default: plain          # payload for every tile not listed below
    tiles:
      "1,0": forest         # "q,r": payload
    obstacles:
      - "0,1"

Tiles outside the radius are dropped. Obstacles are returned separately
and are not bounds-checked, since they are a caller-side set.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from hexkit.models.grid import Grid
from hexkit.models.grid_document import GridDocument
from hexkit.models.hex import Point

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadedGrid:
    """A grid together with the obstacle set stored next to it."""

    grid: Grid[Any]
    obstacles: frozenset[Point]


def load_grid_from_dict(data: dict[str, Any]) -> LoadedGrid:
    """Build a grid from an already-parsed document.

    Raises:
        pydantic.ValidationError: If the document is malformed.
    """
    doc = GridDocument.model_validate(data)
    grid = Grid.from_list(doc.radius, doc.default, doc.tile_pairs())
    return LoadedGrid(grid=grid, obstacles=doc.obstacle_points())


def load_grid(path: str | Path) -> LoadedGrid:
    """Load a grid and its obstacles from a YAML file.

    Args:
        path: Path to the grid YAML file.

    Returns:
        The populated grid and its obstacle set.
    """
    path = Path(path)
    with path.open() as f:
        data: dict[str, Any] = yaml.safe_load(f) or {}

    loaded = load_grid_from_dict(data)
    log.info("Loaded grid from %s: radius %d, %d cells, %d obstacles",
             path, loaded.grid.radius, len(loaded.grid), len(loaded.obstacles))
    return loaded
