"""Hex pathfinding on a bounded grid.

Provides two searches that share the same shape: expand a frontier from the
start, record how each point was reached in a parent map, stop as soon as
the end point is taken off the frontier, then walk the parent map back.

- Unweighted: breadth-first, obstacles given as a point set.
- Weighted: Dijkstra on a pairing heap, with a caller-supplied edge cost.
  There is no obstacle set at this layer; callers encode blocked cells as
  a very high cost (see ``obstacle_cost``).

When the end point is never reached, ``find_path`` and
``find_weighted_path`` return the one-element path ``[start]``. Callers that
need to tell "already there" from "no route" use ``search_path`` /
``search_weighted_path``, which carry an explicit ``reached`` flag.

Also provides:
- Path validation (connectivity, no gaps)
- Path distance calculation
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import AbstractSet, Any, Callable, Optional

from hexkit.models.grid import Grid
from hexkit.models.hex import Point
from hexkit.util.pairing_heap import PairingHeap

log = logging.getLogger(__name__)

ParentMap = dict[Point, Optional[Point]]
CostFn = Callable[[Point, Point], float]


@dataclass(frozen=True)
class PathSearch:
    """Outcome of a path search.

    Attributes:
        path: Points from start to end inclusive; ``[start]`` when unreached,
            ``[]`` when the search could not begin.
        reached: Whether the end point was reached.
        cost: Total cost of the path (step count for unweighted searches),
            or None when unreached.
    """

    path: list[Point]
    reached: bool
    cost: Optional[float] = None


# -- Validation ------------------------------------------------------------


def validate_path(path: list[Point]) -> bool:
    """Check that each consecutive pair in the path are hex neighbors.

    Args:
        path: Ordered list of points.

    Returns:
        True if the path is valid (all steps are between neighbors).
    """
    if len(path) < 2:
        return True
    return all(path[i].distance_to(path[i + 1]) == 1 for i in range(len(path) - 1))


def path_distance(path: list[Point]) -> int:
    """Return the number of steps in a path (len - 1)."""
    return max(0, len(path) - 1)


# -- Reconstruction --------------------------------------------------------


def reconstruct_path(parents: ParentMap, start: Point, end: Point) -> list[Point]:
    """Walk the parent map from `end` back to `start`.

    Returns ``[start]`` if `end` was never reached.
    """
    if end not in parents:
        return [start]
    path: list[Point] = []
    current: Optional[Point] = end
    while current is not None:
        path.append(current)
        current = parents[current]
    path.reverse()
    return path


# -- Unweighted (BFS) ------------------------------------------------------


def path_graph(
    start: Point, end: Point, obstacles: AbstractSet[Point], grid: Grid[Any]
) -> ParentMap:
    """Breadth-first parent map from `start`, stopping once `end` is dequeued.

    Only the chain from `end` back to `start` is guaranteed complete.
    """
    queue: deque[Point] = deque([start])
    parents: ParentMap = {start: None}

    while queue:
        current = queue.popleft()
        if current == end:
            break

        for nxt in current.neighbors():
            if nxt in obstacles or nxt in parents:
                continue
            if not grid.contains(nxt):
                continue
            parents[nxt] = current
            queue.append(nxt)

    return parents


def search_path(
    start: Point, end: Point, obstacles: AbstractSet[Point], grid: Grid[Any]
) -> PathSearch:
    """Unweighted search with an explicit outcome."""
    if start in obstacles:
        return PathSearch(path=[], reached=False)
    parents = path_graph(start, end, obstacles, grid)
    path = reconstruct_path(parents, start, end)
    reached = end in parents
    log.debug("path %s -> %s: reached=%s, %d points", start, end, reached, len(path))
    return PathSearch(path=path, reached=reached,
                      cost=float(path_distance(path)) if reached else None)


def find_path(
    start: Point, end: Point, obstacles: AbstractSet[Point], grid: Grid[Any]
) -> list[Point]:
    """Shortest unweighted path from `start` to `end`, both included.

    Returns ``[]`` if `start` is an obstacle and ``[start]`` if `end`
    cannot be reached.
    """
    return search_path(start, end, obstacles, grid).path


# -- Weighted (Dijkstra) ---------------------------------------------------


def weighted_path_graph(
    start: Point, end: Point, cost: CostFn, grid: Grid[Any]
) -> tuple[ParentMap, dict[Point, float]]:
    """Dijkstra parent map and accumulated costs from `start`.

    A neighbor is relaxed when it has no recorded cost yet or the new cost
    is strictly lower. Stops once `end` is taken off the heap.
    """
    frontier: PairingHeap[float, Point] = PairingHeap.singleton(0.0, start)
    parents: ParentMap = {start: None}
    cost_so_far: dict[Point, float] = {start: 0.0}

    while True:
        popped = frontier.pop()
        if popped is None:
            break
        (current_cost, current), frontier = popped
        if current == end:
            break
        if current_cost > cost_so_far[current]:
            continue  # stale entry, a cheaper one was already expanded

        for nxt in current.neighbors():
            if not grid.contains(nxt):
                continue
            new_cost = current_cost + cost(current, nxt)
            if nxt not in cost_so_far or new_cost < cost_so_far[nxt]:
                cost_so_far[nxt] = new_cost
                parents[nxt] = current
                frontier = frontier.insert(new_cost, nxt)

    return parents, cost_so_far


def search_weighted_path(
    start: Point, end: Point, cost: CostFn, grid: Grid[Any]
) -> PathSearch:
    """Weighted search with an explicit outcome."""
    parents, cost_so_far = weighted_path_graph(start, end, cost, grid)
    path = reconstruct_path(parents, start, end)
    reached = end in parents
    log.debug("weighted path %s -> %s: reached=%s, cost=%s",
              start, end, reached, cost_so_far.get(end))
    return PathSearch(path=path, reached=reached,
                      cost=cost_so_far[end] if reached else None)


def find_weighted_path(
    start: Point, end: Point, cost: CostFn, grid: Grid[Any]
) -> list[Point]:
    """Cheapest path from `start` to `end` under `cost`, both included.

    Returns ``[start]`` if `end` cannot be reached. Unlike ``find_path``
    the start point is never rejected.
    """
    return search_weighted_path(start, end, cost, grid).path


# -- Cost functions --------------------------------------------------------


def uniform_cost(_from: Point, _to: Point) -> float:
    """Every step costs 1."""
    return 1.0


def obstacle_cost(
    obstacles: AbstractSet[Point], blocked: float = 10_000.0, base: float = 1.0
) -> CostFn:
    """Build a cost function that charges `blocked` for entering an obstacle."""

    def cost(_from: Point, to: Point) -> float:
        return blocked if to in obstacles else base

    return cost
