"""Pairing heap — a persistent, mergeable min-priority queue.

Ordered by key only; entries with equal keys come out in an order that
depends on merge history. Every operation returns a new heap.

Used to drive the frontier of the weighted pathfinder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")

# Children are kept as a cons list, (head, tail) | None, so prepending a
# child is O(1) and never copies siblings.
_Children = Optional[tuple["_Node", Any]]


@dataclass(frozen=True)
class _Node:
    key: Any
    value: Any
    children: _Children = None
    size: int = 1


def _merge(a: Optional[_Node], b: Optional[_Node]) -> Optional[_Node]:
    if a is None:
        return b
    if b is None:
        return a
    if b.key < a.key:
        a, b = b, a
    return _Node(a.key, a.value, (b, a.children), a.size + b.size)


def _merge_pairs(children: _Children) -> Optional[_Node]:
    """Merge children pairwise left to right, then fold the pairs from the right."""
    pairs: list[Optional[_Node]] = []
    while children is not None:
        first, children = children
        if children is None:
            pairs.append(first)
            break
        second, children = children
        pairs.append(_merge(first, second))

    result: Optional[_Node] = None
    for heap in reversed(pairs):
        result = _merge(heap, result)
    return result


class PairingHeap(Generic[K, V]):
    """Immutable min-heap of (key, value) entries.

    Usage:
        heap = PairingHeap.empty().insert(3, "a").insert(1, "b")
        heap.find_min()          # (1, "b")
        heap.delete_min().find_min()  # (3, "a")
    """

    __slots__ = ("_root",)

    def __init__(self, root: Optional[_Node] = None) -> None:
        self._root = root

    @classmethod
    def empty(cls) -> PairingHeap[K, V]:
        return cls()

    @classmethod
    def singleton(cls, key: K, value: V) -> PairingHeap[K, V]:
        return cls(_Node(key, value))

    def is_empty(self) -> bool:
        return self._root is None

    def insert(self, key: K, value: V) -> PairingHeap[K, V]:
        return PairingHeap(_merge(_Node(key, value), self._root))

    def merge(self, other: PairingHeap[K, V]) -> PairingHeap[K, V]:
        return PairingHeap(_merge(self._root, other._root))

    def find_min(self) -> Optional[tuple[K, V]]:
        """Return the entry with the smallest key, or None when empty."""
        if self._root is None:
            return None
        return (self._root.key, self._root.value)

    def delete_min(self) -> PairingHeap[K, V]:
        """Return the heap without its minimum. An empty heap stays empty."""
        if self._root is None:
            return self
        return PairingHeap(_merge_pairs(self._root.children))

    def pop(self) -> Optional[tuple[tuple[K, V], PairingHeap[K, V]]]:
        """Return ``(find_min(), delete_min())``, or None when empty."""
        entry = self.find_min()
        if entry is None:
            return None
        return entry, self.delete_min()

    def to_sorted_list(self) -> list[tuple[K, V]]:
        """All entries in ascending key order."""
        result: list[tuple[K, V]] = []
        root = self._root
        while root is not None:
            result.append((root.key, root.value))
            root = _merge_pairs(root.children)
        return result

    def __bool__(self) -> bool:
        return self._root is not None

    def __len__(self) -> int:
        return 0 if self._root is None else self._root.size

    def __repr__(self) -> str:
        return f"PairingHeap(size={len(self)})"
