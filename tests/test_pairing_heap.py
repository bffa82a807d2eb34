"""Tests for the pairing heap."""

from hexkit.util.pairing_heap import PairingHeap


def _heap_of(*entries):
    heap = PairingHeap.empty()
    for key, value in entries:
        heap = heap.insert(key, value)
    return heap


class TestPairingHeapBasics:
    def test_sorted_list_example(self):
        heap = PairingHeap.empty().insert(2, "c").insert(1, "b").insert(3, "a")
        assert heap.to_sorted_list() == [(1, "b"), (2, "c"), (3, "a")]

    def test_empty_find_min(self):
        assert PairingHeap.empty().find_min() is None

    def test_empty_delete_min_stays_empty(self):
        heap = PairingHeap.empty().delete_min()
        assert heap.is_empty()
        assert heap.to_sorted_list() == []

    def test_empty_pop(self):
        assert PairingHeap.empty().pop() is None

    def test_singleton(self):
        heap = PairingHeap.singleton(5, "x")
        assert heap.find_min() == (5, "x")
        assert len(heap) == 1
        assert heap.delete_min().is_empty()

    def test_bool_and_len(self):
        heap = _heap_of((4, "a"), (2, "b"))
        assert heap
        assert len(heap) == 2
        assert not PairingHeap.empty()


class TestPairingHeapOrdering:
    def test_find_min_tracks_smallest(self):
        heap = _heap_of((7, "a"), (3, "b"), (9, "c"), (1, "d"))
        assert heap.find_min() == (1, "d")

    def test_delete_min_sequence(self):
        heap = _heap_of((5, "e"), (1, "a"), (4, "d"), (2, "b"), (3, "c"))
        keys = []
        while not heap.is_empty():
            key, _ = heap.find_min()
            keys.append(key)
            heap = heap.delete_min()
        assert keys == [1, 2, 3, 4, 5]

    def test_many_keys_sorted(self):
        keys = [(i * 37) % 101 for i in range(101)]
        heap = _heap_of(*[(k, str(k)) for k in keys])
        assert [k for k, _ in heap.to_sorted_list()] == sorted(keys)
        assert len(heap) == 101

    def test_float_keys(self):
        heap = _heap_of((2.5, "b"), (0.5, "a"), (10.0, "c"))
        assert [v for _, v in heap.to_sorted_list()] == ["a", "b", "c"]

    def test_equal_keys_all_returned(self):
        heap = _heap_of((1, "a"), (1, "b"), (0, "z"))
        result = heap.to_sorted_list()
        assert result[0] == (0, "z")
        assert {v for _, v in result[1:]} == {"a", "b"}


class TestPairingHeapMerge:
    def test_merge_two_heaps(self):
        left = _heap_of((1, "a"), (5, "e"))
        right = _heap_of((3, "c"), (2, "b"))
        merged = left.merge(right)
        assert [k for k, _ in merged.to_sorted_list()] == [1, 2, 3, 5]
        assert len(merged) == 4

    def test_merge_with_empty(self):
        heap = _heap_of((1, "a"))
        assert heap.merge(PairingHeap.empty()).to_sorted_list() == [(1, "a")]
        assert PairingHeap.empty().merge(heap).to_sorted_list() == [(1, "a")]


class TestPairingHeapPersistence:
    def test_insert_leaves_original(self):
        heap = _heap_of((2, "b"))
        bigger = heap.insert(1, "a")
        assert heap.to_sorted_list() == [(2, "b")]
        assert bigger.find_min() == (1, "a")

    def test_delete_min_leaves_original(self):
        heap = _heap_of((2, "b"), (1, "a"))
        heap.delete_min()
        assert heap.find_min() == (1, "a")
        assert len(heap) == 2
