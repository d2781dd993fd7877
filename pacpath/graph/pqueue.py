"""
Indexed min-priority queue.

A binary min-heap stored in a list, paired with a dict mapping each key to
its slot in that list. The side table gives O(1) membership and priority
lookup, which lets Dijkstra lower a vertex's priority in place instead of
pushing duplicates.

Usage:
    from pacpath.graph.pqueue import MinPQueue

    frontier = MinPQueue()
    frontier.add_or_update("A", 0.0)
    frontier.add_or_update("B", 4.0)
    frontier.add_or_update("B", 1.5)   # lowers B in place
    frontier.remove()                  # -> "A"
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from typing import Generic, TypeVar

from pacpath.config import CHECK_INVARIANTS

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class _Entry(Generic[K]):
    """A key paired with its (extrinsic) priority."""

    key: K
    priority: float


class MinPQueue(Generic[K]):
    """
    Min priority queue of distinct keys with mutable float priorities.

    Invariants (checked after every mutation when check_invariants is on):
        - len(_heap) == len(_index)
        - _heap[_index[k]].key == k for every key k in the queue
        - _heap[i].priority >= _heap[(i - 1) // 2].priority for i >= 1

    Ties between equal minimum priorities are broken arbitrarily.
    """

    def __init__(self, check_invariants: bool = CHECK_INVARIANTS) -> None:
        """
        Create an empty queue.

        Args:
            check_invariants: Verify heap/index consistency after each
                mutation (O(n) per call, meant for tests and debugging)
        """
        self._heap: list[_Entry[K]] = []
        self._index: dict[K, int] = {}
        self._check_invariants = check_invariants

    def is_empty(self) -> bool:
        """Whether the queue holds no keys."""
        return not self._heap

    def size(self) -> int:
        """Number of keys in the queue."""
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def priority(self, key: K) -> float:
        """Current priority of key. Raises KeyError if it is not queued."""
        return self._heap[self._index[key]].priority

    def peek(self) -> K:
        """
        Return a key with the smallest priority without removing it.

        This is the key remove() would return next.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("peek from an empty priority queue")
        return self._heap[0].key

    def min_priority(self) -> float:
        """
        Return the smallest priority in the queue.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("min_priority of an empty priority queue")
        return self._heap[0].priority

    def add_or_update(self, key: K, priority: float) -> None:
        """Add key with the given priority, or change its priority if already queued."""
        if key in self._index:
            self._update(key, priority)
        else:
            self._add(key, priority)

    def remove(self) -> K:
        """
        Remove and return a key with the smallest priority.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._heap:
            raise IndexError("remove from an empty priority queue")

        min_key = self._heap[0].key
        last = self._heap.pop()
        del self._index[min_key]

        # Unless the root was the only entry, refill it with the old last leaf
        if self._heap:
            self._heap[0] = last
            self._index[last.key] = 0
            self._bubble_down(0)

        self._after_mutation()
        return min_key

    # =========================================================================
    # Heap Maintenance
    # =========================================================================

    def _add(self, key: K, priority: float) -> None:
        """Append a new key and bubble it up. Requires key is not queued."""
        if key in self._index:
            raise ValueError(f"Key {key!r} is already in the queue")

        self._heap.append(_Entry(key, priority))
        self._index[key] = len(self._heap) - 1
        self._bubble_up(len(self._heap) - 1)
        self._after_mutation()

    def _update(self, key: K, priority: float) -> None:
        """Overwrite a queued key's priority and restore heap order."""
        if key not in self._index:
            raise KeyError(key)

        i = self._index[key]
        old_priority = self._heap[i].priority
        self._heap[i] = _Entry(key, priority)

        if priority < old_priority:
            self._bubble_up(i)
        elif priority > old_priority:
            self._bubble_down(i)

        self._after_mutation()

    def _swap(self, i: int, j: int) -> None:
        """Swap slots i and j, keeping the index in step."""
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        self._index[heap[i].key] = i
        self._index[heap[j].key] = j

    def _bubble_up(self, i: int) -> None:
        """Move the entry at slot i towards the root while its parent is strictly larger."""
        while i > 0:
            parent = (i - 1) // 2
            if self._heap[parent].priority <= self._heap[i].priority:
                break
            self._swap(i, parent)
            i = parent

    def _bubble_down(self, i: int) -> None:
        """Move the entry at slot i towards the leaves while a child is strictly smaller."""
        n = len(self._heap)
        while True:
            left = 2 * i + 1
            right = left + 1
            smallest = i

            if left < n and self._heap[left].priority < self._heap[smallest].priority:
                smallest = left
            if right < n and self._heap[right].priority < self._heap[smallest].priority:
                smallest = right

            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def _after_mutation(self) -> None:
        if self._check_invariants:
            self._assert_invariants()

    def _assert_invariants(self) -> None:
        """Raise AssertionError if the heap and index have drifted apart."""
        if len(self._heap) != len(self._index):
            raise AssertionError(
                f"heap has {len(self._heap)} entries but index has {len(self._index)}"
            )

        for i, entry in enumerate(self._heap):
            slot = self._index.get(entry.key)
            if slot != i:
                raise AssertionError(f"index maps {entry.key!r} to {slot}, expected {i}")

        for i in range(1, len(self._heap)):
            parent = (i - 1) // 2
            # Negated <= so NaN priorities fail too
            if not self._heap[parent].priority <= self._heap[i].priority:
                raise AssertionError(
                    f"heap order violated at slot {i}: "
                    f"{self._heap[i].priority} < parent {self._heap[parent].priority}"
                )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self._heap)})"
