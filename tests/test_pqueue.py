"""
Unit tests for the indexed min-priority queue.
"""

import random

import pytest

from pacpath.graph.pqueue import MinPQueue


@pytest.fixture
def queue() -> MinPQueue:
    """Return an empty queue that checks its invariants after every mutation."""
    return MinPQueue(check_invariants=True)


class TestEmptyQueue:
    """Test a freshly created queue."""

    def test_new_queue_is_empty(self, queue):
        """New queue should have size 0 and be empty."""
        assert queue.size() == 0
        assert len(queue) == 0
        assert queue.is_empty()

    def test_peek_raises(self, queue):
        """peek() on an empty queue should raise IndexError."""
        with pytest.raises(IndexError):
            queue.peek()

    def test_min_priority_raises(self, queue):
        """min_priority() on an empty queue should raise IndexError."""
        with pytest.raises(IndexError):
            queue.min_priority()

    def test_remove_raises(self, queue):
        """remove() on an empty queue should raise IndexError."""
        with pytest.raises(IndexError):
            queue.remove()

    def test_emptied_queue_raises_again(self, queue):
        """A queue drained back to empty should raise like a new one."""
        queue.add_or_update("x", 1.0)
        queue.remove()
        with pytest.raises(IndexError):
            queue.peek()


class TestAddOrUpdate:
    """Test insertion and priority updates."""

    def test_add_to_empty(self, queue):
        """Adding one key should make size 1."""
        queue.add_or_update(0, 0.0)
        assert queue.size() == 1
        assert not queue.is_empty()
        assert 0 in queue

    def test_add_distinct_grows_by_one(self, queue):
        """Adding a distinct key should grow the queue by exactly one."""
        queue.add_or_update(1, 1.0)
        queue.add_or_update(2, 2.0)
        assert queue.size() == 2
        assert queue.peek() == 1
        assert queue.min_priority() == pytest.approx(1.0)

    def test_add_new_minimum(self, queue):
        """A key added below the current minimum should bubble to the root."""
        queue.add_or_update("b", 5.0)
        queue.add_or_update("c", 7.0)
        queue.add_or_update("a", -1.0)
        assert queue.peek() == "a"
        assert queue.min_priority() == pytest.approx(-1.0)

    def test_update_reduce_to_minimum(self, queue):
        """Lowering a key's priority below all others should make it the minimum."""
        queue.add_or_update(1, 2.0)
        queue.add_or_update(2, 3.0)

        queue.add_or_update(2, 1.0)

        assert queue.size() == 2
        assert queue.peek() == 2
        assert queue.min_priority() == pytest.approx(1.0)

    def test_update_increase_moves_down(self, queue):
        """Raising the minimum's priority should hand the root to the next key."""
        for key, priority in [("a", 1.0), ("b", 2.0), ("c", 3.0), ("d", 4.0)]:
            queue.add_or_update(key, priority)

        queue.add_or_update("a", 10.0)

        assert queue.size() == 4
        assert queue.peek() == "b"
        assert queue.priority("a") == pytest.approx(10.0)

    def test_update_unchanged_priority(self, queue):
        """Re-adding a key with the same priority should change nothing."""
        queue.add_or_update("a", 1.0)
        queue.add_or_update("b", 2.0)
        queue.add_or_update("b", 2.0)
        assert queue.size() == 2
        assert queue.peek() == "a"
        assert queue.priority("b") == pytest.approx(2.0)

    def test_priority_of_missing_key(self, queue):
        """priority() of a key not in the queue should raise KeyError."""
        with pytest.raises(KeyError):
            queue.priority("missing")

    def test_private_add_rejects_duplicate(self, queue):
        """Adding a key that is already queued should raise ValueError."""
        queue._add("a", 1.0)
        with pytest.raises(ValueError):
            queue._add("a", 2.0)

    def test_private_update_rejects_missing(self, queue):
        """Updating a key that is not queued should raise KeyError."""
        with pytest.raises(KeyError):
            queue._update("a", 1.0)


class TestRemove:
    """Test minimum extraction."""

    def test_remove_size(self, queue):
        """Removing should shrink the queue by one, to empty from size 1."""
        queue.add_or_update(1, 1.0)
        queue.add_or_update(2, 2.0)

        queue.remove()
        assert queue.size() == 1
        assert not queue.is_empty()

        queue.remove()
        assert queue.size() == 0
        assert queue.is_empty()

    def test_removed_key_is_gone(self, queue):
        """A removed key should no longer be a member."""
        queue.add_or_update("a", 1.0)
        queue.add_or_update("b", 2.0)
        assert queue.remove() == "a"
        assert "a" not in queue
        assert "b" in queue

    def test_removed_key_can_be_readded(self, queue):
        """A removed key should be insertable again as a new entry."""
        queue.add_or_update("a", 1.0)
        queue.remove()
        queue.add_or_update("a", 3.0)
        assert queue.size() == 1
        assert queue.min_priority() == pytest.approx(3.0)

    def test_remove_element_order(self, queue):
        """Keys added in shuffled order should come out in ascending order."""
        n_elem = 20
        elems = list(range(n_elem))
        random.Random(1).shuffle(elems)
        for x in elems:
            queue.add_or_update(x, float(x))

        prev = queue.remove()
        for i in range(1, n_elem):
            assert queue.size() == n_elem - i
            expected = queue.peek()
            removed = queue.remove()
            assert removed == expected
            assert removed > prev
            prev = removed
        assert queue.is_empty()

    def test_remove_priority_order_after_updates(self, queue):
        """After random adds and updates, minimum priority should never decrease."""
        rng = random.Random(1)
        n_updates = 100
        bound = n_updates // 2
        for _ in range(n_updates):
            queue.add_or_update(rng.randrange(bound), float(rng.randrange(bound)))

        while queue.size() > 1:
            removed_priority = queue.min_priority()
            queue.remove()
            assert queue.min_priority() >= removed_priority
        queue.remove()
        assert queue.is_empty()

    def test_ties_return_each_key_once(self, queue):
        """Keys tied on priority should each be removed exactly once."""
        for key in "abcde":
            queue.add_or_update(key, 1.0)
        removed = {queue.remove() for _ in range(5)}
        assert removed == set("abcde")


class TestInvariants:
    """Test heap/index consistency under arbitrary operation sequences."""

    def test_random_operations_match_model(self, queue):
        """Queue should agree with a dict model after every operation."""
        rng = random.Random(42)
        model: dict[int, float] = {}

        for _ in range(500):
            if model and rng.random() < 0.3:
                min_priority = min(model.values())
                assert queue.min_priority() == pytest.approx(min_priority)
                key = queue.remove()
                assert model.pop(key) == pytest.approx(min_priority)
            else:
                key = rng.randrange(60)
                priority = rng.uniform(-50.0, 50.0)
                was_present = key in model
                before = queue.size()
                queue.add_or_update(key, priority)
                model[key] = priority
                assert queue.size() == before + (0 if was_present else 1)

            queue._assert_invariants()
            assert queue.size() == len(model)
            for key, priority in model.items():
                assert queue.priority(key) == pytest.approx(priority)

    def test_assert_invariants_detects_broken_order(self, queue):
        """The invariant check should reject a heap whose order was corrupted."""
        queue.add_or_update("a", 1.0)
        queue.add_or_update("b", 2.0)
        queue._heap[0], queue._heap[1] = queue._heap[1], queue._heap[0]
        with pytest.raises(AssertionError):
            queue._assert_invariants()

    def test_assert_invariants_detects_nan_priority(self, queue):
        """A NaN priority should be reported instead of silently breaking the order."""
        queue.add_or_update("a", 1.0)
        with pytest.raises(AssertionError):
            queue.add_or_update("b", float("nan"))
            queue.add_or_update("c", 0.5)

    def test_assert_invariants_detects_stale_index(self, queue):
        """The invariant check should reject an index entry with no heap slot."""
        queue.add_or_update("a", 1.0)
        queue._index["ghost"] = 0
        with pytest.raises(AssertionError):
            queue._assert_invariants()

    def test_repr(self, queue):
        """repr should report the size."""
        queue.add_or_update("a", 1.0)
        assert repr(queue) == "MinPQueue(size=1)"
