"""Tests for RequestQueue ticket ordering."""

from fetchspine.http.request_queue import RequestQueue


class TestRequestQueue:
    """FIFO ticket behaviour."""

    def test_empty_queue(self):
        """An empty queue has no head."""
        queue = RequestQueue()
        assert queue.is_empty
        assert queue.peek() is None
        assert queue.dequeue() is None

    def test_ids_strictly_increase(self):
        """Ticket IDs increase with each enqueue."""
        queue = RequestQueue()
        ids = [queue.enqueue() for _ in range(5)]
        assert ids == sorted(set(ids))
        assert len(queue) == 5

    def test_fifo_order(self):
        """Tickets leave in arrival order."""
        queue = RequestQueue()
        first, second, third = queue.enqueue(), queue.enqueue(), queue.enqueue()

        assert queue.peek() == first
        assert queue.dequeue() == first
        assert queue.dequeue() == second
        assert queue.peek() == third

    def test_ids_not_reused_after_dequeue(self):
        """A dequeued ticket ID is never handed out again."""
        queue = RequestQueue()
        first = queue.enqueue()
        queue.dequeue()
        assert queue.enqueue() > first

    def test_remove_middle(self):
        """Removing a middle ticket keeps the others in order."""
        queue = RequestQueue()
        first, second, third = queue.enqueue(), queue.enqueue(), queue.enqueue()

        assert queue.remove(second) is True
        assert second not in queue
        assert queue.dequeue() == first
        assert queue.dequeue() == third

    def test_remove_unknown_leaves_queue_untouched(self):
        """Removing an unknown ticket changes nothing."""
        queue = RequestQueue()
        first = queue.enqueue()
        assert queue.remove(99) is False
        assert queue.peek() == first
        assert len(queue) == 1
