"""FIFO ticket queue for rate-limited requests."""

from __future__ import annotations


class RequestQueue:
    """Ordered queue of integer tickets.

    Each ``enqueue`` hands out the next id in a strictly increasing sequence.
    Tickets are served from the front. All operations are synchronous, so
    under asyncio they are atomic with respect to each other.

    Example:
        >>> queue = RequestQueue()
        >>> first, second = queue.enqueue(), queue.enqueue()
        >>> queue.peek() == first
        True
        >>> queue.dequeue() == first
        True
        >>> queue.peek() == second
        True
    """

    def __init__(self) -> None:
        self._next_id = 0
        self._tickets: list[int] = []

    def __len__(self) -> int:
        return len(self._tickets)

    def __contains__(self, ticket: object) -> bool:
        return ticket in self._tickets

    @property
    def is_empty(self) -> bool:
        return not self._tickets

    def enqueue(self) -> int:
        """Append a new ticket and return its id."""
        ticket = self._next_id
        self._next_id += 1
        self._tickets.append(ticket)
        return ticket

    def dequeue(self) -> int | None:
        """Remove and return the head ticket, or None when empty."""
        if not self._tickets:
            return None
        return self._tickets.pop(0)

    def peek(self) -> int | None:
        """Return the head ticket without removing it."""
        return self._tickets[0] if self._tickets else None

    def remove(self, ticket: int) -> bool:
        """Drop ``ticket`` wherever it is in the queue.

        Returns:
            True if the ticket was queued.
        """
        try:
            self._tickets.remove(ticket)
        except ValueError:
            return False
        return True


__all__ = ["RequestQueue"]
