"""Minimum-interval rate limiting with FIFO ordering.

RequestGate spaces the *start* of consecutive requests by at least
``min_interval_ms``. Callers that arrive too early take a ticket from a
RequestQueue and are released strictly in ticket order, one per interval.

Example:
    >>> import asyncio
    >>> from fetchspine.http.rate_limiter import RequestGate
    >>>
    >>> gate = RequestGate(min_interval_ms=20)
    >>> async def burst():
    ...     return [await gate.acquire() for _ in range(3)]
    >>> waits = asyncio.run(burst())
    >>> waits[0]
    0.0
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Callable

from fetchspine.http.request_queue import RequestQueue

logger = logging.getLogger("fetchspine.rate_limit")


class RequestGate:
    """Admission gate enforcing a minimum interval between dispatches.

    Only the caller holding the head ticket ever sleeps on a timer; every
    other queued caller waits on a future that is resolved when its ticket
    reaches the head. A caller is queued when the interval has not elapsed
    or when earlier tickets are still waiting, so late arrivals never
    overtake the queue.

    Attributes:
        min_interval_ms: Minimum milliseconds between admissions (0 disables).
    """

    def __init__(
        self,
        min_interval_ms: int = 0,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the gate.

        Args:
            min_interval_ms: Minimum spacing in milliseconds. 0 disables
                limiting entirely.
            clock: Monotonic clock in seconds. Overridable for tests.
        """
        if min_interval_ms < 0:
            raise ValueError("min_interval_ms must be non-negative")
        self.min_interval_ms = min_interval_ms
        self._min_interval = min_interval_ms / 1000.0
        self._clock = clock
        self._queue = RequestQueue()
        self._waiters: dict[int, asyncio.Future[None]] = {}
        self._last_request: float | None = None

    @property
    def is_limited(self) -> bool:
        return self._min_interval > 0

    @property
    def pending(self) -> int:
        """Number of callers currently waiting for admission."""
        return len(self._queue)

    @property
    def last_request(self) -> float | None:
        """Clock reading of the most recent admission."""
        return self._last_request

    def _remaining(self) -> float:
        if self._last_request is None:
            return 0.0
        return self._min_interval - (self._clock() - self._last_request)

    def _should_queue(self) -> bool:
        return self.is_limited and (not self._queue.is_empty or self._remaining() > 0)

    def _wake_head(self) -> None:
        head = self._queue.peek()
        if head is None:
            return
        waiter = self._waiters.get(head)
        if waiter is not None and not waiter.done():
            waiter.set_result(None)

    async def acquire(self) -> float:
        """Wait until this caller may dispatch.

        The admission time is recorded before returning, so the next caller
        measures its interval from this call's start rather than its end.

        Returns:
            Time waited in seconds.
        """
        if not self._should_queue():
            self._last_request = self._clock()
            return 0.0

        started = self._clock()
        ticket = self._queue.enqueue()
        logger.debug("Queued request ticket %d (%d waiting)", ticket, len(self._queue))

        try:
            await self._wait_for_turn(ticket)
        except asyncio.CancelledError:
            was_head = self._queue.peek() == ticket
            self._queue.remove(ticket)
            if was_head:
                self._wake_head()
            raise

        self._queue.dequeue()
        self._last_request = self._clock()
        self._wake_head()

        waited = self._last_request - started
        logger.debug("Released request ticket %d after %.3fs", ticket, waited)
        return waited

    async def _wait_for_turn(self, ticket: int) -> None:
        loop = asyncio.get_running_loop()
        while True:
            if self._queue.peek() == ticket:
                remaining = self._remaining()
                if remaining <= 0:
                    return
                await asyncio.sleep(remaining)
                continue

            waiter = loop.create_future()
            self._waiters[ticket] = waiter
            try:
                await waiter
            finally:
                self._waiters.pop(ticket, None)

    def reset(self) -> None:
        """Forget the last admission time.

        Callers already queued keep their order.
        """
        self._last_request = None


__all__ = ["RequestGate"]
