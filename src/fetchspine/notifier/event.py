"""Synchronous event channels.

An Event holds an ordered list of handlers. ``trigger`` calls each handler
in registration order with the same payload and ignores return values.
FetchHttpClient exposes three of these: on_send_request,
on_receive_response and on_error.

Example:
    >>> from fetchspine.notifier.event import Event
    >>> seen = []
    >>> event = Event(name="demo")
    >>> unsubscribe = event.subscribe(seen.append)
    >>> event.trigger("hello")
    >>> unsubscribe()
    >>> event.trigger("ignored")
    >>> seen
    ['hello']
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger("fetchspine.events")

T = TypeVar("T")

Handler = Callable[[T], object]


class Event(Generic[T]):
    """Publish/subscribe channel with synchronous delivery.

    A handler that raises is logged and skipped; remaining handlers still run
    and the exception never reaches the code that triggered the event.

    Attributes:
        name: Channel name used in log messages.
    """

    def __init__(self, name: str = "event") -> None:
        self.name = name
        self._handlers: list[Handler[T]] = []

    def __len__(self) -> int:
        return len(self._handlers)

    @property
    def handlers(self) -> tuple[Handler[T], ...]:
        """Registered handlers in delivery order."""
        return tuple(self._handlers)

    def subscribe(self, handler: Handler[T]) -> Callable[[], None]:
        """Register a handler.

        Args:
            handler: Called with the payload on every trigger.

        Returns:
            A callable that removes this subscription.
        """
        self._handlers.append(handler)
        return lambda: self.unsubscribe(handler)

    def unsubscribe(self, handler: Handler[T]) -> bool:
        """Remove the first registration of ``handler``.

        Returns:
            True if the handler was registered.
        """
        try:
            self._handlers.remove(handler)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        """Remove every handler."""
        self._handlers.clear()

    def trigger(self, payload: T) -> None:
        """Deliver ``payload`` to every handler."""
        # Snapshot so handlers may unsubscribe themselves while being called
        for handler in list(self._handlers):
            try:
                handler(payload)
            except Exception:
                logger.warning("Handler %r for %s event raised", handler, self.name, exc_info=True)


__all__ = ["Event", "Handler"]
