"""Lifecycle notification channels."""

from fetchspine.notifier.event import Event, Handler

__all__ = ["Event", "Handler"]
