"""Cooperative time limit and cancellation for a single solve."""

from __future__ import annotations

import threading
import time

from tilesearch.models.node import SearchStatus


class Deadline:
    """A monotonic-clock deadline plus an optional cancel flag.

    Strategies call :meth:`check` from their outer loops; it returns the
    status to stop with, or ``None`` to keep going.
    """

    __slots__ = ("expires_at", "cancel_event")

    def __init__(
        self,
        seconds: float | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        self.expires_at = None if seconds is None else time.monotonic() + seconds
        self.cancel_event = cancel_event

    def limited(self, seconds: float) -> Deadline:
        """Return a copy whose expiry is at most *seconds* from now."""
        child = Deadline(seconds, self.cancel_event)
        if self.expires_at is not None and (
            child.expires_at is None or self.expires_at < child.expires_at
        ):
            child.expires_at = self.expires_at
        return child

    def check(self) -> SearchStatus | None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            return SearchStatus.CANCELLED
        if self.expires_at is not None and time.monotonic() >= self.expires_at:
            return SearchStatus.TIMEOUT
        return None
