"""Cancellation Token

Thread-safe flag a UI thread can set to stop a running conversion between
pages.
"""
import threading


class CancellationToken:
    """Cooperative cancellation flag checked between page iterations."""

    def __init__(self):
        # Thread-safe cancellation using Event instead of bool flag
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation (thread-safe)."""
        self._cancel_event.set()

    def reset(self) -> None:
        """Clear the flag so the token can be reused for a new run."""
        self._cancel_event.clear()

    @property
    def cancelled(self) -> bool:
        return self._cancel_event.is_set()
