"""Cooperative cancellation tokens.

A token is a flag shared between the caller and a running operation. Loops
over filesystem entries call ``raise_if_cancelled()`` at the top of each
iteration; nothing is ever interrupted mid-syscall.
"""

from __future__ import annotations

import threading

from .exceptions import OperationCancelledError


class CancellationToken:
    """Thread-safe cancellation flag with optional parent linkage."""

    def __init__(self, parent: CancellationToken | None = None) -> None:
        """Initialize the token.

        Args:
            parent: Token whose cancellation also cancels this one
        """
        self._event: threading.Event = threading.Event()
        self._parent: CancellationToken | None = parent

    @classmethod
    def none(cls) -> CancellationToken:
        """Return a fresh token that nobody holds a reference to cancel."""
        return cls()

    @property
    def is_cancelled(self) -> bool:
        """Whether cancellation was requested on this token or any ancestor."""
        if self._event.is_set():
            return True
        return self._parent is not None and self._parent.is_cancelled

    def cancel(self) -> None:
        """Request cancellation."""
        self._event.set()

    def linked(self) -> CancellationToken:
        """Create a child token cancelled by either itself or this token."""
        return CancellationToken(parent=self)

    def raise_if_cancelled(self) -> None:
        """Raise OperationCancelledError if cancellation was requested.

        Raises:
            OperationCancelledError: If the token is cancelled
        """
        if self.is_cancelled:
            raise OperationCancelledError()

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.is_cancelled})"


def ensure_token(token: CancellationToken | None) -> CancellationToken:
    """Return ``token`` or a never-cancelled token when None."""
    return token if token is not None else CancellationToken.none()
