"""
Exceptions raised by the status snapshot pipeline.
"""

from __future__ import annotations


class StatusSnapshotError(Exception):
    """Base exception for status snapshot failures."""


class ConfigurationError(StatusSnapshotError):
    """Raised when runtime settings are missing or malformed."""


class NavigationError(StatusSnapshotError):
    """Raised when a status page cannot be loaded."""


class BrowserTimeoutError(StatusSnapshotError):
    """Raised when an awaited element never appears on a status page."""


class SnapshotWriteError(StatusSnapshotError):
    """Raised when the local snapshot file cannot be written."""


class RemoteStoreError(StatusSnapshotError):
    """Raised when the remote content store rejects or fails a request."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteNotFoundError(RemoteStoreError):
    """Raised when the requested remote file does not exist."""


class RevisionConflictError(RemoteStoreError):
    """Raised when an update carries a stale revision identifier."""
