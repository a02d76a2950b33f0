"""
Storage layer interfaces for status snapshots.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from status_snapshot.domain import Snapshot


class SnapshotStorage(ABC):
    """
    Storage abstraction for one-document snapshot writes.
    """

    @abstractmethod
    def store(self, snapshot: Snapshot) -> str:
        """
        Persist the snapshot, replacing any previous one, and return its location.
        """
