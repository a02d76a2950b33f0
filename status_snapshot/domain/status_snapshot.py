"""
status_snapshot/domain/status_snapshot.py

Domain models for normalized service status snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

SERVICE_NAME_KEY = "Service Name"
STATUS_KEY = "Status"
TIMESTAMP_KEY = "Timestamp"


@dataclass(frozen=True)
class StatusRecord:
    """
    One normalized service status captured during a run.
    """

    service_name: str
    status: str
    timestamp: str

    def to_dict(self) -> dict[str, str]:
        return {
            SERVICE_NAME_KEY: self.service_name,
            STATUS_KEY: self.status,
            TIMESTAMP_KEY: self.timestamp,
        }


@dataclass(frozen=True)
class Snapshot:
    """
    Aggregate of all status records produced by one run.
    """

    timestamp: str
    statuses: tuple[StatusRecord, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": self.timestamp,
            "statuses": [record.to_dict() for record in self.statuses],
        }


@dataclass(frozen=True)
class PersistOutcome:
    """
    Result of persisting one snapshot locally and, optionally, remotely.

    `remote_status` is one of "published", "skipped" or "failed".
    """

    local_path: str
    remote_status: str
    remote_action: str | None = None
    remote_error: str | None = None
    remote_conflict: bool = False

    @property
    def remote_failed(self) -> bool:
        return self.remote_status == "failed"
