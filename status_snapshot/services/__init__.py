"""
Service layer exports.
"""

from status_snapshot.services.status_snapshot_service import (
    StatusRunResult,
    StatusSnapshotService,
)

__all__ = ["StatusRunResult", "StatusSnapshotService"]
