"""
Schema exports.
"""

from status_snapshot.schemas.snapshot import (
    SnapshotDocument,
    StatusRecordDocument,
    parse_snapshot_json,
    render_snapshot_json,
)

__all__ = [
    "SnapshotDocument",
    "StatusRecordDocument",
    "parse_snapshot_json",
    "render_snapshot_json",
]
