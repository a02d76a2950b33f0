"""
Domain model exports.
"""

from status_snapshot.domain.status_snapshot import PersistOutcome, Snapshot, StatusRecord

__all__ = ["PersistOutcome", "Snapshot", "StatusRecord"]
