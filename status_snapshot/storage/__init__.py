"""
Storage layer exports.
"""

from status_snapshot.storage.base import SnapshotStorage
from status_snapshot.storage.github_contents import GitHubContentsClient
from status_snapshot.storage.local_file import LocalFileSnapshotStorage
from status_snapshot.storage.publisher import SnapshotPersistenceSink, build_persistence_sink

__all__ = [
    "GitHubContentsClient",
    "LocalFileSnapshotStorage",
    "SnapshotPersistenceSink",
    "SnapshotStorage",
    "build_persistence_sink",
]
