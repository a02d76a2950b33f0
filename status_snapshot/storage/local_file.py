"""
Local JSON file storage for status snapshots.
"""

from __future__ import annotations

import logging
from pathlib import Path

from status_snapshot.domain import Snapshot
from status_snapshot.errors import SnapshotWriteError
from status_snapshot.schemas import render_snapshot_json
from status_snapshot.scraping.logging_utils import log_event
from status_snapshot.storage.base import SnapshotStorage

logger = logging.getLogger(__name__)


class LocalFileSnapshotStorage(SnapshotStorage):
    """
    Overwrite a single UTF-8 JSON file with the latest snapshot.
    """

    def __init__(self, *, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def store(self, snapshot: Snapshot) -> str:
        payload = render_snapshot_json(snapshot)
        try:
            self._path.write_text(payload, encoding="utf-8")
        except OSError as exc:
            raise SnapshotWriteError(f"Failed to write snapshot to {self._path}: {exc}") from exc

        log_event(
            logger,
            logging.INFO,
            "snapshot_written",
            path=str(self._path),
            statuses=len(snapshot.statuses),
        )
        return str(self._path)
