"""
Persistence sink: local snapshot write followed by best-effort remote publish.
"""

from __future__ import annotations

import logging

from status_snapshot.config import StatusSnapshotSettings
from status_snapshot.domain import PersistOutcome, Snapshot
from status_snapshot.errors import RemoteNotFoundError, RemoteStoreError, RevisionConflictError
from status_snapshot.schemas import render_snapshot_json
from status_snapshot.scraping.logging_utils import log_event
from status_snapshot.storage.base import SnapshotStorage
from status_snapshot.storage.github_contents import GitHubContentsClient
from status_snapshot.storage.local_file import LocalFileSnapshotStorage

logger = logging.getLogger(__name__)


class SnapshotPersistenceSink:
    """
    Write the snapshot locally, then upsert it into the remote store.

    A local write failure propagates. Remote failures are logged and reported
    through the returned PersistOutcome; they are never retried.
    """

    def __init__(
        self,
        *,
        local: SnapshotStorage,
        remote: GitHubContentsClient | None = None,
        remote_path: str = "output.json",
        commit_message: str = "Update service status snapshot",
    ) -> None:
        self._local = local
        self._remote = remote
        self._remote_path = remote_path
        self._commit_message = commit_message

    def persist(self, snapshot: Snapshot) -> PersistOutcome:
        local_path = self._local.store(snapshot)

        if self._remote is None:
            log_event(logger, logging.INFO, "remote_publish_skipped", reason="not_configured")
            return PersistOutcome(local_path=local_path, remote_status="skipped")

        try:
            action = self._publish(self._remote, snapshot)
        except RemoteStoreError as exc:
            log_event(
                logger,
                logging.ERROR,
                "remote_publish_failed",
                repository=self._remote.repository,
                path=self._remote_path,
                conflict=isinstance(exc, RevisionConflictError),
                status_code=exc.status_code,
                error=str(exc),
            )
            return PersistOutcome(
                local_path=local_path,
                remote_status="failed",
                remote_error=str(exc),
                remote_conflict=isinstance(exc, RevisionConflictError),
            )

        return PersistOutcome(local_path=local_path, remote_status="published", remote_action=action)

    def _publish(self, remote: GitHubContentsClient, snapshot: Snapshot) -> str:
        content = render_snapshot_json(snapshot)
        message = f"{self._commit_message} ({snapshot.timestamp})"

        try:
            sha = remote.get_file_sha(self._remote_path)
        except RemoteNotFoundError:
            remote.put_file(self._remote_path, content=content, message=message)
            log_event(
                logger,
                logging.INFO,
                "remote_file_created",
                repository=remote.repository,
                path=self._remote_path,
            )
            return "created"

        remote.put_file(self._remote_path, content=content, message=message, sha=sha)
        log_event(
            logger,
            logging.INFO,
            "remote_file_updated",
            repository=remote.repository,
            path=self._remote_path,
            previous_sha=sha,
        )
        return "updated"


def build_persistence_sink(settings: StatusSnapshotSettings) -> SnapshotPersistenceSink:
    """
    Build the sink from settings; remote publishing needs a token and repository.
    """

    remote_settings = settings.remote
    remote = GitHubContentsClient(settings=remote_settings) if remote_settings.enabled else None
    return SnapshotPersistenceSink(
        local=LocalFileSnapshotStorage(path=settings.output_path),
        remote=remote,
        remote_path=remote_settings.path,
        commit_message=remote_settings.commit_message,
    )
