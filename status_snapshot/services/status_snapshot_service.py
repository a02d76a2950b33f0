"""
status_snapshot/services/status_snapshot_service.py

Service orchestration for one status snapshot run.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from dataclasses import dataclass

from status_snapshot.config import StatusSnapshotSettings, get_status_snapshot_settings
from status_snapshot.domain import PersistOutcome, Snapshot
from status_snapshot.scraping.browser import BrowserPage, PlaywrightBrowserSession
from status_snapshot.scraping.clock import TimestampRenderer
from status_snapshot.scraping.engine import StatusScrapingEngine
from status_snapshot.scraping.registry import ExtractorRegistry
from status_snapshot.storage import SnapshotPersistenceSink, build_persistence_sink

BrowserFactory = Callable[[], AbstractContextManager[BrowserPage]]


@dataclass(frozen=True)
class StatusRunResult:
    """
    Snapshot and persistence outcome of one run.
    """

    snapshot: Snapshot
    outcome: PersistOutcome


class StatusSnapshotService:
    """
    Opens one browser session, collects every status and persists the snapshot.
    """

    def __init__(
        self,
        *,
        settings: StatusSnapshotSettings | None = None,
        registry: ExtractorRegistry | None = None,
        sink: SnapshotPersistenceSink | None = None,
        browser_factory: BrowserFactory | None = None,
        timestamps: TimestampRenderer | None = None,
    ) -> None:
        self._settings = settings or get_status_snapshot_settings()
        self._registry = registry or ExtractorRegistry()
        self._sink = sink or build_persistence_sink(self._settings)
        self._browser_factory = browser_factory or (
            lambda: PlaywrightBrowserSession(headless=self._settings.headless)
        )
        self._timestamps = timestamps or TimestampRenderer(zone_name=self._settings.timezone)

    def run(self) -> StatusRunResult:
        engine = StatusScrapingEngine(
            extractors=self._registry.create_extractors(
                selector_timeout_ms=self._settings.selector_timeout_ms,
            ),
            sink=self._sink,
            timestamps=self._timestamps,
        )
        with self._browser_factory() as page:
            snapshot, outcome = engine.run(page)
        return StatusRunResult(snapshot=snapshot, outcome=outcome)
