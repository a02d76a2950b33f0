"""
Service status scraping engine.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from status_snapshot.domain import PersistOutcome, Snapshot
from status_snapshot.scraping.base import StatusExtractor
from status_snapshot.scraping.browser import BrowserPage
from status_snapshot.scraping.clock import TimestampRenderer
from status_snapshot.scraping.logging_utils import log_event
from status_snapshot.scraping.normalization import StatusNormalizer
from status_snapshot.scraping.types import SnapshotBuilder
from status_snapshot.storage.publisher import SnapshotPersistenceSink

logger = logging.getLogger(__name__)


class StatusScrapingEngine:
    """
    Visits each status page in order and persists one aggregate snapshot.
    """

    def __init__(
        self,
        *,
        extractors: Sequence[StatusExtractor],
        sink: SnapshotPersistenceSink,
        normalizer: StatusNormalizer | None = None,
        timestamps: TimestampRenderer | None = None,
    ) -> None:
        self._extractors = list(extractors)
        self._sink = sink
        self._normalizer = normalizer or StatusNormalizer()
        self._timestamps = timestamps or TimestampRenderer()

    def collect(self, page: BrowserPage) -> Snapshot:
        """
        Run every extractor against the shared page and build the snapshot.
        """

        builder = SnapshotBuilder()
        for extractor in self._extractors:
            for raw in extractor.extract(page):
                record = self._normalizer.normalize(raw, timestamp=self._timestamps.now())
                builder.add(record)
                log_event(
                    logger,
                    logging.INFO,
                    "status_extracted",
                    family=raw.family,
                    service_name=record.service_name,
                    status=record.status,
                )

        snapshot = builder.build(timestamp=self._timestamps.now())
        log_event(
            logger,
            logging.INFO,
            "snapshot_built",
            timestamp=snapshot.timestamp,
            statuses=len(snapshot.statuses),
        )
        return snapshot

    def run(self, page: BrowserPage) -> tuple[Snapshot, PersistOutcome]:
        snapshot = self.collect(page)
        outcome = self._sink.persist(snapshot)
        return snapshot, outcome
