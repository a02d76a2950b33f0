"""
tests/test_engine.py

End-to-end runs over fake pages: ordering, naming, timestamps and failures.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager

import pytest

from status_snapshot.config import StatusSnapshotSettings
from status_snapshot.errors import BrowserTimeoutError
from status_snapshot.scraping.base import StatusExtractor
from status_snapshot.scraping.engine import StatusScrapingEngine
from status_snapshot.scraping.registry import ExtractorRegistry
from status_snapshot.scraping.types import RawStatus
from status_snapshot.services import StatusSnapshotService
from status_snapshot.storage import LocalFileSnapshotStorage, SnapshotPersistenceSink


def _local_sink(tmp_path) -> SnapshotPersistenceSink:
    return SnapshotPersistenceSink(local=LocalFileSnapshotStorage(path=tmp_path / "output.json"))


def _engine(tmp_path, timestamps, extractors=None) -> StatusScrapingEngine:
    return StatusScrapingEngine(
        extractors=extractors if extractors is not None else ExtractorRegistry().create_extractors(),
        sink=_local_sink(tmp_path),
        timestamps=timestamps,
    )


class _CannedExtractor(StatusExtractor):
    def __init__(self, url: str, statuses: list[tuple[str, str]]) -> None:
        super().__init__()
        self.url = url
        self.family = "canned"
        self._statuses = statuses

    def parse_page(self, soup) -> list[RawStatus]:
        return [RawStatus(name, status, self.family) for name, status in self._statuses]


def test_full_run_keeps_visitation_order_and_display_names(
    tmp_path, fake_page, all_pages, ticking_timestamps
) -> None:
    snapshot, outcome = _engine(tmp_path, ticking_timestamps).run(fake_page(all_pages))

    assert [(r.service_name, r.status) for r in snapshot.statuses] == [
        ("App Store Connect", "Available"),
        ("TestFlight", "Service Disruption"),
        ("TestRail Cloud", "Available"),
        ("AppCenter Distribute", "Available"),
        ("AppCenter Build", "Degraded Performance"),
        ("Google Play Store", "Service Outage"),
    ]
    assert outcome.remote_status == "skipped"

    written = json.loads((tmp_path / "output.json").read_text(encoding="utf-8"))
    assert written["statuses"][1] == {
        "Service Name": "TestFlight",
        "Status": "Service Disruption",
        "Timestamp": "2024-07-01 12:00:01 PDT",
    }


def test_pages_are_visited_sequentially_in_fixed_order(
    tmp_path, fake_page, all_pages, ticking_timestamps
) -> None:
    page = fake_page(all_pages)

    _engine(tmp_path, ticking_timestamps).collect(page)

    visited = [call[1] for call in page.calls if call[0] == "goto"]
    assert visited == [
        "https://developer.apple.com/system-status/",
        "https://status.testrail.com/",
        "https://status.appcenter.ms/",
        "https://status.play.google.com/",
    ]


def test_each_record_gets_its_own_timestamp_and_snapshot_is_sampled_last(
    tmp_path, fake_page, all_pages, ticking_timestamps
) -> None:
    snapshot = _engine(tmp_path, ticking_timestamps).collect(fake_page(all_pages))

    assert [r.timestamp for r in snapshot.statuses] == [
        f"2024-07-01 12:00:0{second} PDT" for second in range(6)
    ]
    assert snapshot.timestamp == "2024-07-01 12:00:06 PDT"


def test_no_markup_anywhere_yields_empty_snapshot(tmp_path, fake_page, ticking_timestamps) -> None:
    snapshot, _ = _engine(tmp_path, ticking_timestamps).run(fake_page({}))

    assert snapshot.statuses == ()
    assert snapshot.timestamp == "2024-07-01 12:00:00 PDT"
    written = json.loads((tmp_path / "output.json").read_text(encoding="utf-8"))
    assert written == {"timestamp": "2024-07-01 12:00:00 PDT", "statuses": []}


def test_app_store_scenario(tmp_path, fake_page, ticking_timestamps) -> None:
    extractors = [
        _CannedExtractor("https://a.example/", [("App Store Connect", "Available")]),
        _CannedExtractor("https://b.example/", [("App Store Connect - TestFlight", "Service Disruption")]),
    ]

    snapshot = _engine(tmp_path, ticking_timestamps, extractors).collect(fake_page())

    assert [(r.service_name, r.status) for r in snapshot.statuses] == [
        ("App Store Connect", "Available"),
        ("TestFlight", "Service Disruption"),
    ]


def test_play_store_unknown_scenario(tmp_path, fake_page, status_html, ticking_timestamps) -> None:
    pages = {"https://status.play.google.com/": status_html.play_store("psd__maintenance")}

    snapshot = _engine(tmp_path, ticking_timestamps).collect(fake_page(pages))

    assert [(r.service_name, r.status) for r in snapshot.statuses] == [("Google Play Store", "Unknown")]


def test_selector_timeout_aborts_before_anything_is_written(
    tmp_path, fake_page, all_pages, ticking_timestamps
) -> None:
    page = fake_page(all_pages, missing_selectors=(".resolved",))

    with pytest.raises(BrowserTimeoutError):
        _engine(tmp_path, ticking_timestamps).run(page)

    assert not (tmp_path / "output.json").exists()
    assert [call[0] for call in page.calls] == ["goto", "click", "wait_for_selector"]


class TestStatusSnapshotService:
    @staticmethod
    def _browser(page, events: list[str]):
        @contextmanager
        def factory() -> Iterator:
            events.append("open")
            try:
                yield page
            finally:
                events.append("close")

        return factory

    def test_run_opens_and_closes_browser_once(
        self, tmp_path, fake_page, all_pages, ticking_timestamps
    ) -> None:
        events: list[str] = []
        service = StatusSnapshotService(
            settings=StatusSnapshotSettings(output_path=str(tmp_path / "output.json")),
            browser_factory=self._browser(fake_page(all_pages), events),
            timestamps=ticking_timestamps,
        )

        result = service.run()

        assert events == ["open", "close"]
        assert len(result.snapshot.statuses) == 6
        assert result.outcome.local_path == str(tmp_path / "output.json")

    def test_browser_is_closed_when_run_fails(
        self, tmp_path, fake_page, all_pages, ticking_timestamps
    ) -> None:
        events: list[str] = []
        service = StatusSnapshotService(
            settings=StatusSnapshotSettings(output_path=str(tmp_path / "output.json")),
            browser_factory=self._browser(
                fake_page(all_pages, missing_selectors=(".resolved",)),
                events,
            ),
            timestamps=ticking_timestamps,
        )

        with pytest.raises(BrowserTimeoutError):
            service.run()

        assert events == ["open", "close"]

    def test_selector_timeout_setting_reaches_extractors(
        self, tmp_path, fake_page, all_pages, ticking_timestamps
    ) -> None:
        page = fake_page(all_pages)
        service = StatusSnapshotService(
            settings=StatusSnapshotSettings(
                output_path=str(tmp_path / "output.json"),
                selector_timeout_ms=1234,
            ),
            browser_factory=self._browser(page, []),
            timestamps=ticking_timestamps,
        )

        service.run()

        assert ("wait_for_selector", ".resolved", 1234) in page.calls
