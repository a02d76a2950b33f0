from __future__ import annotations

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from status_snapshot.errors import BrowserTimeoutError
from status_snapshot.scraping.browser import BrowserPage
from status_snapshot.scraping.clock import TimestampRenderer

APPLE_HTML = """
<html><body>
  <div class="event">
    <a href="#">App Store Connect
      <span class="event-detail">All systems normal</span></a>
    <div class="resolved"> Available </div>
  </div>
  <div class="event">
    <a href="#">App Store Connect - TestFlight
      <span class="event-detail">Users may be affected</span></a>
    <div class="resolved">Service Disruption</div>
  </div>
</body></html>
"""

TESTRAIL_HTML = """
<html><body>
  <div class="component-container">
    <span class="name"> TestRail Cloud </span>
    <span class="component-status"> Operational </span>
  </div>
</body></html>
"""

APPCENTER_HTML = """
<html><body>
  <div class="component-inner-container" data-component-id="4dkck4m5dd0g">
    <span class="name">Distribute</span>
    <span class="component-status">Operational</span>
  </div>
  <div class="component-inner-container" data-component-id="wdsg44zmnpyk">
    <span class="name">Build</span>
    <span class="component-status">Degraded Performance</span>
  </div>
</body></html>
"""


def play_store_html(icon_classes: str) -> str:
    return f"""
<html><body>
  <div class="product-row">
    <div class="product-name">Play Console</div>
    <div class="psd__status-icon"><svg class="psd__available"></svg></div>
  </div>
  <div class="product-row">
    <div class="product-name"> Publishing API </div>
    <div class="psd__status-icon"><svg class="{icon_classes}"></svg></div>
  </div>
</body></html>
"""


ALL_PAGES = {
    "https://developer.apple.com/system-status/": APPLE_HTML,
    "https://status.testrail.com/": TESTRAIL_HTML,
    "https://status.appcenter.ms/": APPCENTER_HTML,
    "https://status.play.google.com/": play_store_html("psd__outage"),
}


class FakePage(BrowserPage):
    """In-memory page serving canned HTML per URL."""

    def __init__(
        self,
        pages: dict[str, str] | None = None,
        *,
        missing_selectors: tuple[str, ...] = (),
    ) -> None:
        self.pages = pages or {}
        self.missing_selectors = missing_selectors
        self.current_url: str | None = None
        self.calls: list[tuple] = []

    def goto(self, url: str) -> None:
        self.calls.append(("goto", url))
        self.current_url = url

    def click(self, selector: str) -> None:
        self.calls.append(("click", selector))

    def wait_for_selector(self, selector: str, *, timeout_ms: int) -> None:
        self.calls.append(("wait_for_selector", selector, timeout_ms))
        if selector in self.missing_selectors:
            raise BrowserTimeoutError(f"Selector '{selector}' did not appear within {timeout_ms} ms.")

    def content(self) -> str:
        return self.pages.get(self.current_url or "", "<html><body></body></html>")


@pytest.fixture()
def fake_page() -> type[FakePage]:
    return FakePage


@pytest.fixture()
def all_pages() -> dict[str, str]:
    return dict(ALL_PAGES)


@pytest.fixture()
def ticking_timestamps() -> TimestampRenderer:
    """Renderer whose clock advances one second per sample, starting 2024-07-01 19:00 UTC."""
    start = datetime(2024, 7, 1, 19, 0, 0, tzinfo=timezone.utc)
    ticks = iter(range(1000))
    return TimestampRenderer(clock=lambda: start + timedelta(seconds=next(ticks)))


@pytest.fixture()
def status_html() -> SimpleNamespace:
    return SimpleNamespace(
        apple=APPLE_HTML,
        testrail=TESTRAIL_HTML,
        appcenter=APPCENTER_HTML,
        play_store=play_store_html,
    )
