"""
Apple developer system status (App Store Connect and TestFlight).
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from status_snapshot.scraping.base import StatusExtractor
from status_snapshot.scraping.browser import BrowserPage
from status_snapshot.scraping.types import RawStatus


class AppleSystemStatusExtractor(StatusExtractor):
    """
    Reads several named services from the Apple system status event list.
    """

    family = "App Store Connect"
    url = "https://developer.apple.com/system-status/"

    SERVICE_NAMES: tuple[str, ...] = (
        "App Store Connect",
        "App Store Connect - TestFlight",
    )
    AVAILABLE_TOGGLE_SELECTOR = ".light-toggle-icon#lights-toggle-available"
    READY_SELECTOR = ".resolved"

    def prepare(self, page: BrowserPage) -> None:
        page.click(self.AVAILABLE_TOGGLE_SELECTOR)
        page.wait_for_selector(self.READY_SELECTOR, timeout_ms=self.selector_timeout_ms)

    def parse_page(self, soup: BeautifulSoup) -> list[RawStatus]:
        events = soup.select(".event")
        statuses: list[RawStatus] = []
        for service_name in self.SERVICE_NAMES:
            event = next(
                (node for node in events if service_name in node.get_text()),
                None,
            )
            if event is None:
                self._missing(service_name)
                continue

            name = self._first_line(event.find("a"))
            availability = self._text(event.select_one(self.READY_SELECTOR))
            if name is None or availability is None:
                self._missing(service_name)
                continue
            statuses.append(RawStatus(service_name=name, status=availability, family=self.family))
        return statuses
