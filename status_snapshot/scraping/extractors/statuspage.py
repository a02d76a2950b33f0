"""
Extractors for Atlassian Statuspage-hosted pages (TestRail, AppCenter).
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from status_snapshot.scraping.base import StatusExtractor
from status_snapshot.scraping.types import RawStatus


class StatuspageComponentExtractor(StatusExtractor):
    """
    Reads `.name` and `.component-status` from one container per component.
    """

    container_selectors: tuple[str, ...] = (".component-container",)
    name_prefix: str = ""

    def parse_page(self, soup: BeautifulSoup) -> list[RawStatus]:
        statuses: list[RawStatus] = []
        for selector in self.container_selectors:
            container = soup.select_one(selector)
            if container is None:
                self._missing(selector)
                continue

            name = self._text(container.select_one(".name"))
            status = self._text(container.select_one(".component-status"))
            if name is None or status is None:
                self._missing(selector)
                continue
            statuses.append(
                RawStatus(
                    service_name=f"{self.name_prefix}{name}",
                    status=status,
                    family=self.family,
                )
            )
        return statuses


class TestRailStatusExtractor(StatuspageComponentExtractor):
    """
    TestRail Cloud: the first component on the page.
    """

    __test__ = False

    family = "TestRail"
    url = "https://status.testrail.com/"


class AppCenterStatusExtractor(StatuspageComponentExtractor):
    """
    AppCenter: two sub-components addressed by their component ids.
    """

    family = "AppCenter"
    url = "https://status.appcenter.ms/"
    name_prefix = "AppCenter "

    COMPONENT_IDS: tuple[str, ...] = ("4dkck4m5dd0g", "wdsg44zmnpyk")
    container_selectors = tuple(
        f'[data-component-id="{component_id}"]' for component_id in COMPONENT_IDS
    )
