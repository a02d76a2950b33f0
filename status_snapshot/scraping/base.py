"""
Base extractor abstraction for service status pages.
"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod

from bs4 import BeautifulSoup, Tag

from status_snapshot.config import DEFAULT_SELECTOR_TIMEOUT_MS
from status_snapshot.scraping.browser import BrowserPage
from status_snapshot.scraping.logging_utils import log_event
from status_snapshot.scraping.types import RawStatus

logger = logging.getLogger(__name__)


class StatusExtractor(ABC):
    """
    Loads one status page in the shared browser page and reads raw statuses.

    Missing markup yields fewer (or no) statuses, never an error. Navigation
    and selector-wait failures propagate and abort the run.
    """

    family: str = ""
    url: str = ""

    def __init__(self, *, selector_timeout_ms: int = DEFAULT_SELECTOR_TIMEOUT_MS) -> None:
        self.selector_timeout_ms = selector_timeout_ms

    def extract(self, page: BrowserPage) -> list[RawStatus]:
        """
        Navigate to the status page and return the raw statuses found on it.
        """

        page.goto(self.url)
        self.prepare(page)
        soup = BeautifulSoup(page.content(), "html.parser")
        statuses = self.parse_page(soup)
        log_event(
            logger,
            logging.INFO,
            "page_extracted",
            family=self.family,
            url=self.url,
            statuses_found=len(statuses),
        )
        return statuses

    def prepare(self, page: BrowserPage) -> None:
        """
        Interact with the loaded page before its document is read.
        """

    @abstractmethod
    def parse_page(self, soup: BeautifulSoup) -> list[RawStatus]:
        """
        Read raw statuses out of a fully rendered document.
        """

    def _missing(self, target: str) -> None:
        log_event(
            logger,
            logging.DEBUG,
            "status_missing",
            family=self.family,
            target=target,
        )

    @staticmethod
    def _text(node: Tag | None) -> str | None:
        if node is None:
            return None
        return re.sub(r"\s+", " ", node.get_text(" ", strip=True)).strip()

    @staticmethod
    def _first_line(node: Tag | None) -> str | None:
        if node is None:
            return None
        for line in node.get_text("\n").splitlines():
            stripped = line.strip()
            if stripped:
                return stripped
        return ""
