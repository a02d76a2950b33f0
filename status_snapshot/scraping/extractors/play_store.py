"""
Google Play status dashboard (Publishing API row).
"""

from __future__ import annotations

from bs4 import BeautifulSoup

from status_snapshot.scraping.base import StatusExtractor
from status_snapshot.scraping.types import RawStatus

# Checked in order; the first class present on the icon wins.
ICON_STATUS_CLASSES: tuple[tuple[str, str], ...] = (
    ("psd__available", "Available"),
    ("psd__disruption", "Service Disruption"),
    ("psd__outage", "Service Outage"),
)
UNKNOWN_STATUS = "Unknown"


def classify_icon(classes: list[str] | None) -> str:
    present = set(classes or [])
    for css_class, status in ICON_STATUS_CLASSES:
        if css_class in present:
            return status
    return UNKNOWN_STATUS


class PlayStoreStatusExtractor(StatusExtractor):
    """
    Classifies the Publishing API row by its status icon's CSS state class.
    """

    family = "Google Play Store"
    url = "https://status.play.google.com/"

    PRODUCT_LABEL = "Publishing API"
    SERVICE_NAME = "Google Play Store Publishing API"

    def parse_page(self, soup: BeautifulSoup) -> list[RawStatus]:
        row = next(
            (
                node
                for node in soup.select(".product-row")
                if self._text(node.select_one(".product-name")) == self.PRODUCT_LABEL
            ),
            None,
        )
        if row is None:
            self._missing(self.PRODUCT_LABEL)
            return []

        icon = row.select_one(".psd__status-icon svg")
        status = classify_icon(icon.get("class") if icon is not None else None)
        return [RawStatus(service_name=self.SERVICE_NAME, status=status, family=self.family)]
