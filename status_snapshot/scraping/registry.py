"""
Ordered registry of status page extractors.
"""

from __future__ import annotations

from collections.abc import Mapping

from status_snapshot.config import DEFAULT_SELECTOR_TIMEOUT_MS
from status_snapshot.scraping.base import StatusExtractor
from status_snapshot.scraping.extractors import (
    AppCenterStatusExtractor,
    AppleSystemStatusExtractor,
    PlayStoreStatusExtractor,
    TestRailStatusExtractor,
)


class ExtractorRegistry:
    """
    Extractor classes keyed by name, instantiated in registration order.

    Registration order is the page visitation order of a run.
    """

    def __init__(self, registrations: Mapping[str, type[StatusExtractor]] | None = None) -> None:
        builtins: dict[str, type[StatusExtractor]] = {
            "app_store_connect": AppleSystemStatusExtractor,
            "testrail": TestRailStatusExtractor,
            "appcenter": AppCenterStatusExtractor,
            "play_store": PlayStoreStatusExtractor,
        }
        if registrations is not None:
            builtins = dict(registrations)
        self._registrations = builtins

    def register(self, *, name: str, extractor_class: type[StatusExtractor]) -> None:
        self._registrations[name.strip().lower()] = extractor_class

    def names(self) -> list[str]:
        return list(self._registrations)

    def create_extractors(
        self,
        *,
        selector_timeout_ms: int = DEFAULT_SELECTOR_TIMEOUT_MS,
    ) -> list[StatusExtractor]:
        return [
            extractor_class(selector_timeout_ms=selector_timeout_ms)
            for extractor_class in self._registrations.values()
        ]
