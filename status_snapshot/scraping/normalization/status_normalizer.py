"""
Normalization of raw scraped statuses into display records.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from status_snapshot.domain import StatusRecord
from status_snapshot.scraping.types import RawStatus

DEFAULT_DISPLAY_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "App Store Connect - TestFlight": "TestFlight",
        "Google Play Store Publishing API": "Google Play Store",
    }
)
DEFAULT_STATUS_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "Operational": "Available",
    }
)


class StatusNormalizer:
    """
    Map raw service names and status text through fixed lookup tables.

    Anything not found in a table is passed through unchanged.
    """

    def __init__(
        self,
        *,
        display_names: Mapping[str, str] = DEFAULT_DISPLAY_NAMES,
        status_aliases: Mapping[str, str] = DEFAULT_STATUS_ALIASES,
    ) -> None:
        self._display_names = dict(display_names)
        self._status_aliases = dict(status_aliases)

    def normalize_status(self, raw_status: str) -> str:
        return self._status_aliases.get(raw_status, raw_status)

    def display_name(self, raw_name: str) -> str:
        return self._display_names.get(raw_name, raw_name)

    def normalize_pair(
        self,
        raw_name: str,
        raw_status: str,
        family: str = "",
    ) -> tuple[str, str]:
        """
        Return `(display_name, canonical_status)`. Lookups do not depend on `family`.
        """

        return self.display_name(raw_name), self.normalize_status(raw_status)

    def normalize(self, raw: RawStatus, *, timestamp: str) -> StatusRecord:
        display_name, status = self.normalize_pair(raw.service_name, raw.status, raw.family)
        return StatusRecord(service_name=display_name, status=status, timestamp=timestamp)
