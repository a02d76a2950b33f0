"""
Shared scraping runtime data models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from status_snapshot.domain import Snapshot, StatusRecord


@dataclass(frozen=True)
class RawStatus:
    """
    One status pair as read from a page, before normalization.
    """

    service_name: str
    status: str
    family: str


@dataclass
class SnapshotBuilder:
    """
    Run-scoped accumulator of normalized records, kept in visitation order.
    """

    records: list[StatusRecord] = field(default_factory=list)

    def add(self, record: StatusRecord) -> None:
        self.records.append(record)

    def build(self, *, timestamp: str) -> Snapshot:
        return Snapshot(timestamp=timestamp, statuses=tuple(self.records))
