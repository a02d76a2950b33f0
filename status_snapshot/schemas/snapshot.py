"""
status_snapshot/schemas/snapshot.py

JSON contract for the persisted snapshot document.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from status_snapshot.domain import Snapshot, StatusRecord


class StatusRecordDocument(BaseModel):
    """
    Serialized form of one status record.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    service_name: str = Field(alias="Service Name")
    status: str = Field(alias="Status")
    timestamp: str = Field(alias="Timestamp")


class SnapshotDocument(BaseModel):
    """
    Serialized form of a full snapshot, as written to `output.json`.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    timestamp: str
    statuses: list[StatusRecordDocument] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> "SnapshotDocument":
        return cls(
            timestamp=snapshot.timestamp,
            statuses=[
                StatusRecordDocument(
                    service_name=record.service_name,
                    status=record.status,
                    timestamp=record.timestamp,
                )
                for record in snapshot.statuses
            ],
        )

    def to_snapshot(self) -> Snapshot:
        return Snapshot(
            timestamp=self.timestamp,
            statuses=tuple(
                StatusRecord(
                    service_name=item.service_name,
                    status=item.status,
                    timestamp=item.timestamp,
                )
                for item in self.statuses
            ),
        )


def render_snapshot_json(snapshot: Snapshot) -> str:
    """
    Render a snapshot as pretty-printed JSON (two-space indent).
    """

    return SnapshotDocument.from_snapshot(snapshot).model_dump_json(by_alias=True, indent=2)


def parse_snapshot_json(raw: str) -> Snapshot:
    return SnapshotDocument.model_validate_json(raw).to_snapshot()
