"""
Capture-time rendering in a fixed civil time zone.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from status_snapshot.config import DEFAULT_TIMEZONE

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TimestampRenderer:
    """
    Render the current moment as `YYYY-MM-DD HH:MM:SS <zone abbreviation>`.

    The zone is fixed at construction, independent of the host's local zone.
    """

    def __init__(self, *, zone_name: str = DEFAULT_TIMEZONE, clock: Clock = utc_now) -> None:
        self._zone = ZoneInfo(zone_name)
        self._clock = clock

    def now(self) -> str:
        return self.render(self._clock())

    def render(self, moment: datetime) -> str:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return moment.astimezone(self._zone).strftime(TIMESTAMP_FORMAT)
