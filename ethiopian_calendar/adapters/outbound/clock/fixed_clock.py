"""Fixed clock adapter for tests and reproducible demos."""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ethiopian_calendar.adapters.outbound.clock.zoneinfo_clock import ZoneInfoClock


class FixedClock(ZoneInfoClock):
    """Clock adapter that always reports the same instant."""

    def __init__(self, instant: datetime) -> None:
        """
        Initialize fixed clock.

        Args:
            instant: Instant to report; naive values are returned as-is for
                local time and treated as already being in the requested zone
        """
        self._instant = instant

    @classmethod
    def from_iso(cls, value: str) -> "FixedClock":
        """
        Create a fixed clock from an ISO-8601 string.

        Args:
            value: ISO-8601 datetime, e.g. "2024-09-11T15:05:00+03:00"

        Returns:
            FixedClock instance

        Raises:
            ValueError: If the string is not a valid ISO-8601 datetime
        """
        return cls(datetime.fromisoformat(value))

    def now(self, zone: Optional[str] = None) -> datetime:
        """
        Get the fixed instant.

        Args:
            zone: IANA timezone name to express the instant in, or None

        Returns:
            The fixed instant
        """
        if zone is None:
            return self._instant
        if self._instant.tzinfo is None:
            return self._instant.replace(tzinfo=ZoneInfo(zone))
        return self._instant.astimezone(ZoneInfo(zone))
