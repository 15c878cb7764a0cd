"""System clock adapter backed by the IANA timezone database."""

from datetime import datetime
from typing import Optional
from zoneinfo import ZoneInfo

from ethiopian_calendar.application.ports.clock import Clock


class ZoneInfoClock(Clock):
    """Clock adapter reading the host clock, localized with zoneinfo."""

    def now(self, zone: Optional[str] = None) -> datetime:
        """
        Get the current time.

        Args:
            zone: IANA timezone name, or None for naive host local time

        Returns:
            Current time

        Raises:
            ZoneInfoNotFoundError: If the zone is unknown
        """
        if zone is None:
            return datetime.now()
        return datetime.now(ZoneInfo(zone))

    def format_time(self, moment: datetime) -> str:
        """
        Render the time of day as "h:mm AM/PM".

        Args:
            moment: Time to render

        Returns:
            12-hour time string, e.g. "3:05 PM"
        """
        hour = moment.hour % 12 or 12
        meridiem = "AM" if moment.hour < 12 else "PM"
        return f"{hour}:{moment.minute:02d} {meridiem}"
