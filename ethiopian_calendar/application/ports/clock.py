"""Clock port interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class Clock(ABC):
    """Port interface for the wall-clock time and timezone provider."""

    @abstractmethod
    def now(self, zone: Optional[str] = None) -> datetime:
        """
        Get the current wall-clock time.

        Args:
            zone: IANA timezone name (e.g. "Africa/Addis_Ababa"), or None for
                host local time

        Returns:
            Current time; timezone-aware when a zone is given
        """
        pass

    @abstractmethod
    def format_time(self, moment: datetime) -> str:
        """
        Render the time of day in 12-hour format.

        Args:
            moment: Time to render

        Returns:
            Time string such as "3:05 PM"
        """
        pass
