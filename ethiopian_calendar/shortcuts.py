"""Module-level helpers for common calendar lookups."""

import logging
from typing import Optional

from ethiopian_calendar.application.dtos.calendar import CurrentEthiopianDateTime
from ethiopian_calendar.application.ports.clock import Clock
from ethiopian_calendar.domain.entities.ethiopian_date import EthiopianDate


def get_current_ethiopian_date(clock: Optional[Clock] = None) -> EthiopianDate:
    """
    Get today's Ethiopian date from the host's local clock.

    Args:
        clock: Optional clock override

    Returns:
        Current Ethiopian date (time of day carried over)

    Raises:
        InvalidDateError: On Gregorian days 1 to 7 of a month
    """
    # Imported here so importing the package does not build Settings
    from ethiopian_calendar.infrastructure.logging.logger import log_conversion
    from ethiopian_calendar.infrastructure.wiring.dependencies import create_clock

    now = (clock or create_clock()).now()
    ethiopian_date = EthiopianDate.from_gregorian(now)
    log_conversion(now.isoformat(), str(ethiopian_date), level=logging.DEBUG)
    return ethiopian_date


def get_current_date_time_in_ethiopia(
    clock: Optional[Clock] = None,
) -> CurrentEthiopianDateTime:
    """
    Get the current Ethiopian date and 12-hour time in Addis Ababa.

    Args:
        clock: Optional clock override

    Returns:
        Current date and display time
    """
    from ethiopian_calendar.infrastructure.wiring.dependencies import (
        create_get_current_date_time_in_ethiopia,
    )

    return create_get_current_date_time_in_ethiopia(clock).execute()


def difference_between_dates(first: EthiopianDate, second: EthiopianDate) -> int:
    """Approximate number of days between two Ethiopian dates."""
    return first.difference(second)
