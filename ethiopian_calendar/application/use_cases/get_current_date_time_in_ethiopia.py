"""Get current date and time in Ethiopia use case."""

from typing import Any, Callable, Optional

from ethiopian_calendar.application.dtos.calendar import CurrentEthiopianDateTime
from ethiopian_calendar.application.ports.clock import Clock
from ethiopian_calendar.domain.entities.ethiopian_date import EthiopianDate

ETHIOPIA_TIMEZONE = "Africa/Addis_Ababa"


class GetCurrentDateTimeInEthiopia:
    """Use case for reading the current Ethiopian date and local display time."""

    def __init__(
        self,
        clock: Clock,
        zone: str = ETHIOPIA_TIMEZONE,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize use case.

        Args:
            clock: Wall-clock time provider
            zone: IANA timezone used for the wall-clock reading
            logger: Optional logger function (component, **kwargs)
        """
        self._clock = clock
        self._zone = zone
        self._logger = logger

    def _log(self, component: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger(component, **kwargs)

    def execute(self) -> CurrentEthiopianDateTime:
        """
        Read the clock and convert to the Ethiopian calendar.

        Returns:
            Current Ethiopian date and 12-hour time string

        Raises:
            InvalidDateError: If the Gregorian day cannot be mapped
                (the fixed offset fails on days 1 to 7 of each month)
        """
        now = self._clock.now(self._zone)
        ethiopian_date = EthiopianDate.from_gregorian(now)
        display_time = self._clock.format_time(now)

        self._log(
            "current_time",
            zone=self._zone,
            gregorian=now.isoformat(),
            ethiopian=str(ethiopian_date),
            time=display_time,
        )

        return CurrentEthiopianDateTime(date=ethiopian_date, time=display_time)
