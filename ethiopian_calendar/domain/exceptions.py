"""Domain exceptions."""


class InvalidDateError(ValueError):
    """Raised when a year/month/day triple is not a valid Ethiopian date."""

    def __init__(self, year: int, month: int, day: int) -> None:
        """
        Initialize error with the offending date parts.

        Args:
            year: Ethiopian year
            month: Ethiopian month
            day: Ethiopian day
        """
        self.year = year
        self.month = month
        self.day = day
        super().__init__(f"Invalid Ethiopian date: year={year}, month={month}, day={day}")
