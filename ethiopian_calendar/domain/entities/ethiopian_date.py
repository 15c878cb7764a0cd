"""Ethiopian date entity."""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional, Union

from ethiopian_calendar.domain import calendar_rules
from ethiopian_calendar.domain.exceptions import InvalidDateError

# Gregorian year/month/day offsets of the fixed conversion mapping
YEAR_OFFSET = 8
MONTH_OFFSET = 8
DAY_OFFSET = 7

DEFAULT_DAILY_FEE_RATE = 10


@dataclass(eq=False)
class EthiopianDate:
    """
    Date (with optional time of day) in the Ethiopian calendar.

    Construction always validates the date. ``add_days`` mutates the
    instance in place and ``calculate_due_date`` adjusts its copy without
    re-validating, so those results may fall outside the calendar.

    Equality and ordering look at ``(year, month, day)`` only.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        """Validate the date parts."""
        if not calendar_rules.is_valid_date(self.year, self.month, self.day):
            raise InvalidDateError(self.year, self.month, self.day)

    # Static rules

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Check whether an Ethiopian year is a leap year."""
        return calendar_rules.is_leap_year(year)

    @staticmethod
    def is_valid_date(year: int, month: int, day: int) -> bool:
        """Check whether a year/month/day triple is a valid Ethiopian date."""
        return calendar_rules.is_valid_date(year, month, day)

    @staticmethod
    def get_month_name(month: int) -> Optional[str]:
        """Get the English name of an Ethiopian month (1-indexed)."""
        return calendar_rules.month_name(month)

    @staticmethod
    def is_holiday(year: int, month: int, day: int) -> Optional[str]:
        """Get the holiday name for a date, or None."""
        return calendar_rules.holiday_name(year, month, day)

    # Conversion

    @classmethod
    def from_gregorian(cls, value: Union[date, datetime]) -> "EthiopianDate":
        """
        Convert a Gregorian date or datetime using the fixed offset mapping.

        Args:
            value: Gregorian date; time of day is carried over from a datetime

        Returns:
            Ethiopian date

        Raises:
            InvalidDateError: If the shifted day falls outside the calendar
                (Gregorian days 1 to 7 always do)
        """
        if isinstance(value, datetime):
            hour, minute, second = value.hour, value.minute, value.second
        else:
            hour = minute = second = 0

        if value.month >= 9:
            month = value.month - MONTH_OFFSET
        else:
            month = value.month + 4

        return cls(
            value.year - YEAR_OFFSET,
            month,
            value.day - DAY_OFFSET,
            hour,
            minute,
            second,
        )

    def to_gregorian(self) -> datetime:
        """
        Convert to a Gregorian datetime using the fixed offset mapping.

        The day number is carried over unchanged. Months outside 1-12 carry
        into the year and days past the end of the Gregorian month roll into
        the following month.

        Returns:
            Naive Gregorian datetime
        """
        if self.month <= 4:
            month = self.month + MONTH_OFFSET
        else:
            month = self.month - 4

        year_carry, month_index = divmod(month - 1, 12)
        first_of_month = datetime(
            self.year + YEAR_OFFSET + year_carry,
            month_index + 1,
            1,
            self.hour,
            self.minute,
            self.second,
        )
        return first_of_month + timedelta(days=self.day - 1)

    # Formatting

    def format(self, template: str) -> str:
        """
        Render the date using YYYY, MM, DD and MMMM tokens.

        Tokens are substituted in that order and only the first occurrence
        of each is replaced.

        Args:
            template: Format template, e.g. "YYYY-MM-DD"

        Returns:
            Formatted date string
        """
        return (
            template.replace("YYYY", str(self.year), 1)
            .replace("MM", f"{self.month:02d}", 1)
            .replace("DD", f"{self.day:02d}", 1)
            .replace("MMMM", str(calendar_rules.month_name(self.month)), 1)
        )

    def format_amharic(self) -> str:
        """Render the date as "<day> <Amharic month> <year>"."""
        return f"{self.day} {calendar_rules.month_name_amharic(self.month)} {self.year}"

    # Comparison and arithmetic

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def is_before(self, other: "EthiopianDate") -> bool:
        """Check whether this date is strictly before another."""
        return self._key() < other._key()

    def is_after(self, other: "EthiopianDate") -> bool:
        """Check whether this date is strictly after another."""
        return not self.is_before(other) and not self.is_equal(other)

    def is_equal(self, other: "EthiopianDate") -> bool:
        """Check whether both dates fall on the same day."""
        return self._key() == other._key()

    def difference(self, other: "EthiopianDate") -> int:
        """
        Approximate number of days between two dates.

        Uses 365-day years and 30-day months, see
        ``calendar_rules.approximate_ordinal``.

        Args:
            other: Date to compare against

        Returns:
            Non-negative day distance
        """
        return abs(
            calendar_rules.approximate_ordinal(*self._key())
            - calendar_rules.approximate_ordinal(*other._key())
        )

    def add_days(self, days: int) -> "EthiopianDate":
        """
        Advance this date in place by a number of days.

        Every month, Pagume included, is treated as 30 days long.

        Args:
            days: Days to add

        Returns:
            This instance, for chaining
        """
        self.day += days
        while self.day > calendar_rules.DAYS_PER_MONTH:
            self.day -= calendar_rules.DAYS_PER_MONTH
            self.month += 1
            if self.month > calendar_rules.MONTHS_PER_YEAR:
                self.month = 1
                self.year += 1
        return self

    # Payment scheduling

    def calculate_due_date(self, frequency_months: int = 1) -> "EthiopianDate":
        """
        Calculate the due date a number of months after this date.

        The month wraps past Pagume at most once, so offsets needing more
        than one wrap leave the month above 13.

        Args:
            frequency_months: Months to advance

        Returns:
            New date with the time of day reset to midnight
        """
        due_date = EthiopianDate(self.year, self.month, self.day)
        due_date.month += frequency_months
        if due_date.month > calendar_rules.MONTHS_PER_YEAR:
            due_date.month -= calendar_rules.MONTHS_PER_YEAR
            due_date.year += 1
        return due_date

    def generate_payment_schedule(
        self, frequency_months: int = 1, count: int = 12
    ) -> list["EthiopianDate"]:
        """
        Generate due dates starting from this date.

        Entry ``i`` is ``calculate_due_date(frequency_months * i)``, so the
        first entry is this date itself.

        Args:
            frequency_months: Months between payments
            count: Number of payments

        Returns:
            Due dates in ascending order of ``i``
        """
        return [self.calculate_due_date(frequency_months * i) for i in range(count)]

    @staticmethod
    def calculate_late_fee(
        due_date: "EthiopianDate",
        payment_date: "EthiopianDate",
        daily_fee_rate: float = DEFAULT_DAILY_FEE_RATE,
    ) -> float:
        """
        Calculate the late fee for a payment.

        Args:
            due_date: Date the payment was due
            payment_date: Date the payment was made
            daily_fee_rate: Fee charged per day late

        Returns:
            0 for early payments, otherwise approximate days late times the rate
        """
        if payment_date.is_before(due_date):
            return 0
        return due_date.difference(payment_date) * daily_fee_rate

    # Operators

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EthiopianDate):
            return NotImplemented
        return self.is_equal(other)

    def __lt__(self, other: "EthiopianDate") -> bool:
        if not isinstance(other, EthiopianDate):
            return NotImplemented
        return self.is_before(other)

    def __le__(self, other: "EthiopianDate") -> bool:
        if not isinstance(other, EthiopianDate):
            return NotImplemented
        return not self.is_after(other)

    def __gt__(self, other: "EthiopianDate") -> bool:
        if not isinstance(other, EthiopianDate):
            return NotImplemented
        return self.is_after(other)

    def __ge__(self, other: "EthiopianDate") -> bool:
        if not isinstance(other, EthiopianDate):
            return NotImplemented
        return not self.is_before(other)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.format("YYYY-MM-DD")
