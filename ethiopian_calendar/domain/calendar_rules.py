"""Ethiopian calendar rules and static lookup tables."""

from types import MappingProxyType
from typing import Mapping, Optional

MONTHS_PER_YEAR = 13
DAYS_PER_MONTH = 30
PAGUME = 13

MONTH_NAMES: tuple[str, ...] = (
    "Meskerem",
    "Tikimit",
    "Hidar",
    "Tahesas",
    "Tir",
    "Yekatit",
    "Megabit",
    "Miazia",
    "Genbot",
    "Sene",
    "Hamle",
    "Nehase",
    "Pagume",
)

MONTH_NAMES_AMHARIC: tuple[str, ...] = (
    "መስከረም",
    "ጥቅምት",
    "ህዳር",
    "ታህሳስ",
    "ጥር",
    "የካቲት",
    "መጋቢት",
    "ሚያዝያ",
    "ግንቦት",
    "ሰኔ",
    "ሐምሌ",
    "ነሐሴ",
    "ጳጉሜ",
)

# Keyed by zero-padded "MM-DD"; the same every year
HOLIDAYS: Mapping[str, str] = MappingProxyType(
    {
        "01-01": "Ethiopian New Year",
        "01-17": "Meskel",
    }
)


def is_leap_year(year: int) -> bool:
    """
    Check whether an Ethiopian year is a leap year.

    Args:
        year: Ethiopian year

    Returns:
        True if the year has a six-day Pagume
    """
    return year % 4 == 3


def is_valid_date(year: int, month: int, day: int) -> bool:
    """
    Check whether a year/month/day triple is a valid Ethiopian date.

    Args:
        year: Ethiopian year
        month: Month number (1-13)
        day: Day of month

    Returns:
        True if the date exists
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        return False
    if day < 1 or day > DAYS_PER_MONTH:
        return False
    if month == PAGUME and day > (6 if is_leap_year(year) else 5):
        return False
    return True


def month_name(month: int) -> Optional[str]:
    """Get the English name of a month (1-indexed), or None if out of range."""
    if 1 <= month <= MONTHS_PER_YEAR:
        return MONTH_NAMES[month - 1]
    return None


def month_name_amharic(month: int) -> Optional[str]:
    """Get the Amharic name of a month (1-indexed), or None if out of range."""
    if 1 <= month <= MONTHS_PER_YEAR:
        return MONTH_NAMES_AMHARIC[month - 1]
    return None


def holiday_name(year: int, month: int, day: int) -> Optional[str]:
    """
    Look up the holiday falling on a date.

    Args:
        year: Ethiopian year (holidays are the same every year)
        month: Month number
        day: Day of month

    Returns:
        Holiday name, or None if the date is not a holiday
    """
    return HOLIDAYS.get(f"{month:02d}-{day:02d}")


def approximate_ordinal(year: int, month: int, day: int) -> int:
    """
    Approximate day count used for scheduling and fee math.

    Every year counts as 365 days and every month as 30 days, so the result
    ignores leap days and the short Pagume month. Only differences between
    two ordinals are meaningful.
    """
    return year * 365 + month * DAYS_PER_MONTH + day
