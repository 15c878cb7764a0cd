"""
ethiopian_calendar
~~~~~~~~~~~~~~~~~~

Ethiopian calendar dates: conversion to and from the Gregorian calendar,
date arithmetic, payment schedules and late fees.

Basic usage::

    from ethiopian_calendar import EthiopianDate

    start = EthiopianDate(2017, 2, 20)
    schedule = start.generate_payment_schedule(2, 3)
    [d.format("YYYY-MM-DD") for d in schedule]
    # ['2017-02-20', '2017-04-20', '2017-06-20']

Conversion uses a fixed offset between the calendars and day differences
use 365-day years and 30-day months; both are approximations.
"""

from ethiopian_calendar.domain.calendar_rules import is_leap_year, is_valid_date
from ethiopian_calendar.domain.entities.ethiopian_date import EthiopianDate
from ethiopian_calendar.domain.exceptions import InvalidDateError
from ethiopian_calendar.shortcuts import (
    difference_between_dates,
    get_current_date_time_in_ethiopia,
    get_current_ethiopian_date,
)

get_month_name = EthiopianDate.get_month_name
is_holiday = EthiopianDate.is_holiday

__all__ = [
    "EthiopianDate",
    "InvalidDateError",
    "difference_between_dates",
    "get_current_date_time_in_ethiopia",
    "get_current_ethiopian_date",
    "get_month_name",
    "is_holiday",
    "is_leap_year",
    "is_valid_date",
]
