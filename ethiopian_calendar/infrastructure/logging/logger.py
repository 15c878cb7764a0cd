"""Structured logger for calendar and billing events."""

import logging
from typing import Any

from ethiopian_calendar.infrastructure.config.settings import settings

_logger = logging.getLogger("ethiopian_calendar")
_logger.setLevel(settings.log_level)

# Create console handler if not exists
if not _logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    handler.setFormatter(formatter)
    _logger.addHandler(handler)


def log_event(
    component: str,
    level: int = logging.INFO,
    **kwargs: Any,
) -> None:
    """
    Log a structured event.

    Args:
        component: Component name (e.g., 'schedule', 'late_fee', 'current_time')
        level: Log level (default: INFO)
        **kwargs: Additional structured fields to log
    """
    fields = {"component": component}
    fields.update(kwargs)

    # Format as key=value pairs for readability
    log_parts = [f"{k}={v!r}" for k, v in fields.items()]
    _logger.log(level, " | ".join(log_parts))


def log_conversion(gregorian: str, ethiopian: str, **kwargs: Any) -> None:
    """
    Log a Gregorian to Ethiopian conversion.

    Args:
        gregorian: Gregorian date as ISO string
        ethiopian: Ethiopian date as YYYY-MM-DD
        **kwargs: Additional fields
    """
    log_event("conversion", gregorian=gregorian, ethiopian=ethiopian, **kwargs)


def log_schedule_generated(
    start_date: str,
    frequency_months: int,
    count: int,
    **kwargs: Any,
) -> None:
    """
    Log payment schedule generation.

    Args:
        start_date: First due date as YYYY-MM-DD
        frequency_months: Months between payments
        count: Number of payments
        **kwargs: Additional fields
    """
    log_event(
        "schedule",
        start_date=start_date,
        frequency_months=frequency_months,
        count=count,
        **kwargs,
    )


def log_late_fee_assessed(
    due_date: str,
    payment_date: str,
    fee: float,
    **kwargs: Any,
) -> None:
    """
    Log a late fee assessment.

    Args:
        due_date: Due date as YYYY-MM-DD
        payment_date: Payment date as YYYY-MM-DD
        fee: Assessed fee
        **kwargs: Additional fields (level, days_late)
    """
    log_event(
        "late_fee",
        due_date=due_date,
        payment_date=payment_date,
        fee=fee,
        **kwargs,
    )


# Export logger instance for direct use
logger = _logger
