"""Dependency injection factory functions."""

from typing import Any, Optional

from ethiopian_calendar.adapters.outbound.clock.fixed_clock import FixedClock
from ethiopian_calendar.adapters.outbound.clock.zoneinfo_clock import ZoneInfoClock
from ethiopian_calendar.application.ports.clock import Clock
from ethiopian_calendar.application.use_cases.assess_late_fee import AssessLateFee
from ethiopian_calendar.application.use_cases.build_payment_schedule import BuildPaymentSchedule
from ethiopian_calendar.application.use_cases.get_current_date_time_in_ethiopia import (
    GetCurrentDateTimeInEthiopia,
)
from ethiopian_calendar.infrastructure.config.settings import settings
from ethiopian_calendar.infrastructure.logging.logger import (
    log_event,
    log_late_fee_assessed,
    log_schedule_generated,
)


def _logger_func(component: str, **kwargs: Any) -> None:
    log_event(component, **kwargs)


def _schedule_logger(component: str, **kwargs: Any) -> None:
    log_schedule_generated(**kwargs)


def _late_fee_logger(component: str, **kwargs: Any) -> None:
    log_late_fee_assessed(**kwargs)


def create_clock() -> Clock:
    """
    Factory function to create the clock.

    Returns:
        Clock instance (system or fixed)

    Raises:
        ValueError: If the backend is unknown or a fixed clock has no time
    """
    if settings.clock_backend == "system":
        return ZoneInfoClock()
    if settings.clock_backend == "fixed":
        if not settings.fixed_clock_time:
            raise ValueError("FIXED_CLOCK_TIME is required when CLOCK_BACKEND=fixed")
        return FixedClock.from_iso(settings.fixed_clock_time)
    raise ValueError(f"Unknown CLOCK_BACKEND: {settings.clock_backend!r}")


def create_get_current_date_time_in_ethiopia(
    clock: Optional[Clock] = None,
) -> GetCurrentDateTimeInEthiopia:
    """
    Factory function to create GetCurrentDateTimeInEthiopia with dependencies.

    Args:
        clock: Optional clock override (default: create_clock())

    Returns:
        GetCurrentDateTimeInEthiopia instance
    """
    return GetCurrentDateTimeInEthiopia(
        clock or create_clock(),
        zone=settings.ethiopia_timezone,
        logger=_logger_func,
    )


def create_build_payment_schedule() -> BuildPaymentSchedule:
    """
    Factory function to create BuildPaymentSchedule with configured defaults.

    Returns:
        BuildPaymentSchedule instance
    """
    return BuildPaymentSchedule(
        logger=_schedule_logger,
        default_frequency_months=settings.default_frequency_months,
        default_count=settings.default_payment_count,
    )


def create_assess_late_fee() -> AssessLateFee:
    """
    Factory function to create AssessLateFee with the configured fee rate.

    Returns:
        AssessLateFee instance
    """
    return AssessLateFee(
        logger=_late_fee_logger,
        default_daily_fee_rate=settings.default_daily_fee_rate,
    )
