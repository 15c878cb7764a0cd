"""Assess late fee use case."""

import logging
from typing import Callable, Optional

from ethiopian_calendar.application.dtos.calendar import LateFeeAssessment
from ethiopian_calendar.domain.entities.ethiopian_date import (
    DEFAULT_DAILY_FEE_RATE,
    EthiopianDate,
)


class AssessLateFee:
    """Use case for assessing the late fee of a single payment."""

    def __init__(
        self,
        logger: Optional[Callable[..., None]] = None,
        default_daily_fee_rate: float = DEFAULT_DAILY_FEE_RATE,
    ) -> None:
        """
        Initialize use case.

        Args:
            logger: Optional logger function (component, **kwargs)
            default_daily_fee_rate: Rate used when assess() gets none
        """
        self._logger = logger
        self._default_daily_fee_rate = default_daily_fee_rate

    def assess(
        self,
        due_date: EthiopianDate,
        payment_date: EthiopianDate,
        daily_fee_rate: Optional[float] = None,
    ) -> LateFeeAssessment:
        """
        Assess the late fee for a payment.

        Args:
            due_date: Date the payment was due
            payment_date: Date the payment was made
            daily_fee_rate: Fee charged per (approximate) day late
                (default: configured)

        Returns:
            Late fee assessment

        Raises:
            ValueError: If the daily fee rate is negative
        """
        if daily_fee_rate is None:
            daily_fee_rate = self._default_daily_fee_rate

        if daily_fee_rate < 0:
            raise ValueError("Daily fee rate cannot be negative")

        fee = EthiopianDate.calculate_late_fee(due_date, payment_date, daily_fee_rate)
        is_late = payment_date.is_after(due_date)
        days_late = due_date.difference(payment_date) if is_late else 0

        if self._logger:
            self._logger(
                "late_fee",
                level=logging.WARNING if is_late else logging.INFO,
                due_date=str(due_date),
                payment_date=str(payment_date),
                days_late=days_late,
                fee=fee,
            )

        return LateFeeAssessment(
            due_date=str(due_date),
            payment_date=str(payment_date),
            is_late=is_late,
            days_late=days_late,
            daily_fee_rate=daily_fee_rate,
            fee=fee,
        )
