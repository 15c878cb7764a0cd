"""Build payment schedule use case."""

from typing import Callable, Optional

from ethiopian_calendar.application.dtos.calendar import PaymentSchedule
from ethiopian_calendar.domain.entities.ethiopian_date import EthiopianDate

DATE_FORMAT = "YYYY-MM-DD"


class BuildPaymentSchedule:
    """Use case for building a payment schedule from a start date."""

    def __init__(
        self,
        logger: Optional[Callable[..., None]] = None,
        default_frequency_months: int = 1,
        default_count: int = 12,
    ) -> None:
        """
        Initialize use case.

        Args:
            logger: Optional logger function (component, **kwargs)
            default_frequency_months: Frequency used when build() gets none
            default_count: Number of payments used when build() gets none
        """
        self._logger = logger
        self._default_frequency_months = default_frequency_months
        self._default_count = default_count

    def build(
        self,
        start_date: EthiopianDate,
        frequency_months: Optional[int] = None,
        count: Optional[int] = None,
    ) -> PaymentSchedule:
        """
        Build a payment schedule.

        Args:
            start_date: Date of the first payment
            frequency_months: Months between payments (default: configured)
            count: Number of payments (default: configured)

        Returns:
            Payment schedule with due dates and their renderings

        Raises:
            ValueError: If frequency or count is negative
        """
        if frequency_months is None:
            frequency_months = self._default_frequency_months
        if count is None:
            count = self._default_count

        if frequency_months < 0:
            raise ValueError("Payment frequency cannot be negative")
        if count < 0:
            raise ValueError("Number of payments cannot be negative")

        due_dates = start_date.generate_payment_schedule(frequency_months, count)

        if self._logger:
            self._logger(
                "schedule",
                start_date=str(start_date),
                frequency_months=frequency_months,
                count=count,
            )

        return PaymentSchedule(
            start_date=start_date.format(DATE_FORMAT),
            frequency_months=frequency_months,
            due_dates=due_dates,
            formatted_due_dates=[due_date.format(DATE_FORMAT) for due_date in due_dates],
        )
