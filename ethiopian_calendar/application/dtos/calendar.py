"""Calendar and billing DTOs."""

from pydantic import ConfigDict, InstanceOf

from ethiopian_calendar.application.dtos.base import DTO
from ethiopian_calendar.domain.entities.ethiopian_date import EthiopianDate


class CurrentEthiopianDateTime(DTO):
    """Current date in Ethiopia with its 12-hour display time."""

    date: InstanceOf[EthiopianDate]
    time: str


class PaymentSchedule(DTO):
    """Payment schedule DTO."""

    start_date: str
    frequency_months: int
    due_dates: list[InstanceOf[EthiopianDate]]
    formatted_due_dates: list[str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "start_date": "2017-02-20",
                "frequency_months": 2,
                "formatted_due_dates": ["2017-02-20", "2017-04-20", "2017-06-20"],
            }
        }
    )

    @property
    def count(self) -> int:
        """Number of scheduled payments."""
        return len(self.due_dates)


class LateFeeAssessment(DTO):
    """Late fee assessment DTO."""

    due_date: str
    payment_date: str
    is_late: bool
    days_late: int
    daily_fee_rate: float
    fee: float

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "due_date": "2017-01-01",
                "payment_date": "2017-01-05",
                "is_late": True,
                "days_late": 4,
                "daily_fee_rate": 10.0,
                "fee": 40.0,
            }
        }
    )
