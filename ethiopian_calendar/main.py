"""Demo entrypoint: current Ethiopian date and a sample payment schedule."""

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from ethiopian_calendar.domain.entities.ethiopian_date import EthiopianDate  # noqa: E402
from ethiopian_calendar.domain.exceptions import InvalidDateError  # noqa: E402
from ethiopian_calendar.infrastructure.wiring.dependencies import (  # noqa: E402
    create_assess_late_fee,
    create_build_payment_schedule,
    create_get_current_date_time_in_ethiopia,
)


def main() -> None:
    """Print the current date in Ethiopia, a payment schedule and a late fee."""
    try:
        current = create_get_current_date_time_in_ethiopia().execute()
    except InvalidDateError as exc:
        # Fixed-offset conversion cannot map Gregorian days 1-7
        print("Current Ethiopian Date: unavailable", f"({exc})")
    else:
        print("Current Ethiopian Date:", current.date, f"({current.date.format_amharic()})")
        print("Current Time in Ethiopia:", current.time)

    start_date = EthiopianDate(2017, 2, 20)
    schedule = create_build_payment_schedule().build(start_date, frequency_months=2)
    print(schedule.formatted_due_dates)

    assessment = create_assess_late_fee().assess(schedule.due_dates[0], EthiopianDate(2017, 2, 25))
    print(f"Late fee for paying on {assessment.payment_date}: {assessment.fee:.2f}")


if __name__ == "__main__":
    main()
