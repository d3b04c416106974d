"""Night counting between check-in and check-out dates."""

from typing import Literal

from structlog import get_logger

from hotel_desk.exceptions import InvalidDateRangeError
from hotel_desk.models.stay_date import StayDate

logger = get_logger(__name__)

NightsMode = Literal["fixed_table", "calendar"]


class NightCounter:
    """Counts billed nights for a stay."""

    @staticmethod
    def validate_range(check_in: StayDate, check_out: StayDate) -> None:
        """Check that check-out is strictly after check-in.

        Fails when the check-in year is later, or the years match and the
        check-in month is later, or year and month match and the check-in
        day is not earlier.

        Raises:
            InvalidDateRangeError: If the range is empty or reversed
        """
        if check_out <= check_in:
            raise InvalidDateRangeError(str(check_in), str(check_out))

    @staticmethod
    def count(
        check_in: str | StayDate,
        check_out: str | StayDate,
        mode: NightsMode = "fixed_table",
    ) -> int:
        """Count the nights between two DD/MM/YYYY dates.

        In ``fixed_table`` mode every year has 365 days laid out by the
        fixed month table, so 28/02 to 01/03 is one night in any year. In
        ``calendar`` mode the dates must exist and leap years count.

        Args:
            check_in: Check-in date or DD/MM/YYYY text
            check_out: Check-out date or DD/MM/YYYY text
            mode: Counting mode

        Returns:
            Positive number of nights

        Raises:
            InvalidArgumentError: If a date cannot be parsed
            InvalidDateRangeError: If check-out is not after check-in
        """
        start = check_in if isinstance(check_in, StayDate) else StayDate.parse(check_in)
        end = check_out if isinstance(check_out, StayDate) else StayDate.parse(check_out)

        NightCounter.validate_range(start, end)

        if mode == "calendar":
            nights = (end.to_date() - start.to_date()).days
        else:
            nights = end.fixed_ordinal() - start.fixed_ordinal()

        logger.debug(
            "Nights counted",
            check_in=str(start),
            check_out=str(end),
            mode=mode,
            nights=nights,
        )
        return nights


def count_nights(
    check_in: str | StayDate,
    check_out: str | StayDate,
    mode: NightsMode = "fixed_table",
) -> int:
    """Shorthand for :meth:`NightCounter.count`."""
    return NightCounter.count(check_in, check_out, mode)
