"""Exceptions raised by the hotel desk core."""


class HotelDeskError(Exception):
    """Base class for recoverable hotel desk errors."""

    pass


class InvalidArgumentError(HotelDeskError, ValueError):
    """Raised when an argument is outside its allowed domain.

    Non-positive night or guest counts, malformed DD/MM/YYYY dates.
    """

    pass


class InvalidDateRangeError(HotelDeskError, ValueError):
    """Raised when check-out is not strictly after check-in."""

    def __init__(self, check_in: str, check_out: str):
        self.check_in = check_in
        self.check_out = check_out
        super().__init__(
            f"Check-out date {check_out} must be after check-in date {check_in}"
        )
