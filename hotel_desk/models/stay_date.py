"""DD/MM/YYYY stay dates."""

import re
from datetime import date

from pydantic import BaseModel, ConfigDict

from hotel_desk.exceptions import InvalidArgumentError

DATE_PATTERN = re.compile(r"^\s*(\d{1,2})/(\d{1,2})/(\d{4})\s*$")

# Every year uses this table; there are no leap years.
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class StayDate(BaseModel):
    """A day/month/year triple as typed at the desk.

    Only the month (1-12) and day (1-31) ranges are checked, so 30/02/2024
    parses. Ordering compares year, then month, then day.
    """

    day: int
    month: int
    year: int

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> "StayDate":
        """Parse ``DD/MM/YYYY`` text.

        Raises:
            InvalidArgumentError: If the text is malformed or out of range
        """
        match = DATE_PATTERN.match(text or "")
        if not match:
            raise InvalidArgumentError(f"Date {text!r} is not in DD/MM/YYYY format")
        day, month, year = (int(part) for part in match.groups())
        if not 1 <= month <= 12:
            raise InvalidArgumentError(f"Month must be between 1 and 12, got {month}")
        if not 1 <= day <= 31:
            raise InvalidArgumentError(f"Day must be between 1 and 31, got {day}")
        return cls(day=day, month=month, year=year)

    def sort_key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: "StayDate") -> bool:
        return self.sort_key() < other.sort_key()

    def __le__(self, other: "StayDate") -> bool:
        return self.sort_key() <= other.sort_key()

    def fixed_ordinal(self) -> int:
        """Day number on the 365-day fixed-table calendar."""
        return self.year * 365 + sum(DAYS_IN_MONTH[: self.month - 1]) + self.day

    def to_date(self) -> date:
        """Convert to a real calendar date.

        Raises:
            InvalidArgumentError: If the day does not exist, e.g. 31/04
        """
        try:
            return date(self.year, self.month, self.day)
        except ValueError as e:
            raise InvalidArgumentError(f"{self} is not a calendar date: {e}") from e

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d}"
