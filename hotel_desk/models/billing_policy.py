"""Billing policies and room types."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum

from hotel_desk.exceptions import InvalidArgumentError

CENT = Decimal("0.01")


def to_amount(value: Decimal | int | float | str) -> Decimal:
    """Quantize a value to a two-decimal currency amount.

    Floats go through ``str`` so 0.1 stays 0.10 rather than its binary expansion.

    Raises:
        InvalidArgumentError: If the value is not a number or needs more
            digits than the decimal context holds
    """
    if isinstance(value, float):
        value = str(value)
    try:
        return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as e:
        raise InvalidArgumentError(f"{value!r} is not a valid amount") from e


class BillingPolicy(str, Enum):
    """Fare calculation rule applied to a room's base rate.

    - Regular: rate * nights
    - Premium: rate * nights * 1.10
    - Corporate: rate * nights * 0.85
    """

    REGULAR = "Regular"
    PREMIUM = "Premium"
    CORPORATE = "Corporate"

    @property
    def multiplier(self) -> Decimal:
        """Factor applied on top of rate * nights."""
        return _MULTIPLIERS[self]

    @property
    def label(self) -> str:
        """Display name of the policy."""
        return self.value

    def compute(self, base_rate: Decimal | int | float | str, nights: int) -> Decimal:
        """Compute the bill for a stay.

        Args:
            base_rate: Nightly rate of the room
            nights: Number of billed nights, must be positive

        Returns:
            Amount rounded half-up to cents

        Raises:
            InvalidArgumentError: If nights is not a positive integer
        """
        if isinstance(nights, bool) or not isinstance(nights, int) or nights <= 0:
            raise InvalidArgumentError(
                f"Number of nights must be a positive integer, got {nights!r}"
            )
        return to_amount(to_amount(base_rate) * nights * self.multiplier)


_MULTIPLIERS: dict[BillingPolicy, Decimal] = {
    BillingPolicy.REGULAR: Decimal("1"),
    BillingPolicy.PREMIUM: Decimal("1.10"),
    BillingPolicy.CORPORATE: Decimal("0.85"),
}


class RoomType(str, Enum):
    """Room categories and their canonical guest capacity."""

    SINGLE = "Single"
    DOUBLE = "Double"
    DELUXE = "Deluxe"
    SUITE = "Suite"

    @property
    def default_max_guests(self) -> int:
        """Canonical capacity: 1, 2, 4 and 6 guests."""
        return _MAX_GUESTS[self]


_MAX_GUESTS: dict[RoomType, int] = {
    RoomType.SINGLE: 1,
    RoomType.DOUBLE: 2,
    RoomType.DELUXE: 4,
    RoomType.SUITE: 6,
}
