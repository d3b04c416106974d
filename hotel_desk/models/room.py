"""Room model and read-only room snapshots."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from hotel_desk.models.billing_policy import BillingPolicy, RoomType, to_amount


class AvailableRoom(BaseModel):
    """Snapshot of a bookable room as shown in the availability list."""

    room_number: int
    room_type: RoomType
    base_rate: Decimal
    billing_policy: BillingPolicy
    max_guests: int

    model_config = ConfigDict(frozen=True)


class RoomSnapshot(AvailableRoom):
    """Snapshot of any room, availability flag included."""

    is_available: bool


class Room(BaseModel):
    """A room in the registry.

    The room number is fixed at creation. Rate, billing policy and the
    availability flag change over the room's life; the registry keeps the
    flag in step with the reservations that reference the room.
    """

    room_number: int = Field(frozen=True)
    room_type: RoomType = Field(frozen=True)
    base_rate: Decimal
    billing_policy: BillingPolicy = BillingPolicy.REGULAR
    max_guests: int = Field(frozen=True)
    is_available: bool = True

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("base_rate", mode="before")
    @classmethod
    def parse_base_rate(cls, v):
        """Store rates as two-decimal amounts."""
        if isinstance(v, (Decimal, int, float, str)):
            return to_amount(v)
        return v

    @classmethod
    def create(
        cls,
        room_number: int,
        room_type: RoomType,
        base_rate: Decimal | int | float | str,
        billing_policy: BillingPolicy = BillingPolicy.REGULAR,
        max_guests: Optional[int] = None,
    ) -> "Room":
        """Create an available room.

        ``max_guests`` falls back to the room type's canonical capacity.
        """
        if max_guests is None:
            max_guests = room_type.default_max_guests
        return cls(
            room_number=room_number,
            room_type=room_type,
            base_rate=base_rate,
            billing_policy=billing_policy,
            max_guests=max_guests,
        )

    def set_rate(self, base_rate: Decimal | int | float | str) -> None:
        self.base_rate = base_rate

    def set_billing_policy(self, billing_policy: BillingPolicy) -> None:
        self.billing_policy = billing_policy

    def set_availability(self, is_available: bool) -> None:
        self.is_available = is_available

    def compute_bill(self, nights: int) -> Decimal:
        """Bill ``nights`` at this room's rate under its billing policy.

        Raises:
            InvalidArgumentError: If nights is not positive
        """
        return self.billing_policy.compute(self.base_rate, nights)

    def summary(self) -> AvailableRoom:
        return AvailableRoom(
            room_number=self.room_number,
            room_type=self.room_type,
            base_rate=self.base_rate,
            billing_policy=self.billing_policy,
            max_guests=self.max_guests,
        )

    def snapshot(self) -> RoomSnapshot:
        return RoomSnapshot(
            room_number=self.room_number,
            room_type=self.room_type,
            base_rate=self.base_rate,
            billing_policy=self.billing_policy,
            max_guests=self.max_guests,
            is_available=self.is_available,
        )
