"""Reservation model."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from hotel_desk.models.billing_policy import BillingPolicy, RoomType


class Reservation(BaseModel):
    """A guest booking against one room for a date range.

    The room is referenced by number only. The mutators below do not check
    capacity or availability; HotelRegistry does that before calling them.
    """

    reservation_id: int = Field(frozen=True, gt=0)
    guest_name: str
    contact_info: str
    room_number: int
    check_in: str = Field(description="Check-in date, DD/MM/YYYY")
    check_out: str = Field(description="Check-out date, DD/MM/YYYY")
    number_of_guests: int

    model_config = ConfigDict(validate_assignment=True)

    @classmethod
    def create(
        cls,
        reservation_id: int,
        guest_name: str,
        contact_info: str,
        room_number: int,
        check_in: str,
        check_out: str,
        number_of_guests: int,
    ) -> "Reservation":
        """Create a reservation with an id issued by the registry counter."""
        return cls(
            reservation_id=reservation_id,
            guest_name=guest_name,
            contact_info=contact_info,
            room_number=room_number,
            check_in=check_in,
            check_out=check_out,
            number_of_guests=number_of_guests,
        )

    def update_guests(self, number_of_guests: int) -> None:
        self.number_of_guests = number_of_guests

    def update_dates(self, check_in: str, check_out: str) -> None:
        self.check_in = check_in
        self.check_out = check_out

    def update_room_number(self, room_number: int) -> None:
        self.room_number = room_number


class ReservationDetails(BaseModel):
    """Reservation joined with its room and the computed bill."""

    reservation_id: int
    guest_name: str
    contact_info: str
    room_number: int
    room_type: RoomType
    billing_policy: BillingPolicy
    base_rate: Decimal
    check_in: str
    check_out: str
    number_of_guests: int
    nights: int
    total_bill: Decimal

    model_config = ConfigDict(frozen=True)
