"""Hotel desk domain models."""

from hotel_desk.models.billing_policy import BillingPolicy, RoomType, to_amount
from hotel_desk.models.operation_result import OperationResult, OperationStatus
from hotel_desk.models.reservation import Reservation, ReservationDetails
from hotel_desk.models.reservation_update import (
    ChangeDates,
    ChangeGuestCount,
    ChangeRoom,
    ReservationUpdate,
)
from hotel_desk.models.room import AvailableRoom, Room, RoomSnapshot
from hotel_desk.models.stay_date import DAYS_IN_MONTH, StayDate

__all__ = [
    "BillingPolicy",
    "RoomType",
    "to_amount",
    "OperationResult",
    "OperationStatus",
    "Reservation",
    "ReservationDetails",
    "ChangeGuestCount",
    "ChangeRoom",
    "ChangeDates",
    "ReservationUpdate",
    "Room",
    "AvailableRoom",
    "RoomSnapshot",
    "StayDate",
    "DAYS_IN_MONTH",
]
