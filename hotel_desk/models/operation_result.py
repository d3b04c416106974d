"""Outcome of a registry operation."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict

from hotel_desk.models.reservation import ReservationDetails


class OperationStatus(str, Enum):
    """Why a registry operation did or did not apply.

    Anything other than OK means the registry was left unchanged.
    """

    OK = "ok"
    NOT_FOUND = "not_found"
    CAPACITY_EXCEEDED = "capacity_exceeded"
    ROOM_UNAVAILABLE = "room_unavailable"
    ALREADY_EXISTS = "already_exists"
    ROOM_IN_USE = "room_in_use"


class OperationResult(BaseModel):
    """Status plus a human-readable message for the shell to print."""

    status: OperationStatus
    message: str
    reservation_id: Optional[int] = None
    details: Optional[ReservationDetails] = None

    model_config = ConfigDict(frozen=True)

    @property
    def success(self) -> bool:
        return self.status == OperationStatus.OK

    @classmethod
    def ok(cls, message: str, **kwargs) -> "OperationResult":
        return cls(status=OperationStatus.OK, message=message, **kwargs)

    @classmethod
    def fail(cls, status: OperationStatus, message: str) -> "OperationResult":
        return cls(status=status, message=message)
