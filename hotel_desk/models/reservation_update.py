"""Changes that can be applied to an existing reservation."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class ChangeGuestCount(BaseModel):
    """Change the number of guests; capacity is re-checked."""

    kind: Literal["guests"] = "guests"
    number_of_guests: int

    model_config = ConfigDict(frozen=True)


class ChangeRoom(BaseModel):
    """Move the reservation to another room."""

    kind: Literal["room"] = "room"
    room_number: int

    model_config = ConfigDict(frozen=True)


class ChangeDates(BaseModel):
    """Overwrite the stay dates without validation."""

    kind: Literal["dates"] = "dates"
    check_in: str
    check_out: str

    model_config = ConfigDict(frozen=True)


ReservationUpdate = Annotated[
    Union[ChangeGuestCount, ChangeRoom, ChangeDates],
    Field(discriminator="kind"),
]
