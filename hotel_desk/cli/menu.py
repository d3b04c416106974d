"""Interactive text menu driving the hotel registry."""

from decimal import Decimal, InvalidOperation
from typing import Callable

import click
from structlog import get_logger

from hotel_desk.cli.tables import (
    render_details,
    render_reservations,
    render_rooms,
)
from hotel_desk.config import settings
from hotel_desk.exceptions import HotelDeskError
from hotel_desk.models.billing_policy import BillingPolicy, RoomType, to_amount
from hotel_desk.models.operation_result import OperationResult
from hotel_desk.models.reservation_update import (
    ChangeDates,
    ChangeGuestCount,
    ChangeRoom,
)
from hotel_desk.models.stay_date import StayDate
from hotel_desk.services.hotel_registry import HotelRegistry
from hotel_desk.services.night_counter import NightCounter

logger = get_logger(__name__)


class AmountType(click.ParamType):
    """Non-negative currency amount with at most two decimals shown."""

    name = "amount"

    def convert(self, value, param, ctx):
        if isinstance(value, Decimal):
            return value
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} is not a valid amount", param, ctx)
        if not amount.is_finite() or amount < 0:
            self.fail(f"{value!r} is not a valid amount", param, ctx)
        try:
            return to_amount(amount)
        except HotelDeskError:
            self.fail(f"{value!r} is too large an amount", param, ctx)


AMOUNT = AmountType()


def _choose(label: str, options: list) -> object:
    """Prompt for one entry of a numbered list of enum members."""
    for index, option in enumerate(options, start=1):
        click.echo(f"  {index}. {option.value}")
    choice = click.prompt(label, type=click.IntRange(1, len(options)))
    return options[choice - 1]


class MenuShell:
    """Numbered menu loop over a HotelRegistry.

    Handles prompting, parsing and rendering only; every decision about
    rooms and reservations is left to the registry.
    """

    def __init__(self, registry: HotelRegistry):
        self.registry = registry
        self.currency_code = settings.hotel.currency_code
        self.actions: dict[int, tuple[str, Callable[[], None]]] = {
            1: ("Add room", self.add_room),
            2: ("Delete room", self.delete_room),
            3: ("Update room rate", self.update_room_rate),
            4: ("Update room billing policy", self.update_billing_policy),
            5: ("View available rooms", self.view_available_rooms),
            6: ("View all rooms", self.view_all_rooms),
            7: ("Make reservation", self.make_reservation),
            8: ("Cancel reservation", self.cancel_reservation),
            9: ("View reservation details", self.view_reservation_details),
            10: ("Update reservation", self.update_reservation),
            11: ("View all reservations", self.view_all_reservations),
        }

    def run(self) -> None:
        """Show the menu until the user picks 0."""
        click.echo(f"=== {settings.hotel.name} ===")
        while True:
            click.echo("")
            for number, (label, _) in self.actions.items():
                click.echo(f"{number:>2}. {label}")
            click.echo(" 0. Exit")

            choice = click.prompt("Enter your choice", type=click.IntRange(0, len(self.actions)))
            if choice == 0:
                click.echo("Goodbye.")
                return

            label, action = self.actions[choice]
            try:
                action()
            except HotelDeskError as e:
                logger.info("Operation rejected", operation=label, error=str(e))
                click.echo(f"Error: {e}")

    # Rooms

    def add_room(self) -> None:
        room_number = click.prompt("Room number", type=int)
        if self.registry.has_room(room_number):
            click.echo(f"Room {room_number} already exists. Choose a unique number.")
            return
        room_type = _choose("Room type", list(RoomType))
        base_rate = click.prompt("Base rate per night", type=AMOUNT)
        billing_policy = _choose("Billing policy", list(BillingPolicy))
        self._report(
            self.registry.add_room(room_number, room_type, base_rate, billing_policy)
        )

    def delete_room(self) -> None:
        room_number = click.prompt("Room number to delete", type=int)
        self._report(self.registry.delete_room(room_number))

    def update_room_rate(self) -> None:
        room_number = click.prompt("Room number", type=int)
        base_rate = click.prompt("New base rate per night", type=AMOUNT)
        self._report(self.registry.update_room_rate(room_number, base_rate))

    def update_billing_policy(self) -> None:
        room_number = click.prompt("Room number", type=int)
        billing_policy = _choose("Billing policy", list(BillingPolicy))
        self._report(self.registry.update_room_billing_policy(room_number, billing_policy))

    def view_available_rooms(self) -> None:
        click.echo(render_rooms(self.registry.list_available_rooms()))

    def view_all_rooms(self) -> None:
        click.echo(render_rooms(self.registry.list_all_rooms(), with_status=True))

    # Reservations

    def make_reservation(self) -> None:
        guest_name = click.prompt("Guest name")
        contact_info = click.prompt("Contact info")
        room_number = click.prompt("Room number", type=int)
        check_in, check_out = self._prompt_stay_dates()
        guests = click.prompt("Number of guests", type=click.IntRange(min=1))
        self._report(
            self.registry.make_reservation(
                guest_name, contact_info, room_number, check_in, check_out, guests
            )
        )

    def cancel_reservation(self) -> None:
        reservation_id = click.prompt("Reservation ID", type=int)
        self._report(self.registry.cancel_reservation(reservation_id))

    def view_reservation_details(self) -> None:
        reservation_id = click.prompt("Reservation ID", type=int)
        result = self.registry.view_reservation_details(reservation_id)
        if result.details is None:
            self._report(result)
            return
        click.echo(render_details(result.details, self.currency_code))

    def update_reservation(self) -> None:
        reservation_id = click.prompt("Reservation ID", type=int)
        if self.registry.get_reservation(reservation_id) is None:
            click.echo(f"Reservation {reservation_id} not found")
            return

        click.echo("  1. Change number of guests")
        click.echo("  2. Change room")
        click.echo("  3. Change dates")
        choice = click.prompt("Update", type=click.IntRange(1, 3))
        if choice == 1:
            guests = click.prompt("New number of guests", type=click.IntRange(min=1))
            action = ChangeGuestCount(number_of_guests=guests)
        elif choice == 2:
            action = ChangeRoom(room_number=click.prompt("New room number", type=int))
        else:
            check_in, check_out = self._prompt_stay_dates()
            action = ChangeDates(check_in=check_in, check_out=check_out)
        self._report(self.registry.update_reservation(reservation_id, action))

    def view_all_reservations(self) -> None:
        click.echo(render_reservations(self.registry.list_reservations()))

    # Helpers

    def _prompt_stay_dates(self) -> tuple[str, str]:
        """Prompt until both dates parse and check-out follows check-in."""
        while True:
            check_in = self._prompt_date("Check-in date (DD/MM/YYYY)")
            check_out = self._prompt_date("Check-out date (DD/MM/YYYY)")
            try:
                NightCounter.count(check_in, check_out, self.registry.nights_mode)
            except HotelDeskError as e:
                click.echo(f"Error: {e}")
                continue
            return str(check_in), str(check_out)

    @staticmethod
    def _prompt_date(label: str) -> StayDate:
        while True:
            text = click.prompt(label)
            try:
                return StayDate.parse(text)
            except HotelDeskError as e:
                click.echo(f"Error: {e}")

    @staticmethod
    def _report(result: OperationResult) -> None:
        click.echo(result.message)
