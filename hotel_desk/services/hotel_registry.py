"""Registry owning every room and reservation of the hotel."""

import threading
from collections.abc import Iterator
from decimal import Decimal
from typing import Optional, get_args

from structlog import get_logger

from hotel_desk.config import settings
from hotel_desk.exceptions import InvalidArgumentError
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
from hotel_desk.services.night_counter import NightCounter, NightsMode

logger = get_logger(__name__)


def _validate_guests(number_of_guests: int) -> None:
    if number_of_guests < 1:
        raise InvalidArgumentError(
            f"Number of guests must be at least 1, got {number_of_guests}"
        )


def _validate_rate(base_rate: Decimal) -> None:
    if not base_rate.is_finite():
        raise InvalidArgumentError(f"Base rate must be a finite amount, got {base_rate}")
    if base_rate < 0:
        raise InvalidArgumentError(f"Base rate cannot be negative, got {base_rate}")


class HotelRegistry:
    """Owns all rooms and reservations and is their only mutator.

    Rooms are keyed by room number and reservations by id, both kept in
    insertion order. A room is unavailable exactly while one reservation
    references it. Every public operation runs under one re-entrant lock so
    check-then-act sequences (booking, moving rooms) cannot interleave.

    Operations that can be refused (unknown room, full room, capacity)
    return an OperationResult instead of raising; bad arguments raise
    InvalidArgumentError and bad date ranges raise InvalidDateRangeError.
    """

    def __init__(self, nights_mode: Optional[NightsMode] = None):
        """Initialize an empty registry.

        Args:
            nights_mode: Night counting mode. Defaults to ``settings.nights.mode``

        Raises:
            InvalidArgumentError: If the mode is not a known one
        """
        mode = nights_mode or settings.nights.mode
        if mode not in get_args(NightsMode):
            raise InvalidArgumentError(
                f"Unknown nights mode {mode!r}, expected one of {get_args(NightsMode)}"
            )
        self.nights_mode: NightsMode = mode
        self._rooms: dict[int, Room] = {}
        self._reservations: dict[int, Reservation] = {}
        self._next_reservation_id = 1
        self._lock = threading.RLock()

    # Rooms

    def add_room(
        self,
        room_number: int,
        room_type: RoomType,
        base_rate: Decimal | int | float | str,
        billing_policy: BillingPolicy = BillingPolicy.REGULAR,
        max_guests: Optional[int] = None,
    ) -> OperationResult:
        """Add a room to the catalog.

        Args:
            room_number: Caller-assigned room number, unique in the registry
            room_type: Room category
            base_rate: Nightly rate, not negative
            billing_policy: Fare rule for the room
            max_guests: Capacity; defaults to the room type's canonical one

        Returns:
            OK, or ALREADY_EXISTS if the number is taken

        Raises:
            InvalidArgumentError: If the rate is not a finite, non-negative amount
        """
        rate = to_amount(base_rate)
        _validate_rate(rate)

        with self._lock:
            if room_number in self._rooms:
                logger.warning("Room number already exists", room_number=room_number)
                return OperationResult.fail(
                    OperationStatus.ALREADY_EXISTS,
                    f"Room {room_number} already exists",
                )

            room = Room.create(room_number, room_type, rate, billing_policy, max_guests)
            self._rooms[room_number] = room

        logger.info(
            "Room added",
            room_number=room_number,
            room_type=room_type.value,
            base_rate=str(rate),
            billing_policy=billing_policy.value,
            max_guests=room.max_guests,
        )
        return OperationResult.ok(f"Room {room_number} added")

    def delete_room(self, room_number: int) -> OperationResult:
        """Remove a room.

        A room still referenced by a reservation is kept, so no reservation
        ever points at a missing room.

        Returns:
            OK, NOT_FOUND, or ROOM_IN_USE
        """
        with self._lock:
            if room_number not in self._rooms:
                return self._room_not_found(room_number)

            holders = [
                r.reservation_id
                for r in self._reservations.values()
                if r.room_number == room_number
            ]
            if holders:
                logger.warning(
                    "Refusing to delete reserved room",
                    room_number=room_number,
                    reservation_ids=holders,
                )
                return OperationResult.fail(
                    OperationStatus.ROOM_IN_USE,
                    f"Room {room_number} is held by reservation {holders[0]}; "
                    "cancel it first",
                )

            del self._rooms[room_number]

        logger.info("Room deleted", room_number=room_number)
        return OperationResult.ok(f"Room {room_number} deleted")

    def update_room_rate(
        self, room_number: int, base_rate: Decimal | int | float | str
    ) -> OperationResult:
        """Change a room's nightly rate.

        Raises:
            InvalidArgumentError: If the rate is not a finite, non-negative amount
        """
        rate = to_amount(base_rate)
        _validate_rate(rate)

        with self._lock:
            room = self._rooms.get(room_number)
            if room is None:
                return self._room_not_found(room_number)
            old_rate = room.base_rate
            room.set_rate(rate)

        logger.info(
            "Room rate updated",
            room_number=room_number,
            old_rate=str(old_rate),
            new_rate=str(rate),
        )
        return OperationResult.ok(f"Room {room_number} rate set to {rate}")

    def update_room_billing_policy(
        self, room_number: int, billing_policy: BillingPolicy
    ) -> OperationResult:
        """Replace a room's billing policy."""
        with self._lock:
            room = self._rooms.get(room_number)
            if room is None:
                return self._room_not_found(room_number)
            room.set_billing_policy(billing_policy)

        logger.info(
            "Room billing policy updated",
            room_number=room_number,
            billing_policy=billing_policy.value,
        )
        return OperationResult.ok(
            f"Room {room_number} billing policy set to {billing_policy.label}"
        )

    def get_room(self, room_number: int) -> Optional[RoomSnapshot]:
        with self._lock:
            room = self._rooms.get(room_number)
            return room.snapshot() if room else None

    def has_room(self, room_number: int) -> bool:
        with self._lock:
            return room_number in self._rooms

    def list_available_rooms(self) -> Iterator[AvailableRoom]:
        """Yield snapshots of bookable rooms in insertion order.

        Snapshots are taken when iteration starts; later changes to the
        registry do not show up in an iterator already started.
        """
        with self._lock:
            snapshots = [room.summary() for room in self._rooms.values() if room.is_available]
        yield from snapshots

    def list_all_rooms(self) -> Iterator[RoomSnapshot]:
        """Yield snapshots of every room, availability included."""
        with self._lock:
            snapshots = [room.snapshot() for room in self._rooms.values()]
        yield from snapshots

    @property
    def room_count(self) -> int:
        with self._lock:
            return len(self._rooms)

    # Reservations

    def make_reservation(
        self,
        guest_name: str,
        contact_info: str,
        room_number: int,
        check_in: str,
        check_out: str,
        number_of_guests: int,
    ) -> OperationResult:
        """Book a room.

        Lookup, capacity check, availability check and the availability
        flip happen under the registry lock.

        Args:
            guest_name: Name of the guest
            contact_info: Phone, email or similar free text
            room_number: Room to book
            check_in: Check-in date, DD/MM/YYYY
            check_out: Check-out date, DD/MM/YYYY
            number_of_guests: Party size, at least 1

        Returns:
            OK with the new reservation_id, or NOT_FOUND,
            CAPACITY_EXCEEDED or ROOM_UNAVAILABLE

        Raises:
            InvalidArgumentError: If number_of_guests is below 1
        """
        _validate_guests(number_of_guests)

        with self._lock:
            room = self._rooms.get(room_number)
            if room is None:
                return self._room_not_found(room_number)

            if number_of_guests > room.max_guests:
                return self._capacity_exceeded(room, number_of_guests)

            if not room.is_available:
                return self._room_unavailable(room)

            room.set_availability(False)
            reservation = Reservation.create(
                self._issue_reservation_id(),
                guest_name,
                contact_info,
                room_number,
                check_in,
                check_out,
                number_of_guests,
            )
            self._reservations[reservation.reservation_id] = reservation

        logger.info(
            "Reservation created",
            reservation_id=reservation.reservation_id,
            room_number=room_number,
            guests=number_of_guests,
            check_in=check_in,
            check_out=check_out,
        )
        return OperationResult.ok(
            f"Reservation {reservation.reservation_id} created for room {room_number}",
            reservation_id=reservation.reservation_id,
        )

    def cancel_reservation(self, reservation_id: int) -> OperationResult:
        """Cancel a reservation and free its room."""
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                return self._reservation_not_found(reservation_id)

            room = self._rooms.get(reservation.room_number)
            if room is not None:
                room.set_availability(True)
            else:
                logger.warning(
                    "Cancelled reservation referenced a missing room",
                    reservation_id=reservation_id,
                    room_number=reservation.room_number,
                )
            del self._reservations[reservation_id]

        logger.info(
            "Reservation cancelled",
            reservation_id=reservation_id,
            room_number=reservation.room_number,
        )
        return OperationResult.ok(
            f"Reservation {reservation_id} cancelled",
            reservation_id=reservation_id,
        )

    def view_reservation_details(self, reservation_id: int) -> OperationResult:
        """Compute the nights and bill of a reservation.

        Returns:
            OK with details, or NOT_FOUND

        Raises:
            InvalidArgumentError: If a stored date cannot be parsed
            InvalidDateRangeError: If check-out is not after check-in
        """
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                return self._reservation_not_found(reservation_id)
            room = self._rooms.get(reservation.room_number)
            if room is None:
                return self._room_not_found(reservation.room_number)
            reservation = reservation.model_copy()
            room = room.model_copy()

        nights = NightCounter.count(
            reservation.check_in, reservation.check_out, self.nights_mode
        )
        details = ReservationDetails(
            reservation_id=reservation.reservation_id,
            guest_name=reservation.guest_name,
            contact_info=reservation.contact_info,
            room_number=room.room_number,
            room_type=room.room_type,
            billing_policy=room.billing_policy,
            base_rate=room.base_rate,
            check_in=reservation.check_in,
            check_out=reservation.check_out,
            number_of_guests=reservation.number_of_guests,
            nights=nights,
            total_bill=room.compute_bill(nights),
        )
        return OperationResult.ok(
            f"Reservation {reservation_id}: {nights} night(s), total {details.total_bill}",
            reservation_id=reservation_id,
            details=details,
        )

    def update_reservation(
        self, reservation_id: int, action: ReservationUpdate
    ) -> OperationResult:
        """Apply a guest count, room or date change to a reservation.

        Refused changes leave the reservation and every room untouched.
        """
        if isinstance(action, ChangeGuestCount):
            return self.change_guest_count(reservation_id, action.number_of_guests)
        elif isinstance(action, ChangeRoom):
            return self.change_room(reservation_id, action.room_number)
        elif isinstance(action, ChangeDates):
            return self.change_dates(reservation_id, action.check_in, action.check_out)
        raise InvalidArgumentError(f"Unsupported reservation update: {action!r}")

    def change_guest_count(
        self, reservation_id: int, number_of_guests: int
    ) -> OperationResult:
        """Change the party size, within the current room's capacity.

        Raises:
            InvalidArgumentError: If number_of_guests is below 1
        """
        _validate_guests(number_of_guests)

        with self._lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                return self._reservation_not_found(reservation_id)

            room = self._rooms.get(reservation.room_number)
            if room is None:
                return self._room_not_found(reservation.room_number)

            if number_of_guests > room.max_guests:
                return self._capacity_exceeded(room, number_of_guests)

            reservation.update_guests(number_of_guests)

        logger.info(
            "Reservation guest count updated",
            reservation_id=reservation_id,
            guests=number_of_guests,
        )
        return OperationResult.ok(
            f"Reservation {reservation_id} now has {number_of_guests} guest(s)",
            reservation_id=reservation_id,
        )

    def change_room(self, reservation_id: int, room_number: int) -> OperationResult:
        """Move a reservation to another room.

        The new room must exist, fit the party and be available. The old
        room is freed and the new one occupied in one step.
        """
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                return self._reservation_not_found(reservation_id)

            if reservation.room_number == room_number:
                return OperationResult.ok(
                    f"Reservation {reservation_id} already holds room {room_number}",
                    reservation_id=reservation_id,
                )

            new_room = self._rooms.get(room_number)
            if new_room is None:
                return self._room_not_found(room_number)

            if reservation.number_of_guests > new_room.max_guests:
                return self._capacity_exceeded(new_room, reservation.number_of_guests)

            if not new_room.is_available:
                return self._room_unavailable(new_room)

            old_room_number = reservation.room_number
            old_room = self._rooms.get(old_room_number)
            if old_room is not None:
                old_room.set_availability(True)
            new_room.set_availability(False)
            reservation.update_room_number(room_number)

        logger.info(
            "Reservation moved",
            reservation_id=reservation_id,
            room_number=room_number,
            old_room_number=old_room_number,
        )
        return OperationResult.ok(
            f"Reservation {reservation_id} moved from room {old_room_number} "
            f"to room {room_number}",
            reservation_id=reservation_id,
        )

    def change_dates(
        self, reservation_id: int, check_in: str, check_out: str
    ) -> OperationResult:
        """Overwrite the stay dates. The range is checked when billing."""
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            if reservation is None:
                return self._reservation_not_found(reservation_id)
            reservation.update_dates(check_in, check_out)

        logger.info(
            "Reservation dates updated",
            reservation_id=reservation_id,
            check_in=check_in,
            check_out=check_out,
        )
        return OperationResult.ok(
            f"Reservation {reservation_id} dates set to {check_in} - {check_out}",
            reservation_id=reservation_id,
        )

    def get_reservation(self, reservation_id: int) -> Optional[Reservation]:
        with self._lock:
            reservation = self._reservations.get(reservation_id)
            return reservation.model_copy() if reservation else None

    def list_reservations(self) -> Iterator[Reservation]:
        """Yield copies of all reservations in booking order."""
        with self._lock:
            copies = [r.model_copy() for r in self._reservations.values()]
        yield from copies

    @property
    def reservation_count(self) -> int:
        with self._lock:
            return len(self._reservations)

    def find_inconsistent_rooms(self) -> list[int]:
        """Room numbers whose availability flag disagrees with the reservations.

        Empty while the registry is consistent.
        """
        with self._lock:
            holders: dict[int, int] = {}
            for reservation in self._reservations.values():
                holders[reservation.room_number] = holders.get(reservation.room_number, 0) + 1

            inconsistent = []
            for room in self._rooms.values():
                count = holders.get(room.room_number, 0)
                if room.is_available and count != 0:
                    inconsistent.append(room.room_number)
                elif not room.is_available and count != 1:
                    inconsistent.append(room.room_number)
            inconsistent.extend(n for n in holders if n not in self._rooms)
            return inconsistent

    # Helpers

    def _issue_reservation_id(self) -> int:
        reservation_id = self._next_reservation_id
        self._next_reservation_id += 1
        return reservation_id

    @staticmethod
    def _room_not_found(room_number: int) -> OperationResult:
        logger.warning("Room not found", room_number=room_number)
        return OperationResult.fail(
            OperationStatus.NOT_FOUND, f"Room {room_number} not found"
        )

    @staticmethod
    def _reservation_not_found(reservation_id: int) -> OperationResult:
        logger.warning("Reservation not found", reservation_id=reservation_id)
        return OperationResult.fail(
            OperationStatus.NOT_FOUND, f"Reservation {reservation_id} not found"
        )

    @staticmethod
    def _capacity_exceeded(room: Room, number_of_guests: int) -> OperationResult:
        logger.warning(
            "Room capacity exceeded",
            room_number=room.room_number,
            guests=number_of_guests,
            max_guests=room.max_guests,
        )
        return OperationResult.fail(
            OperationStatus.CAPACITY_EXCEEDED,
            f"Room {room.room_number} ({room.room_type.value}) holds at most "
            f"{room.max_guests} guest(s), requested {number_of_guests}",
        )

    @staticmethod
    def _room_unavailable(room: Room) -> OperationResult:
        logger.warning("Room not available", room_number=room.room_number)
        return OperationResult.fail(
            OperationStatus.ROOM_UNAVAILABLE,
            f"Room {room.room_number} is not available",
        )
