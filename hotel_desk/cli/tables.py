"""Fixed-width text tables for the menu."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from hotel_desk.models.reservation import Reservation, ReservationDetails
from hotel_desk.models.room import AvailableRoom, RoomSnapshot


def format_amount(amount: Decimal, currency_code: str = "") -> str:
    text = f"{amount:,.2f}"
    return f"{currency_code} {text}" if currency_code else text


def render_table(headers: Sequence[str], rows: Iterable[Sequence[str]]) -> str:
    """Render rows under headers, each column padded to its widest cell."""
    rows = [list(map(str, row)) for row in rows]
    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    def line(cells: Sequence[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells)).rstrip()

    separator = "-+-".join("-" * w for w in widths)
    return "\n".join([line(headers), separator, *(line(row) for row in rows)])


def render_rooms(rooms: Iterable[AvailableRoom | RoomSnapshot], with_status: bool = False) -> str:
    headers = ["Room", "Type", "Rate", "Billing", "Max Guests"]
    if with_status:
        headers.append("Status")

    rows = []
    for room in rooms:
        row = [
            str(room.room_number),
            room.room_type.value,
            format_amount(room.base_rate),
            room.billing_policy.label,
            str(room.max_guests),
        ]
        if with_status:
            row.append("Available" if room.is_available else "Occupied")
        rows.append(row)

    if not rows:
        return "No rooms to show."
    return render_table(headers, rows)


def render_reservations(reservations: Iterable[Reservation]) -> str:
    headers = ["ID", "Guest", "Contact", "Room", "Check-in", "Check-out", "Guests"]
    rows = [
        [
            str(r.reservation_id),
            r.guest_name,
            r.contact_info,
            str(r.room_number),
            r.check_in,
            r.check_out,
            str(r.number_of_guests),
        ]
        for r in reservations
    ]
    if not rows:
        return "No reservations to show."
    return render_table(headers, rows)


def render_details(details: ReservationDetails, currency_code: str = "") -> str:
    fields = [
        ("Reservation ID", str(details.reservation_id)),
        ("Guest", details.guest_name),
        ("Contact", details.contact_info),
        ("Room", f"{details.room_number} ({details.room_type.value})"),
        ("Check-in", details.check_in),
        ("Check-out", details.check_out),
        ("Guests", str(details.number_of_guests)),
        ("Nights", str(details.nights)),
        ("Rate", format_amount(details.base_rate, currency_code)),
        ("Billing", details.billing_policy.label),
        ("Total bill", format_amount(details.total_bill, currency_code)),
    ]
    width = max(len(label) for label, _ in fields)
    return "\n".join(f"{label.ljust(width)} : {value}" for label, value in fields)
