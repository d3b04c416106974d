"""Demo room catalog loaded when HOTEL_SEED_SAMPLE_ROOMS is set."""

from structlog import get_logger

from hotel_desk.models.billing_policy import BillingPolicy, RoomType
from hotel_desk.services.hotel_registry import HotelRegistry

logger = get_logger(__name__)

SAMPLE_ROOMS: list[tuple[int, RoomType, str, BillingPolicy]] = [
    (101, RoomType.SINGLE, "1500.00", BillingPolicy.REGULAR),
    (102, RoomType.SINGLE, "1500.00", BillingPolicy.CORPORATE),
    (201, RoomType.DOUBLE, "2500.00", BillingPolicy.REGULAR),
    (202, RoomType.DOUBLE, "2500.00", BillingPolicy.PREMIUM),
    (301, RoomType.DELUXE, "4200.00", BillingPolicy.PREMIUM),
    (401, RoomType.SUITE, "7800.00", BillingPolicy.CORPORATE),
]


def load_sample_rooms(registry: HotelRegistry) -> int:
    """Add the demo rooms that are not in the registry yet.

    Returns:
        Number of rooms added
    """
    added = 0
    for room_number, room_type, base_rate, billing_policy in SAMPLE_ROOMS:
        if registry.add_room(room_number, room_type, base_rate, billing_policy).success:
            added += 1
    logger.info("Sample rooms loaded", added=added, total=len(SAMPLE_ROOMS))
    return added
