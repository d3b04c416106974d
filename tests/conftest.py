import logging

import pytest
import structlog

from hotel_desk.models import BillingPolicy, RoomType
from hotel_desk.services import HotelRegistry


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams that CliRunner closes."""
    yield
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def registry():
    """Empty registry counting nights on the fixed month table."""
    return HotelRegistry(nights_mode="fixed_table")


@pytest.fixture
def stocked_registry(registry):
    """Registry with one room of each type."""
    registry.add_room(101, RoomType.SINGLE, "100.00", BillingPolicy.REGULAR)
    registry.add_room(102, RoomType.DOUBLE, "150.00", BillingPolicy.PREMIUM)
    registry.add_room(201, RoomType.DELUXE, "250.00", BillingPolicy.CORPORATE)
    registry.add_room(301, RoomType.SUITE, "400.00", BillingPolicy.REGULAR)
    return registry


def assert_consistent(registry: HotelRegistry) -> None:
    """Every room is unavailable iff exactly one reservation holds it."""
    assert registry.find_inconsistent_rooms() == []
    held = [r.room_number for r in registry.list_reservations()]
    for room in registry.list_all_rooms():
        assert room.is_available == (held.count(room.room_number) == 0)
        assert held.count(room.room_number) <= 1
