"""Tests for settings and the logging processor."""

from hotel_desk.config.logging import add_booking_prefix
from hotel_desk.config.settings import HotelSettings, LoggingSettings, NightsSettings


def test_nights_mode_from_env(monkeypatch):
    """Test that NIGHTS_MODE selects the counting mode."""
    monkeypatch.setenv("NIGHTS_MODE", "calendar")

    assert NightsSettings().mode == "calendar"


def test_defaults(monkeypatch):
    """Test the interactive-friendly defaults."""
    for name in ("NIGHTS_MODE", "LOG_LEVEL", "LOG_FORMAT", "HOTEL_SEED_SAMPLE_ROOMS"):
        monkeypatch.delenv(name, raising=False)

    assert NightsSettings().mode == "fixed_table"
    assert LoggingSettings().level == "WARNING"
    assert HotelSettings().seed_sample_rooms is False


def test_booking_prefix():
    """Test that room and reservation ids prefix the event."""
    event = add_booking_prefix(None, "info", {"event": "Reservation created", "room_number": 101, "reservation_id": 3})

    assert event["event"] == "[room 101][res 3] Reservation created"


def test_booking_prefix_without_ids():
    """Test that other events are left alone."""
    event = add_booking_prefix(None, "info", {"event": "Starting"})

    assert event["event"] == "Starting"
