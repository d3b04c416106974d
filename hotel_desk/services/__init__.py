"""Business services package."""

from hotel_desk.services.hotel_registry import HotelRegistry
from hotel_desk.services.night_counter import NightCounter, count_nights
from hotel_desk.services.sample_catalog import load_sample_rooms

__all__ = [
    "HotelRegistry",
    "NightCounter",
    "count_nights",
    "load_sample_rooms",
]
