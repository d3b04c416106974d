"""Main entry point for the hotel desk application."""

import sys

import click

from hotel_desk import __version__
from hotel_desk.cli import MenuShell
from hotel_desk.config import configure_logging, get_logger, settings
from hotel_desk.services import HotelRegistry, load_sample_rooms

logger = get_logger(__name__)


@click.command()
@click.version_option(version=__version__)
@click.option(
    "--sample-rooms/--no-sample-rooms",
    default=None,
    help="Start with the demo room catalog (default: HOTEL_SEED_SAMPLE_ROOMS).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    help="Override LOG_LEVEL for this session.",
)
def main(sample_rooms: bool | None, log_level: str | None) -> None:
    """Hotel front desk: manage rooms, reservations and bills."""
    configure_logging(log_level)

    registry = HotelRegistry()
    if sample_rooms is None:
        sample_rooms = settings.hotel.seed_sample_rooms
    if sample_rooms:
        load_sample_rooms(registry)

    logger.info(
        "Starting hotel desk",
        environment=settings.environment,
        nights_mode=registry.nights_mode,
        rooms=registry.room_count,
    )
    MenuShell(registry).run()


if __name__ == "__main__":
    sys.exit(main())
