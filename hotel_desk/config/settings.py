"""Application settings and configuration management."""
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class HotelSettings(BaseSettings):
    """Front desk identity and startup catalog."""

    name: str = "Hotel Desk"
    currency_code: str = "PHP"  # Shown next to amounts, no conversion
    seed_sample_rooms: bool = False  # Load the demo catalog on startup

    model_config = SettingsConfigDict(env_prefix="HOTEL_")


class NightsSettings(BaseSettings):
    """Night counting configuration.

    fixed_table: 365-day years with the fixed month-length table (default)
    calendar: real Gregorian dates, leap years included
    """

    mode: Literal["fixed_table", "calendar"] = "fixed_table"

    model_config = SettingsConfigDict(env_prefix="NIGHTS_")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "console"] = "console"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    hotel: HotelSettings = HotelSettings()
    nights: NightsSettings = NightsSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
