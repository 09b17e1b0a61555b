"""
Environment configuration loader with validation for the train booking manager.
"""

import os
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, field_validator
from dotenv import load_dotenv


DEFAULT_SEAT_CAPACITY = 100


class TrainbookConfig(BaseModel):
    """Configuration model for the train booking manager with validation."""

    # Seat inventory
    seat_capacity: int = Field(
        default=DEFAULT_SEAT_CAPACITY, ge=1, description="Seats available per route"
    )

    # Persistence
    bookings_file: str = Field(
        default="bookings.txt", description="Default file offered by save/load"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("bookings_file")
    @classmethod
    def validate_bookings_file(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Bookings file name cannot be empty")
        return v


def load_config(env_file: Optional[str] = None) -> TrainbookConfig:
    """
    Load configuration from environment variables and .env file.

    Args:
        env_file: Optional path to .env file. If None, looks for .env in current directory.

    Returns:
        TrainbookConfig: Validated configuration object

    Raises:
        ValueError: If configuration is invalid
    """
    if env_file is None:
        env_file = ".env"

    if os.path.exists(env_file):
        load_dotenv(env_file)

    config_data: Dict[str, Any] = {
        "seat_capacity": os.getenv("TRAINBOOK_SEAT_CAPACITY", str(DEFAULT_SEAT_CAPACITY)),
        "bookings_file": os.getenv("TRAINBOOK_BOOKINGS_FILE", "bookings.txt"),
        "log_level": os.getenv("TRAINBOOK_LOG_LEVEL", "WARNING"),
    }

    try:
        return TrainbookConfig(**config_data)
    except Exception as e:
        raise ValueError(f"Configuration validation failed: {e}")
