"""
Train booking Pydantic models package.

This package contains the immutable records the booking registry works
with: trains, passengers and bookings.
"""

# Enums
from .enums import TrainKind

# Core models
from .train import TrainModel

from .passenger import (
    PassengerModel,
    BookingModel,
)

__all__ = [
    # Enums
    "TrainKind",

    # Core models
    "TrainModel",
    "PassengerModel",
    "BookingModel",
]
