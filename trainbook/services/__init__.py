"""
Business logic services for the train booking manager.

This module contains the booking registry, its booking file persistence and
the exceptions both raise.
"""

from .booking_registry import BookingRegistry
from .booking_file import save_bookings, load_bookings
from .exceptions import (
    TrainbookError,
    SeatsUnavailableError,
    BookingNotFoundError,
    RouteNotFoundError,
    BookingFileError,
)

__all__ = [
    'BookingRegistry',
    'save_bookings',
    'load_bookings',
    'TrainbookError',
    'SeatsUnavailableError',
    'BookingNotFoundError',
    'RouteNotFoundError',
    'BookingFileError',
]
