"""
Exceptions raised by the booking registry.

The interactive shell reports each of these as a message and keeps running.
"""


class TrainbookError(Exception):
    """Base class for booking registry failures."""
    pass


class SeatsUnavailableError(TrainbookError):
    """No train serves the route, or the route has no seats left."""
    pass


class BookingNotFoundError(TrainbookError):
    """No active booking matches the given passenger and route."""
    pass


class RouteNotFoundError(TrainbookError):
    """No seat inventory exists for the route."""
    pass


class BookingFileError(TrainbookError):
    """A booking file could not be written or read."""
    pass
