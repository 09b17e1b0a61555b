"""
Booking registry for trains, bookings and per-route seat inventory.

This module implements the bookkeeping behind the interactive menu:
- Registering trains and resetting their route's seat pool
- Booking and cancelling seats against a route
- Querying remaining seats and the running booking total
- Saving booking summaries to, and replaying them from, a text file
"""

import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Union

from ..models.passenger import PassengerModel, BookingModel
from ..models.train import TrainModel
from ..utils.config import DEFAULT_SEAT_CAPACITY
from . import booking_file
from .exceptions import (
    SeatsUnavailableError,
    BookingNotFoundError,
    RouteNotFoundError,
)

logger = logging.getLogger(__name__)


def _route_key(route: str) -> str:
    return route.casefold()


class BookingRegistry:
    """
    In-memory train booking registry.

    Features:
    - Append-only train list, searched by route case-insensitively
    - Ordered active bookings, removed on cancellation
    - One seat pool per route, reset to capacity whenever a train is added
    - Running total of successful bookings, never decremented
    """

    def __init__(self, seat_capacity: int = DEFAULT_SEAT_CAPACITY):
        """
        Initialize an empty registry.

        Args:
            seat_capacity: Seats made available on a route when a train is added
        """
        if seat_capacity < 1:
            raise ValueError(f"Seat capacity must be positive: {seat_capacity}")

        self.seat_capacity = seat_capacity
        self.trains: List[TrainModel] = []
        self.bookings: List[BookingModel] = []
        self._seats_by_route: Dict[str, int] = {}
        self.total_bookings = 0

    def add_train(self, train: TrainModel) -> None:
        """Register a train and (re)set its route's seat pool to capacity."""
        self.trains.append(train)
        self._seats_by_route[_route_key(train.route)] = self.seat_capacity
        logger.info(f"Added train {train.name!r} on route {train.route!r} "
                    f"({self.seat_capacity} seats)")

    def iter_train_details(self) -> Iterator[str]:
        """Yield train descriptions in the order trains were added."""
        for train in self.trains:
            yield train.describe()

    def find_train_by_route(self, route: str) -> Optional[TrainModel]:
        """Return the first train whose route matches, ignoring case."""
        key = _route_key(route)
        for train in self.trains:
            if _route_key(train.route) == key:
                return train
        return None

    def book_ticket(self, name: str, age: int, seat_type: str, route: str) -> BookingModel:
        """
        Book one seat on the first train serving a route.

        Args:
            name: Passenger name
            age: Passenger age
            seat_type: Seat preference, free-form
            route: Route label, matched case-insensitively

        Returns:
            BookingModel: The new booking

        Raises:
            SeatsUnavailableError: If no train serves the route or it is sold out
        """
        train = self.find_train_by_route(route)
        key = _route_key(route)
        if train is None or self._seats_by_route.get(key, 0) <= 0:
            logger.warning(f"Booking refused for {name!r} on route {route!r}: "
                           f"{'no train' if train is None else 'sold out'}")
            raise SeatsUnavailableError("No seats available for this route.")

        passenger = PassengerModel(name=name, age=age, seat_type=seat_type)
        booking = BookingModel(passenger=passenger, train=train)
        self.bookings.append(booking)
        self._seats_by_route[key] -= 1
        self.total_bookings += 1

        logger.info(f"Booked {name!r} on {train.name!r} ({train.route}), "
                    f"{self._seats_by_route[key]} seats left")
        return booking

    def cancel_ticket(self, name: str, route: str) -> BookingModel:
        """
        Cancel the earliest booking matching a passenger name and route.

        The name is compared case-insensitively. The route only has to appear
        somewhere in the booking's rendered description.

        Returns:
            BookingModel: The removed booking

        Raises:
            BookingNotFoundError: If no booking matches
        """
        wanted = name.casefold()
        for index, booking in enumerate(self.bookings):
            if booking.passenger.name.casefold() == wanted and route in booking.describe():
                del self.bookings[index]
                key = _route_key(booking.train.route)
                self._seats_by_route[key] = self._seats_by_route.get(key, 0) + 1
                logger.info(f"Cancelled booking for {booking.passenger.name!r} on "
                            f"{booking.train.route!r}")
                return booking

        logger.warning(f"No booking found for {name!r} on route {route!r}")
        raise BookingNotFoundError("No booking found for the given details.")

    def iter_booking_details(self) -> Iterator[str]:
        """Yield descriptions of active bookings in booking order."""
        for booking in self.bookings:
            yield booking.describe()

    def seats_remaining(self, route: str) -> int:
        """
        Remaining seats on a route.

        Raises:
            RouteNotFoundError: If no train has been added for the route
        """
        key = _route_key(route)
        if key not in self._seats_by_route:
            raise RouteNotFoundError("No train found for this route.")
        return self._seats_by_route[key]

    def save_bookings(self, destination: Union[str, Path]) -> int:
        """Write active booking descriptions to a file. Returns the line count."""
        return booking_file.save_bookings(self.iter_booking_details(), destination)

    def load_bookings(self, source: Union[str, Path]) -> List[str]:
        """Replay a booking file's lines. Registry state is not touched."""
        return booking_file.load_bookings(source)
