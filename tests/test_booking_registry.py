"""
Booking registry tests for seat inventory, booking and cancellation.

Exercises the registry directly, without the interactive menu.
"""

import pytest
from decimal import Decimal

from trainbook.models import TrainModel
from trainbook.services.booking_registry import BookingRegistry
from trainbook.services.exceptions import (
    SeatsUnavailableError,
    BookingNotFoundError,
    RouteNotFoundError,
)


@pytest.fixture
def registry():
    """Empty registry with the default seat capacity."""
    return BookingRegistry()


@pytest.fixture
def express():
    return TrainModel.standard('Express', 'A-B', '10:00', Decimal('50.0'))


@pytest.fixture
def royal():
    return TrainModel.luxury('Royal', 'C-D', '18:30', Decimal('100'), Decimal('25'))


class TestAddTrain:
    """Test train registration and seat pools."""

    def test_seats_start_at_capacity(self, registry, express, royal):
        """Test every added route gets 100 seats regardless of kind."""
        registry.add_train(express)
        registry.add_train(royal)
        assert registry.seats_remaining('A-B') == 100
        assert registry.seats_remaining('C-D') == 100

    def test_custom_capacity(self, express):
        """Test the registry honours a configured capacity."""
        registry = BookingRegistry(seat_capacity=3)
        registry.add_train(express)
        assert registry.seats_remaining('A-B') == 3

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            BookingRegistry(seat_capacity=0)

    def test_same_route_resets_seats(self, registry, express):
        """Test adding a second train on a route resets its seat count."""
        registry.add_train(express)
        registry.book_ticket('Alice', 30, 'Window', 'A-B')
        assert registry.seats_remaining('A-B') == 99

        registry.add_train(TrainModel.standard('Local', 'A-B', '12:00', Decimal('20')))
        assert registry.seats_remaining('A-B') == 100
        assert len(registry.trains) == 2

    def test_train_details_in_order(self, registry, express, royal):
        """Test train listing follows insertion order."""
        registry.add_train(express)
        registry.add_train(royal)
        details = list(registry.iter_train_details())
        assert details == [express.describe(), royal.describe()]

    def test_empty_train_listing(self, registry):
        assert list(registry.iter_train_details()) == []

    def test_find_train_ignores_case(self, registry, express):
        registry.add_train(express)
        assert registry.find_train_by_route('a-b') == express
        assert registry.find_train_by_route('X-Y') is None

    def test_find_train_returns_first_match(self, registry, express):
        registry.add_train(express)
        registry.add_train(TrainModel.standard('Local', 'A-B', '12:00', Decimal('20')))
        assert registry.find_train_by_route('A-B').name == 'Express'


class TestBookTicket:
    """Test seat booking."""

    def test_booking_consumes_seat(self, registry, express):
        """Test a successful booking decrements seats and counts the booking."""
        registry.add_train(express)
        booking = registry.book_ticket('Alice', 30, 'Window', 'A-B')

        assert booking.passenger.name == 'Alice'
        assert booking.train == express
        assert registry.seats_remaining('A-B') == 99
        assert registry.total_bookings == 1
        assert registry.bookings == [booking]

    def test_booking_route_ignores_case(self, registry, express):
        registry.add_train(express)
        registry.book_ticket('Alice', 30, 'Window', 'a-b')
        assert registry.seats_remaining('A-B') == 99

    def test_unknown_route_changes_nothing(self, registry, express):
        """Test booking against an unknown route fails with no state change."""
        registry.add_train(express)
        with pytest.raises(SeatsUnavailableError, match='No seats available'):
            registry.book_ticket('Alice', 30, 'Window', 'X-Y')

        assert registry.bookings == []
        assert registry.total_bookings == 0
        assert registry.seats_remaining('A-B') == 100

    def test_sold_out_route(self, express):
        """Test booking fails once a route's seats are exhausted."""
        registry = BookingRegistry(seat_capacity=2)
        registry.add_train(express)
        registry.book_ticket('Alice', 30, 'Window', 'A-B')
        registry.book_ticket('Bob', 41, 'Aisle', 'A-B')

        with pytest.raises(SeatsUnavailableError):
            registry.book_ticket('Carol', 25, 'Window', 'A-B')

        assert registry.seats_remaining('A-B') == 0
        assert registry.total_bookings == 2
        assert len(registry.bookings) == 2

    def test_no_passenger_validation(self, registry, express):
        """Test any age and seat type is accepted."""
        registry.add_train(express)
        booking = registry.book_ticket('Zed', -5, 'Standing', 'A-B')
        assert booking.passenger.age == -5
        assert booking.passenger.seat_type == 'Standing'

    def test_booking_details_in_order(self, registry, express, royal):
        registry.add_train(express)
        registry.add_train(royal)
        first = registry.book_ticket('Alice', 30, 'Window', 'A-B')
        second = registry.book_ticket('Bob', 41, 'Aisle', 'C-D')
        assert list(registry.iter_booking_details()) == [first.describe(), second.describe()]


class TestCancelTicket:
    """Test cancellation and its route matching."""

    def test_round_trip_scenario(self, registry, express):
        """Test add, book, cancel, cancel again."""
        registry.add_train(express)
        assert registry.seats_remaining('A-B') == 100

        registry.book_ticket('Alice', 30, 'Window', 'A-B')
        assert registry.seats_remaining('A-B') == 99
        assert registry.total_bookings == 1

        registry.cancel_ticket('Alice', 'A-B')
        assert registry.seats_remaining('A-B') == 100
        assert registry.total_bookings == 1
        assert registry.bookings == []

        with pytest.raises(BookingNotFoundError, match='No booking found'):
            registry.cancel_ticket('Alice', 'A-B')

    def test_name_ignores_case(self, registry, express):
        registry.add_train(express)
        registry.book_ticket('Alice', 30, 'Window', 'A-B')
        removed = registry.cancel_ticket('ALICE', 'A-B')
        assert removed.passenger.name == 'Alice'

    def test_removes_first_match_only(self, registry, express):
        """Test only the earliest matching booking is removed."""
        registry.add_train(express)
        registry.book_ticket('Alice', 30, 'Window', 'A-B')
        registry.book_ticket('Alice', 31, 'Aisle', 'A-B')

        removed = registry.cancel_ticket('alice', 'A-B')
        assert removed.passenger.age == 30
        assert len(registry.bookings) == 1
        assert registry.bookings[0].passenger.age == 31
        assert registry.seats_remaining('A-B') == 99

    def test_route_matches_as_substring(self, registry, express):
        """Test the route only needs to appear in the booking description."""
        registry.add_train(express)
        registry.book_ticket('Alice', 30, 'Window', 'A-B')

        registry.cancel_ticket('Alice', 'Express')
        assert registry.bookings == []
        assert registry.seats_remaining('A-B') == 100

    def test_route_match_is_case_sensitive(self, registry, express):
        """Test the route substring must match the train's route exactly in case."""
        registry.add_train(express)
        registry.book_ticket('Alice', 30, 'Window', 'a-b')

        with pytest.raises(BookingNotFoundError):
            registry.cancel_ticket('Alice', 'a-b')
        assert registry.seats_remaining('A-B') == 99

        registry.cancel_ticket('Alice', 'A-B')
        assert registry.seats_remaining('A-B') == 100

    def test_wrong_route_not_found(self, registry, express, royal):
        registry.add_train(express)
        registry.add_train(royal)
        registry.book_ticket('Alice', 30, 'Window', 'A-B')

        with pytest.raises(BookingNotFoundError):
            registry.cancel_ticket('Alice', 'C-D')
        assert len(registry.bookings) == 1
        assert registry.seats_remaining('C-D') == 100

    def test_wrong_name_not_found(self, registry, express):
        registry.add_train(express)
        registry.book_ticket('Alice', 30, 'Window', 'A-B')
        with pytest.raises(BookingNotFoundError):
            registry.cancel_ticket('Bob', 'A-B')
        assert registry.seats_remaining('A-B') == 99


class TestSeatQueries:
    """Test seat and total queries."""

    def test_unknown_route(self, registry):
        with pytest.raises(RouteNotFoundError, match='No train found'):
            registry.seats_remaining('X-Y')

    def test_seat_query_ignores_case(self, registry, express):
        registry.add_train(express)
        assert registry.seats_remaining('a-b') == 100

    def test_total_is_monotonic(self, registry, express):
        """Test cancellations never reduce the booking total."""
        registry.add_train(express)
        for name in ('Alice', 'Bob', 'Carol'):
            registry.book_ticket(name, 30, 'Window', 'A-B')
        registry.cancel_ticket('Bob', 'A-B')
        assert registry.total_bookings == 3
        assert registry.seats_remaining('A-B') == 98

    def test_totals_are_per_registry(self, express):
        """Test separate registries keep separate totals."""
        first = BookingRegistry()
        second = BookingRegistry()
        first.add_train(express)
        first.book_ticket('Alice', 30, 'Window', 'A-B')
        assert first.total_bookings == 1
        assert second.total_bookings == 0
