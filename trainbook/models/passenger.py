"""
Passenger and booking Pydantic models for the train booking application.

A booking pairs the passenger it owns with a reference to a train held by
the registry. Both render to the line format written to booking files.
"""

from pydantic import BaseModel, Field, ConfigDict

from .train import TrainModel


class PassengerModel(BaseModel):
    """Passenger details captured at booking time."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Passenger name")
    age: int = Field(..., description="Passenger age")
    seat_type: str = Field(..., description="Seat preference (e.g., 'Window', 'Aisle')")

    def describe(self) -> str:
        return f"Name: {self.name}, Age: {self.age}, Seat Type: {self.seat_type}"


class BookingModel(BaseModel):
    """
    Confirmed booking of one seat on one train.

    The train is shared with the registry, not copied per booking.
    """
    model_config = ConfigDict(frozen=True)

    passenger: PassengerModel
    train: TrainModel

    def describe(self) -> str:
        """Passenger details followed by the booked train's details."""
        return f"{self.passenger.describe()}, Train: {self.train.describe()}"
