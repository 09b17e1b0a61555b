"""
Train Pydantic model for the train booking application.

A train is an immutable fare record. Standard and Luxury services share one
model tagged by `TrainKind`; only Luxury trains may carry a surcharge.
"""

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict, model_validator

from .enums import TrainKind


class TrainModel(BaseModel):
    """
    Train service registered with the booking registry.

    The route is a free-form label such as 'A-B' and is the key used for
    seat inventory and booking lookups.
    """
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Train name")
    route: str = Field(..., description="Route label (e.g., 'A-B')")
    schedule: str = Field(..., description="Departure schedule (e.g., '10:00 AM')")
    base_price: Decimal = Field(..., ge=0, decimal_places=2, description="Base fare")
    kind: TrainKind = Field(default=TrainKind.STANDARD, description="Service variant")
    luxury_surcharge: Decimal = Field(
        default=Decimal("0"), ge=0, decimal_places=2, description="Flat surcharge (Luxury only)"
    )

    @model_validator(mode="after")
    def check_surcharge(self) -> "TrainModel":
        """Standard trains never carry a surcharge."""
        if self.kind is TrainKind.STANDARD and self.luxury_surcharge != 0:
            raise ValueError("Standard trains cannot have a luxury surcharge")
        return self

    @classmethod
    def standard(cls, name: str, route: str, schedule: str, price) -> "TrainModel":
        return cls(name=name, route=route, schedule=schedule, base_price=price)

    @classmethod
    def luxury(
        cls, name: str, route: str, schedule: str, price, surcharge
    ) -> "TrainModel":
        return cls(
            name=name,
            route=route,
            schedule=schedule,
            base_price=price,
            kind=TrainKind.LUXURY,
            luxury_surcharge=surcharge,
        )

    def effective_price(self) -> Decimal:
        """Fare charged per seat: base price plus any luxury surcharge."""
        if self.kind is TrainKind.LUXURY:
            return self.base_price + self.luxury_surcharge
        return self.base_price

    def describe(self) -> str:
        """Render the train as a single human-readable line."""
        return (
            f"Train Name: {self.name}, Route: {self.route}, {self.kind.label}, "
            f"Schedule: {self.schedule}, Price: ${self.effective_price():.2f}"
        )
