"""
Enums for the train booking application.
"""

from enum import Enum


class TrainKind(str, Enum):
    """Train service variants. Luxury trains carry a flat surcharge."""
    STANDARD = "standard"
    LUXURY = "luxury"

    @property
    def label(self) -> str:
        """Label used in rendered train details (e.g. 'Luxury Train')."""
        return f"{self.value.capitalize()} Train"
