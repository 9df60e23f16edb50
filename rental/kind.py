"""VehicleKind enum - the variant tag carried by every vehicle."""

from enum import Enum


class VehicleKind(Enum):
    """Vehicle variants. Value is the type name used in fleet files."""

    CAR = "car"
    MOTORCYCLE = "motorcycle"
    TRUCK = "truck"

    @property
    def label(self) -> str:
        """Display name, e.g. 'Car'."""
        return self.value.capitalize()
