"""
Error types raised by the rental model.

Every error carries a ``message`` with a sensible default so callers can
show it directly.
"""

from typing import Optional


class RentalError(Exception):
    """Base class for all rental errors."""

    default_message = "Error: rental operation failed"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class InvalidArgumentError(RentalError, ValueError):
    """Raised for bad construction input, bad day counts or malformed fleet entries."""

    default_message = "Invalid argument"


class InvalidStateError(RentalError):
    """Raised when a vehicle is rented while already out."""

    default_message = "Vehicle is not available"


class VehicleNotFoundError(RentalError, LookupError):
    """Raised when a vehicle ID is not in the fleet."""

    default_message = "Vehicle not found"
