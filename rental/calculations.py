"""Helper functions for rental cost calculations."""

from typing import Union

from .errors import InvalidArgumentError
from .kind import VehicleKind

GPS_DAILY_SURCHARGE = 5.0
SIDECAR_DAILY_SURCHARGE = 10.0
CARGO_DAILY_RATE_PER_UNIT = 2.0

Feature = Union[bool, float, None]


def validate_days(days: int) -> int:
    """Return days unchanged if it is a positive whole number of days."""
    if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
        raise InvalidArgumentError(f"Rental days must be a positive integer, got {days!r}")
    return days


def calc_daily_surcharge(kind: VehicleKind, feature: Feature) -> float:
    """
    Per-day surcharge for a variant.

    - Car: flat GPS fee when fitted
    - Motorcycle: flat sidecar fee when fitted
    - Truck: charged per unit of cargo capacity
    """
    if kind is VehicleKind.CAR:
        return GPS_DAILY_SURCHARGE if feature else 0.0
    if kind is VehicleKind.MOTORCYCLE:
        return SIDECAR_DAILY_SURCHARGE if feature else 0.0
    if kind is VehicleKind.TRUCK:
        return (feature or 0.0) * CARGO_DAILY_RATE_PER_UNIT
    raise InvalidArgumentError(f"Unknown vehicle kind: {kind!r}")


def calc_rental_cost(
    kind: VehicleKind, base_rate: float, days: int, feature: Feature
) -> float:
    """Total cost: base rate plus surcharge, both charged per day."""
    return base_rate * days + calc_daily_surcharge(kind, feature) * days
