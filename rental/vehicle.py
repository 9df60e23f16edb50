"""Vehicle class - a rentable fleet entry tagged with its variant."""

from numbers import Real
from typing import TYPE_CHECKING, Optional

from .calculations import Feature, calc_rental_cost, validate_days
from .errors import InvalidArgumentError, InvalidStateError
from .events import EventAction, Notifier, RentalEvent
from .kind import VehicleKind

if TYPE_CHECKING:
    from .customer import Customer


class Vehicle:
    """
    A car, motorcycle or truck in the fleet.

    The variant is carried by ``kind``; ``feature`` holds the variant payload
    (GPS flag for cars, sidecar flag for motorcycles, cargo capacity for
    trucks). Pricing dispatches on ``kind`` in ``calc_rental_cost``.
    """

    def __init__(
        self,
        vehicle_id: str,
        model: str,
        base_rate: float,
        kind: VehicleKind,
        feature: Feature = None,
        notifier: Optional[Notifier] = None,
    ):
        if not isinstance(vehicle_id, str) or not vehicle_id:
            raise InvalidArgumentError(
                f"Invalid vehicle details: ID must be a non-empty string, got {vehicle_id!r}"
            )
        if not isinstance(model, str) or not model:
            raise InvalidArgumentError(
                f"Invalid vehicle details: model must be a non-empty string, got {model!r}"
            )
        if isinstance(base_rate, bool) or not isinstance(base_rate, Real) or base_rate <= 0:
            raise InvalidArgumentError(
                f"Invalid vehicle details: base rate must be positive, got {base_rate!r}"
            )
        if not isinstance(kind, VehicleKind):
            raise InvalidArgumentError(f"Unknown vehicle kind: {kind!r}")

        if kind is VehicleKind.TRUCK:
            feature = feature or 0.0
            if isinstance(feature, bool) or not isinstance(feature, Real) or feature < 0:
                raise InvalidArgumentError(
                    f"Invalid vehicle details: cargo capacity must be >= 0, got {feature!r}"
                )
            feature = float(feature)
        else:
            feature = False if feature is None else feature
            if not isinstance(feature, bool):
                raise InvalidArgumentError(
                    f"Invalid vehicle details: {kind.label} extra must be true or false, "
                    f"got {feature!r}"
                )

        self.vehicle_id = vehicle_id
        self.model = model
        self.base_rate = float(base_rate)
        self.kind = kind
        self.feature = feature
        self.is_available = True
        self.notifier = notifier or Notifier()

    @classmethod
    def car(cls, vehicle_id: str, model: str, base_rate: float, has_gps: bool = False):
        return cls(vehicle_id, model, base_rate, VehicleKind.CAR, has_gps)

    @classmethod
    def motorcycle(
        cls, vehicle_id: str, model: str, base_rate: float, has_sidecar: bool = False
    ):
        return cls(vehicle_id, model, base_rate, VehicleKind.MOTORCYCLE, has_sidecar)

    @classmethod
    def truck(
        cls, vehicle_id: str, model: str, base_rate: float, cargo_capacity: float = 0
    ):
        return cls(vehicle_id, model, base_rate, VehicleKind.TRUCK, cargo_capacity)

    @property
    def has_gps(self) -> Optional[bool]:
        return self.feature if self.kind is VehicleKind.CAR else None

    @property
    def has_sidecar(self) -> Optional[bool]:
        return self.feature if self.kind is VehicleKind.MOTORCYCLE else None

    @property
    def cargo_capacity(self) -> Optional[float]:
        return self.feature if self.kind is VehicleKind.TRUCK else None

    def set_availability(self, is_available: bool) -> None:
        """Set the availability flag directly, without notifying anyone."""
        self.is_available = bool(is_available)

    def is_available_for_rental(self) -> bool:
        return self.is_available

    def calculate_rental_cost(self, days: int) -> float:
        """Cost of renting this vehicle for a number of days."""
        validate_days(days)
        return calc_rental_cost(self.kind, self.base_rate, days, self.feature)

    def rent(self, customer: "Customer", days: int) -> None:
        """
        Mark the vehicle as rented.

        Only the Available -> Rented transition happens here; pricing is left
        to the caller. Observers run after the transition, so an observer
        error leaves the vehicle rented.
        """
        self.notifier.notify(self.start_rental(customer, days))

    def start_rental(self, customer: "Customer", days: int) -> RentalEvent:
        """Make the Available -> Rented transition and return the event, unsent."""
        validate_days(days)
        if not self.is_available_for_rental():
            raise InvalidStateError(f"{self.kind.label} is not available for rental")
        self.set_availability(False)
        return RentalEvent(EventAction.RENTED, self, customer=customer, days=days)

    def return_vehicle(self) -> None:
        """Mark the vehicle as available again. Repeatable."""
        self.set_availability(True)
        self.notifier.notify(RentalEvent(EventAction.RETURNED, self))

    def __str__(self) -> str:
        return f"Vehicle[ID={self.vehicle_id}, Model={self.model}, Rate={self.base_rate}]"

    def __repr__(self) -> str:
        return (
            f"Vehicle({self.vehicle_id!r}, {self.model!r}, {self.base_rate!r}, "
            f"{self.kind}, {self.feature!r})"
        )
