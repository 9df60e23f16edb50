"""RentalAgency - owns the fleet and mediates rent/return transitions."""

import logging
import threading
from typing import List, Optional, Tuple

from .calculations import validate_days
from .customer import Customer
from .errors import InvalidArgumentError, InvalidStateError, VehicleNotFoundError
from .events import Notifier, Observer
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


class RentalAgency:
    """
    Fleet of vehicles in registration order.

    Vehicles registered here report their transitions to the agency's
    observers. ``process_rental`` and ``process_return`` hold an internal
    lock for the whole check-and-transition, so concurrent callers going
    through the agency never rent the same vehicle twice. Calling
    ``Vehicle.rent``/``return_vehicle`` directly bypasses that lock.
    """

    def __init__(self, observers: Optional[List[Observer]] = None):
        self._fleet: List[Vehicle] = []
        self._lock = threading.RLock()
        self.notifier = Notifier(observers)

    @property
    def fleet(self) -> Tuple[Vehicle, ...]:
        return tuple(self._fleet)

    def subscribe(self, observer: Observer) -> None:
        """Add an observer for transitions of every fleet vehicle."""
        self.notifier.subscribe(observer)

    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Register a vehicle. IDs must be unique within the fleet."""
        if not isinstance(vehicle, Vehicle):
            raise InvalidArgumentError(f"Not a vehicle: {vehicle!r}")
        with self._lock:
            if self._find(vehicle.vehicle_id) is not None:
                raise InvalidArgumentError(
                    f"Duplicate vehicle ID: {vehicle.vehicle_id}"
                )
            vehicle.notifier = self.notifier
            self._fleet.append(vehicle)
        logger.debug("Registered %s", vehicle)

    def _find(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self._fleet:
            if vehicle.vehicle_id == vehicle_id:
                return vehicle
        return None

    def get_vehicle(self, vehicle_id: str) -> Vehicle:
        """Find a vehicle by ID."""
        vehicle = self._find(vehicle_id)
        if vehicle is None:
            raise VehicleNotFoundError("Vehicle not found")
        return vehicle

    def get_available_vehicles(self) -> Tuple[Vehicle, ...]:
        """Vehicles that can be rented right now, in registration order."""
        return tuple(v for v in self._fleet if v.is_available_for_rental())

    def quote(self, vehicle_id: str, days: int) -> float:
        """Cost of renting a fleet vehicle, without renting it."""
        return self.get_vehicle(vehicle_id).calculate_rental_cost(days)

    def process_rental(self, customer: Customer, vehicle_id: str, days: int) -> Vehicle:
        """
        Rent a vehicle to a customer.

        Logic:
        - Unknown ID: VehicleNotFoundError
        - Vehicle already out: InvalidStateError, history untouched
        - Otherwise mark it rented and append it to the customer's history

        Observers are notified once both changes are made; an observer error
        propagates but never leaves a rented vehicle out of the history.
        """
        validate_days(days)
        with self._lock:
            vehicle = self.get_vehicle(vehicle_id)
            if not vehicle.is_available_for_rental():
                raise InvalidStateError("Vehicle is not available")
            event = vehicle.start_rental(customer, days)
            customer.add_rental(vehicle)
        vehicle.notifier.notify(event)
        return vehicle

    def process_return(self, vehicle_id: str) -> Vehicle:
        """Mark a fleet vehicle as returned."""
        with self._lock:
            vehicle = self.get_vehicle(vehicle_id)
            vehicle.return_vehicle()
        return vehicle
