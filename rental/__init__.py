"""
In-memory vehicle rental model.

This package provides:
- VehicleKind: variant tag (CAR, MOTORCYCLE, TRUCK)
- Vehicle: a fleet entry with per-variant pricing and rent/return transitions
- Customer: renter with append-only rental history
- RentalAgency: fleet owner that processes rentals and returns
- RentalEvent / log_event: notifications on availability transitions
- load_agency / load_customers: fleet setup from YAML
"""

from .kind import VehicleKind
from .errors import (
    RentalError,
    InvalidArgumentError,
    InvalidStateError,
    VehicleNotFoundError,
)
from .calculations import calc_rental_cost, calc_daily_surcharge, validate_days
from .events import EventAction, RentalEvent, Notifier, log_event
from .vehicle import Vehicle
from .customer import Customer
from .agency import RentalAgency
from .loader import load_agency, load_customers

__all__ = [
    "VehicleKind",
    "RentalError",
    "InvalidArgumentError",
    "InvalidStateError",
    "VehicleNotFoundError",
    "calc_rental_cost",
    "calc_daily_surcharge",
    "validate_days",
    "EventAction",
    "RentalEvent",
    "Notifier",
    "log_event",
    "Vehicle",
    "Customer",
    "RentalAgency",
    "load_agency",
    "load_customers",
]
