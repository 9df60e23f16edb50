"""YAML loading utilities for fleet setup files."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .agency import RentalAgency
from .customer import Customer
from .errors import InvalidArgumentError
from .events import Observer
from .kind import VehicleKind
from .vehicle import Vehicle

# Fleet file key holding the variant payload, per vehicle type
FEATURE_KEYS = {
    VehicleKind.CAR: "gps",
    VehicleKind.MOTORCYCLE: "sidecar",
    VehicleKind.TRUCK: "cargoCapacity",
}


def _parse_kind(value: Any) -> VehicleKind:
    try:
        return VehicleKind(str(value).strip().lower())
    except ValueError:
        raise InvalidArgumentError(f"Unknown vehicle type: {value!r}") from None


def _parse_object(dct: Dict[str, Any]) -> Union[Vehicle, Customer, dict]:
    """Parse dictionary into appropriate object type."""
    # Vehicle entry
    if "type" in dct and "model" in dct:
        kind = _parse_kind(dct["type"])
        vehicle = Vehicle(
            dct.get("id"),
            dct["model"],
            dct.get("rate"),
            kind,
            dct.get(FEATURE_KEYS[kind]),
        )
        vehicle.set_availability(dct.get("available", True))
        return vehicle
    # Customer entry
    elif "id" in dct and "name" in dct:
        return Customer(dct["id"], dct["name"])
    else:
        # Top-level document, returned as-is
        return dct


def _load(filename: Union[str, Path]) -> Dict[str, Any]:
    with open(filename, "rb") as fp:
        json_data = json.dumps(yaml.load(fp, Loader=yaml.SafeLoader), indent=4)
        data = json.loads(json_data, object_hook=_parse_object)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Fleet file must contain a mapping: {filename}")
    return data


def load_agency(
    filename: Union[str, Path], observers: Optional[List[Observer]] = None
) -> RentalAgency:
    """Build an agency from the ``vehicles`` section of a fleet file."""
    agency = RentalAgency(observers)
    for vehicle in _load(filename).get("vehicles") or []:
        if not isinstance(vehicle, Vehicle):
            raise InvalidArgumentError(f"Malformed vehicle entry: {vehicle!r}")
        agency.add_vehicle(vehicle)
    return agency


def load_customers(filename: Union[str, Path]) -> List[Customer]:
    """Read the ``customers`` section of a fleet file."""
    customers = _load(filename).get("customers") or []
    for customer in customers:
        if not isinstance(customer, Customer):
            raise InvalidArgumentError(f"Malformed customer entry: {customer!r}")
    return customers
