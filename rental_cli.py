#!/usr/bin/env python3
"""
CLI for the in-memory vehicle rental model.

Commands:
  fleet      - List every vehicle in the fleet
  available  - List vehicles that can be rented right now
  quote      - Show the cost of renting a vehicle for a number of days
  rent       - Rent a vehicle to a customer from the fleet file

Nothing is written back to the fleet file; each run starts from it afresh.
"""

import argparse
import logging
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional, Sequence

from rental import (
    Customer,
    RentalError,
    Vehicle,
    VehicleKind,
    load_agency,
    load_customers,
)

# =============================================================================
# Formatting helpers
# =============================================================================


def format_cost(cost: Optional[float]) -> str:
    """Format cost for display."""
    return f"${cost:,.2f}" if cost is not None else "-"


def format_extras(vehicle: Vehicle) -> str:
    """Describe the variant payload (GPS, sidecar, cargo capacity)."""
    if vehicle.kind is VehicleKind.CAR:
        return "GPS" if vehicle.has_gps else "-"
    if vehicle.kind is VehicleKind.MOTORCYCLE:
        return "sidecar" if vehicle.has_sidecar else "-"
    return f"cargo {vehicle.cargo_capacity:g}"


def format_status(vehicle: Vehicle) -> str:
    return "available" if vehicle.is_available_for_rental() else "rented"


def make_fleet_table(vehicles: Sequence[Vehicle]) -> List[List[str]]:
    """Convert vehicles to table rows."""
    rows = []
    for vehicle in vehicles:
        rows.append(
            [
                vehicle.vehicle_id,
                vehicle.kind.label,
                vehicle.model,
                format_cost(vehicle.base_rate),
                format_extras(vehicle),
                format_status(vehicle),
            ]
        )
    return rows


FLEET_HEADERS = ["ID", "Type", "Model", "Rate/day", "Extras", "Status"]


def find_customer(customers: List[Customer], customer_id: str) -> Optional[Customer]:
    for customer in customers:
        if customer.customer_id == customer_id:
            return customer
    return None


# =============================================================================
# Commands
# =============================================================================


def cmd_fleet(args):
    """List every vehicle in the fleet."""
    agency = load_agency(args.fleet_file)
    fleet = agency.fleet
    available = agency.get_available_vehicles()

    print(f"Vehicles: {len(fleet)} ({len(available)} available)")
    print()
    if not fleet:
        print("No vehicles in fleet.")
        return 0
    print(tabulate(make_fleet_table(fleet), headers=FLEET_HEADERS, tablefmt="simple"))
    return 0


def cmd_available(args):
    """List vehicles that can be rented right now."""
    agency = load_agency(args.fleet_file)
    available = agency.get_available_vehicles()

    if args.type:
        kind = VehicleKind(args.type)
        available = [v for v in available if v.kind is kind]

    if not available:
        print("No vehicles available.")
        return 0
    print(
        tabulate(make_fleet_table(available), headers=FLEET_HEADERS, tablefmt="simple")
    )
    return 0


def cmd_quote(args):
    """Show the cost of renting a vehicle."""
    agency = load_agency(args.fleet_file)
    vehicle = agency.get_vehicle(args.vehicle_id)
    cost = agency.quote(args.vehicle_id, args.days)

    print(f"Vehicle: {vehicle}")
    print(f"Days:    {args.days}")
    print(f"Cost:    {format_cost(cost)}")
    if not vehicle.is_available_for_rental():
        print("(currently rented)")
    return 0


def cmd_rent(args):
    """Rent a vehicle to a customer listed in the fleet file."""
    agency = load_agency(args.fleet_file)
    customer = find_customer(load_customers(args.fleet_file), args.customer_id)
    if customer is None:
        print(f"Error: Unknown customer '{args.customer_id}'")
        return 1

    cost = agency.quote(args.vehicle_id, args.days)
    print(f"Customer: {customer.name} ({customer.customer_id})")
    print(f"Vehicle:  {agency.get_vehicle(args.vehicle_id)}")
    print(f"Cost:     {format_cost(cost)} for {args.days} days")
    print()

    if args.dry_run:
        print("(dry run - no rental processed)")
        return 0

    agency.process_rental(customer, args.vehicle_id, args.days)
    print("Rental processed.")
    history = ", ".join(v.vehicle_id for v in customer.rental_history)
    print(f"History: {history}")
    return 0


# =============================================================================
# Main
# =============================================================================


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Vehicle rental agency",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s fleets/downtown.yaml fleet
  %(prog)s fleets/downtown.yaml available --type truck
  %(prog)s fleets/downtown.yaml quote C1 3
  %(prog)s fleets/downtown.yaml rent U1 C1 3 --dry-run
""",
    )
    parser.add_argument(
        "fleet_file",
        type=Path,
        help="Path to fleet YAML file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log rental events",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("fleet", help="List every vehicle in the fleet")

    available_parser = subparsers.add_parser(
        "available", help="List vehicles that can be rented right now"
    )
    available_parser.add_argument(
        "--type",
        choices=[k.value for k in VehicleKind],
        help="Only show one vehicle type",
    )

    quote_parser = subparsers.add_parser("quote", help="Show the cost of a rental")
    quote_parser.add_argument("vehicle_id", type=str, help="Vehicle ID (e.g., 'C1')")
    quote_parser.add_argument("days", type=int, help="Number of rental days")

    rent_parser = subparsers.add_parser("rent", help="Rent a vehicle to a customer")
    rent_parser.add_argument("customer_id", type=str, help="Customer ID (e.g., 'U1')")
    rent_parser.add_argument("vehicle_id", type=str, help="Vehicle ID (e.g., 'C1')")
    rent_parser.add_argument("days", type=int, help="Number of rental days")
    rent_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the rental without processing it",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    # Validate fleet file exists
    if not args.fleet_file.exists():
        print(f"Error: File not found: {args.fleet_file}")
        return 1

    commands = {
        "fleet": cmd_fleet,
        "available": cmd_available,
        "quote": cmd_quote,
        "rent": cmd_rent,
    }
    try:
        return commands[args.command](args)
    except RentalError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
