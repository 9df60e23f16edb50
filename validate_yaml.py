#!/usr/bin/env python3
"""
Check fleet setup files before they are loaded.

Each file must match schema.yaml (vehicle types, positive rates, boolean
extras, string IDs) and must not register the same vehicle ID twice.
With no arguments every file in fleets/ is checked.
"""
import argparse
import sys
from pathlib import Path
from typing import Iterable, List

import yaml
from jsonschema import validate, ValidationError

FLEETS_DIR = Path(__file__).parent / "fleets"


def load_schema() -> dict:
    """Load the fleet JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def find_duplicate_ids(vehicles: Iterable[dict]) -> List[str]:
    """Vehicle IDs registered more than once, sorted."""
    seen = set()
    duplicates = set()
    for vehicle in vehicles:
        vehicle_id = vehicle["id"]
        if vehicle_id in seen:
            duplicates.add(vehicle_id)
        seen.add(vehicle_id)
    return sorted(duplicates)


def validate_fleet_file(filepath: Path, schema: dict) -> List[str]:
    """Validate a single fleet YAML file. Returns list of errors."""
    errors = []
    try:
        with open(filepath, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        validate(instance=data, schema=schema)
    except UnicodeDecodeError as e:
        errors.append(f"Encoding error (expected UTF-8): {e}")
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    else:
        duplicates = find_duplicate_ids(data["vehicles"])
        if duplicates:
            errors.append(f"Duplicate vehicle IDs: {', '.join(duplicates)}")
    return errors


def collect_fleet_files(paths: List[Path]) -> List[Path]:
    """Explicit paths as given, otherwise every YAML file in fleets/."""
    if paths:
        return sorted(paths)
    return sorted(list(FLEETS_DIR.glob("*.yaml")) + list(FLEETS_DIR.glob("*.yml")))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Validate rental fleet files")
    parser.add_argument(
        "fleet_files",
        type=Path,
        nargs="*",
        help="Fleet YAML files to check (default: everything in fleets/)",
    )
    args = parser.parse_args(argv)

    if not args.fleet_files and not FLEETS_DIR.exists():
        print(f"Error: fleets directory not found: {FLEETS_DIR}")
        return 1

    fleet_files = collect_fleet_files(args.fleet_files)
    if not fleet_files:
        print(f"Warning: No fleet files found in {FLEETS_DIR}")
        return 0

    schema = load_schema()
    failed = 0
    for filepath in fleet_files:
        errors = validate_fleet_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            failed += 1
        else:
            print(f"OK: {filepath.name}")

    if failed:
        print(f"{failed} of {len(fleet_files)} fleet files failed validation")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
