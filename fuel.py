#!/usr/bin/env python3
"""
CLI for browsing the vehicle fuel economy catalog.

Commands:
  years     - List model years in the catalog
  models    - List models available in a year
  trims     - Show average economy for a model and list its trims
  vehicles  - Show every configuration of a year/model/trim
"""

import argparse
import logging
import sys
from pathlib import Path
from tabulate import tabulate
from typing import List, Optional

from catalog import (
    BASE_TRIM_LABEL,
    Catalog,
    CatalogError,
    DecodeError,
    NotFound,
    Stats,
    Vehicle,
    economy_label,
    economy_unit,
)
from catalog.config import data_file

# =============================================================================
# Formatting helpers
# =============================================================================


def format_mpg(value: Optional[float]) -> str:
    """Format an average economy figure with two decimals."""
    return f"{value:.2f}" if value is not None else "-"


def format_trim(trim: str) -> str:
    """Display name for a trim; the empty trim is the base trim."""
    return trim or BASE_TRIM_LABEL


def parse_trim(text: str) -> str:
    """Map a command-line trim back to its catalog value."""
    if text.strip().lower() == BASE_TRIM_LABEL.lower():
        return ""
    return text


def make_stats_table(stats: Stats, equivalent: bool) -> List[List[str]]:
    """Convert model averages to table rows, labelled MPG or MPGe."""
    label = economy_label(equivalent)
    return [
        [f"City {label}", format_mpg(stats.avg_city)],
        [f"Highway {label}", format_mpg(stats.avg_highway)],
        [f"Combined {label}", format_mpg(stats.avg_combined)],
    ]


def make_vehicle_table(vehicles: List[Vehicle], catalog: Catalog) -> List[List[str]]:
    """Convert vehicles to table rows, each labelled by its own MPG/MPGe unit."""
    rows = []
    for vehicle in vehicles:
        unit = economy_unit(catalog.is_fcv(vehicle))
        rows.append(
            [
                vehicle.manufacturer,
                vehicle.configuration,
                f"{vehicle.city_mpg} {unit}",
                f"{vehicle.highway_mpg} {unit}",
                f"{vehicle.combined_mpg} {unit}",
                vehicle.annual_fuel_cost,
                str(vehicle.ghg_rating),
                vehicle.notes or "-",
            ]
        )
    return rows


# =============================================================================
# Commands
# =============================================================================


def cmd_years(catalog: Catalog, args) -> int:
    """List model years in the catalog."""
    years = catalog.list_years()
    if not years:
        print("No vehicles in catalog.")
        return 0
    print(tabulate([[str(y)] for y in years], headers=["Year"], tablefmt="simple"))
    return 0


def cmd_models(catalog: Catalog, args) -> int:
    """List models available in a year."""
    models = catalog.list_models(args.year)
    print(f"Year {args.year}")
    print()
    print(tabulate([[m] for m in models], headers=["Model"], tablefmt="simple"))
    return 0


def cmd_trims(catalog: Catalog, args) -> int:
    """Show average economy for a model and list its trims."""
    listing = catalog.list_trims_with_stats(args.year, args.model)

    print(f"Average Statistics for {args.year} {args.model}")
    print(
        tabulate(
            make_stats_table(listing.stats, listing.is_equivalent_energy),
            tablefmt="plain",
            disable_numparse=True,
        )
    )
    print()
    print(tabulate([[format_trim(t)] for t in listing.trims],
                   headers=["Trim"], tablefmt="simple"))
    return 0


def cmd_vehicles(catalog: Catalog, args) -> int:
    """Show every configuration of a year/model/trim."""
    trim = parse_trim(args.trim)
    vehicles = catalog.list_vehicles(args.year, args.model, trim)

    print(f"{args.year} {args.model} {format_trim(trim)}")
    print(f"Configurations: {len(vehicles)}")
    print()

    headers = [
        "Manufacturer",
        "Configuration",
        "City",
        "Highway",
        "Combined",
        "Annual Fuel Cost",
        "GHG",
        "Notes",
    ]
    print(tabulate(make_vehicle_table(vehicles, catalog), headers=headers,
                   tablefmt="simple"))
    return 0


COMMANDS = {
    "years": cmd_years,
    "models": cmd_models,
    "trims": cmd_trims,
    "vehicles": cmd_vehicles,
}


# =============================================================================
# Main
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Vehicle fuel economy browser",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s years
  %(prog)s models 2024
  %(prog)s trims 2024 Prius
  %(prog)s vehicles 2024 Prius "Base Trim"
  %(prog)s --data data/other.json vehicles 2024 Camry LE
""",
    )
    parser.add_argument(
        "--data",
        type=Path,
        help="Path to vehicle data file (default: $FUEL_DATA_FILE or bundled data)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("years", help="List model years")

    models_parser = subparsers.add_parser("models", help="List models in a year")
    models_parser.add_argument("year", type=int, help="Model year")

    trims_parser = subparsers.add_parser(
        "trims", help="Show model averages and list its trims"
    )
    trims_parser.add_argument("year", type=int, help="Model year")
    trims_parser.add_argument("model", type=str, help="Model name (e.g., 'Prius')")

    vehicles_parser = subparsers.add_parser(
        "vehicles", help="Show all configurations of a trim"
    )
    vehicles_parser.add_argument("year", type=int, help="Model year")
    vehicles_parser.add_argument("model", type=str, help="Model name")
    vehicles_parser.add_argument(
        "trim",
        type=str,
        help="Trim name; use 'Base Trim' or '' for the base trim",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        catalog = Catalog.from_file(args.data or data_file())
    except DecodeError as e:
        print(f"Error: Could not load vehicle data: {e}")
        return 1

    try:
        return COMMANDS[args.command](catalog, args)
    except NotFound as e:
        print(f"Error: No vehicles found for {e.path}")
        return 1
    except CatalogError as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main() or 0)
