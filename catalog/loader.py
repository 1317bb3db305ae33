"""Loading and decoding utilities for vehicle fuel economy data."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

import yaml

from .errors import DecodeError, MalformedInput, MissingField, SourceUnavailable
from .vehicle import Vehicle

logger = logging.getLogger(__name__)

# External field name -> (Vehicle attribute, expected type)
FIELDS = (
    ("Year", "year", int),
    ("Manufacturer", "manufacturer", str),
    ("Model", "model", str),
    ("Trim", "trim", str),
    ("Configuration (trans, eng size, cyl)", "configuration", str),
    ("City MPG", "city_mpg", int),
    ("Highway MPG", "highway_mpg", int),
    ("Combined MPG", "combined_mpg", int),
    ("Annual Fuel Cost", "annual_fuel_cost", str),
    ("GHG Rating", "ghg_rating", int),
)
NOTES_FIELD = "Notes"

_MPG_ATTRS = ("city_mpg", "highway_mpg", "combined_mpg")


def _is_type(value: Any, expected: type) -> bool:
    # bool is a subclass of int but never a valid year/MPG/rating
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)


def _parse_record(dct: Any, index: int) -> Vehicle:
    """Parse one raw record into a Vehicle."""
    if not isinstance(dct, dict):
        raise MalformedInput(f"expected an object, got {type(dct).__name__}", index)

    values: Dict[str, Any] = {}
    for key, attr, expected in FIELDS:
        if key not in dct or not _is_type(dct[key], expected):
            raise MissingField(key, index)
        values[attr] = dct[key]

    for attr in _MPG_ATTRS:
        if values[attr] < 0:
            raise MalformedInput(f"{attr} must be non-negative", index)

    notes = dct.get(NOTES_FIELD)
    if notes is not None and not isinstance(notes, str):
        raise MalformedInput(f"'{NOTES_FIELD}' must be a string or null", index)

    return Vehicle(notes=notes, **values)


def decode(raw: Any) -> List[Vehicle]:
    """
    Decode a list of raw records into Vehicle objects.

    All-or-nothing: the first invalid record raises and no vehicles are
    returned.
    """
    if not isinstance(raw, (list, tuple)):
        raise MalformedInput(
            f"expected a list of vehicle records, got {type(raw).__name__}"
        )
    return [_parse_record(dct, index) for index, dct in enumerate(raw)]


def _read_source(filename: Path) -> Any:
    """Read and parse a JSON or YAML data file."""
    try:
        with open(filename, "rb") as fp:
            if filename.suffix.lower() == ".json":
                return json.load(fp)
            return yaml.load(fp, Loader=yaml.SafeLoader)
    except OSError as exc:
        raise SourceUnavailable(str(filename)) from exc
    except (ValueError, yaml.YAMLError) as exc:
        # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
        raise MalformedInput(f"could not parse {filename}: {exc}") from exc


def load_vehicles(filename: Union[str, Path]) -> List[Vehicle]:
    """Load and decode all vehicles from a JSON or YAML file."""
    path = Path(filename)
    try:
        vehicles = decode(_read_source(path))
    except DecodeError as exc:
        logger.error("Failed to load vehicle data from %s: %s", path, exc)
        raise
    logger.info("Loaded %d vehicles from %s", len(vehicles), path)
    return vehicles


def vehicle_to_dict(vehicle: Vehicle) -> Dict[str, Any]:
    """Serialize a Vehicle to the external record format."""
    d: Dict[str, Any] = {key: getattr(vehicle, attr) for key, attr, _ in FIELDS}
    if vehicle.notes is not None:
        d[NOTES_FIELD] = vehicle.notes
    return d


def vehicles_to_records(vehicles: Sequence[Vehicle]) -> List[Dict[str, Any]]:
    """Serialize a sequence of vehicles to external records."""
    return [vehicle_to_dict(v) for v in vehicles]
