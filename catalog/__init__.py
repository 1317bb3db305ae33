"""
Vehicle fuel economy catalog.

This package provides the navigation engine behind the fuel economy browser:
- Vehicle: One fuel economy record
- loader: Decoding raw JSON/YAML records into vehicles
- hierarchy: Distinct years, models and trims
- calculations: Average MPG statistics per group
- classifier: MPG vs. MPGe labelling from the notes field
- Catalog: Navigation facade combining all of the above
"""

from .errors import (
    CatalogError,
    DecodeError,
    MissingField,
    SourceUnavailable,
    MalformedInput,
    EmptyAggregateError,
    NotFound,
)
from .vehicle import Vehicle, BASE_TRIM_LABEL
from .hierarchy import filter_vehicles, years, models, trims
from .calculations import Stats, aggregate
from .classifier import (
    is_equivalent_energy,
    group_is_equivalent_energy,
    economy_label,
    economy_unit,
)
from .loader import decode, load_vehicles, vehicle_to_dict, vehicles_to_records
from .navigator import Catalog, TrimListing

__all__ = [
    "CatalogError",
    "DecodeError",
    "MissingField",
    "SourceUnavailable",
    "MalformedInput",
    "EmptyAggregateError",
    "NotFound",
    "Vehicle",
    "BASE_TRIM_LABEL",
    "filter_vehicles",
    "years",
    "models",
    "trims",
    "Stats",
    "aggregate",
    "is_equivalent_energy",
    "group_is_equivalent_energy",
    "economy_label",
    "economy_unit",
    "decode",
    "load_vehicles",
    "vehicle_to_dict",
    "vehicles_to_records",
    "Catalog",
    "TrimListing",
]
