"""Catalog class - the navigation entry point used by presentation code."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Tuple, Union

from . import hierarchy
from .calculations import Stats, aggregate
from .classifier import group_is_equivalent_energy, is_equivalent_energy
from .errors import DecodeError, NotFound
from .loader import decode, load_vehicles
from .vehicle import Vehicle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrimListing:
    """Trims of a year/model together with the model-level statistics."""

    trims: Tuple[str, ...]
    stats: Stats
    is_equivalent_energy: bool


class Catalog:
    """
    Immutable fuel economy catalog navigated Year -> Model -> Trim -> Vehicle.

    Queries are pure reads over the loaded snapshot. Paths that do not exist
    raise NotFound; a failed load leaves the catalog empty.
    """

    def __init__(self, vehicles: Iterable[Vehicle] = ()):
        self._vehicles: Tuple[Vehicle, ...] = tuple(vehicles)

    @classmethod
    def from_file(cls, filename: Union[str, Path]) -> "Catalog":
        """Build a catalog from a JSON or YAML data file."""
        catalog = cls()
        catalog.load(filename)
        return catalog

    @classmethod
    def from_records(cls, raw: Any) -> "Catalog":
        """Build a catalog from already-parsed raw records."""
        return cls(decode(raw))

    @property
    def vehicles(self) -> Tuple[Vehicle, ...]:
        return self._vehicles

    @property
    def is_empty(self) -> bool:
        return not self._vehicles

    def load(self, source: Union[str, Path]) -> None:
        """
        Replace the catalog contents with the vehicles in ``source``.

        On a DecodeError the catalog is left empty and the error is re-raised,
        so callers never see partial data.
        """
        try:
            vehicles = load_vehicles(source)
        except DecodeError:
            self._vehicles = ()
            raise
        self._vehicles = tuple(vehicles)

    def list_years(self) -> List[int]:
        """All model years in the catalog, ascending."""
        return hierarchy.years(self._vehicles)

    def list_models(self, year: int) -> List[str]:
        """Models available in a year."""
        logger.debug("Listing models for %s", year)
        result = hierarchy.models(self._vehicles, year)
        if not result:
            logger.warning("Year %s not in catalog", year)
            raise NotFound(year)
        return result

    def list_trims_with_stats(self, year: int, model: str) -> TrimListing:
        """
        Trims of a model plus averages over every vehicle of that model.

        The MPG/MPGe decision is made for the model as a whole.
        """
        logger.debug("Listing trims for %s %s", year, model)
        group = hierarchy.filter_vehicles(self._vehicles, year, model)
        if not group:
            logger.warning("Model %s %r not in catalog", year, model)
            raise NotFound(year, model)
        return TrimListing(
            trims=tuple(hierarchy.trims(group, year, model)),
            stats=aggregate(group),
            is_equivalent_energy=group_is_equivalent_energy(group),
        )

    def list_vehicles(self, year: int, model: str, trim: str) -> List[Vehicle]:
        """All vehicles sharing a year/model/trim, in catalog order."""
        logger.debug("Listing vehicles for %s %s %r", year, model, trim)
        result = hierarchy.filter_vehicles(self._vehicles, year, model, trim)
        if not result:
            logger.warning("Trim %s %r %r not in catalog", year, model, trim)
            raise NotFound(year, model, trim)
        return result

    def is_fcv(self, vehicle: Vehicle) -> bool:
        """Per-vehicle MPGe decision, used for individual detail rows."""
        return is_equivalent_energy(vehicle)
