"""Distinct year/model/trim groupings over a vehicle collection."""

from typing import Iterable, List, Optional

from .vehicle import Vehicle


def filter_vehicles(
    vehicles: Iterable[Vehicle],
    year: int,
    model: Optional[str] = None,
    trim: Optional[str] = None,
) -> List[Vehicle]:
    """
    Vehicles matching a navigation path, in their original order.

    Matching is exact equality. ``trim=""`` selects the base trim;
    ``trim=None`` means any trim.
    """
    return [
        v
        for v in vehicles
        if v.year == year
        and (model is None or v.model == model)
        and (trim is None or v.trim == trim)
    ]


def years(vehicles: Iterable[Vehicle]) -> List[int]:
    """Distinct model years, ascending."""
    return sorted(set(v.year for v in vehicles))


def models(vehicles: Iterable[Vehicle], year: int) -> List[str]:
    """Distinct model names for a year, sorted. Empty if the year is absent."""
    return sorted(set(v.model for v in filter_vehicles(vehicles, year)))


def trims(vehicles: Iterable[Vehicle], year: int, model: str) -> List[str]:
    """Distinct trims for a year/model, sorted with the base trim ("") first."""
    return sorted(set(v.trim for v in filter_vehicles(vehicles, year, model)))
