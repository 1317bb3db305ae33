"""Aggregate fuel economy statistics over groups of vehicles."""

from dataclasses import dataclass
from typing import Sequence

from .errors import EmptyAggregateError
from .vehicle import Vehicle


@dataclass(frozen=True)
class Stats:
    """Average economy figures for a group of vehicles."""

    avg_city: float
    avg_highway: float
    avg_combined: float


def average(values: Sequence[int]) -> float:
    """Arithmetic mean; raises EmptyAggregateError on an empty sequence."""
    if not values:
        raise EmptyAggregateError()
    return sum(values) / len(values)


def aggregate(vehicles: Sequence[Vehicle]) -> Stats:
    """Average city/highway/combined figures across the given vehicles."""
    if not vehicles:
        raise EmptyAggregateError()
    return Stats(
        avg_city=average([v.city_mpg for v in vehicles]),
        avg_highway=average([v.highway_mpg for v in vehicles]),
        avg_combined=average([v.combined_mpg for v in vehicles]),
    )
