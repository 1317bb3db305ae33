"""Vehicle record - one fuel economy entry from the catalog."""

import uuid
from dataclasses import dataclass, field
from typing import Optional

BASE_TRIM_LABEL = "Base Trim"


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Vehicle:
    """
    Fuel economy figures for a single year/model/trim/configuration.

    The ``id`` is only a list key for presentation code. It is generated per
    run and takes no part in equality or hashing.
    """

    year: int
    manufacturer: str
    model: str
    trim: str
    configuration: str
    city_mpg: int
    highway_mpg: int
    combined_mpg: int
    annual_fuel_cost: str
    ghg_rating: int
    notes: Optional[str] = None
    id: str = field(default_factory=_new_id, compare=False)

    @property
    def name(self) -> str:
        """Human-readable vehicle name."""
        base = f"{self.year} {self.manufacturer} {self.model}"
        return f"{base} {self.trim}" if self.trim else base

    @property
    def trim_label(self) -> str:
        """Trim for display; the empty trim is the base trim."""
        return self.trim or BASE_TRIM_LABEL
