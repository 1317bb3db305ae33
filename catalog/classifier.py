"""MPG vs. MPG-equivalent classification from the notes field."""

from typing import Iterable

from .vehicle import Vehicle

FCV_TOKEN = "FCV"

MPG_LABEL = "MPG"
MPGE_LABEL = "MPG Equivalent (MPGe)"


def is_equivalent_energy(vehicle: Vehicle) -> bool:
    """True if the vehicle's figures are MPGe (notes mention FCV)."""
    return vehicle.notes is not None and FCV_TOKEN in vehicle.notes


def group_is_equivalent_energy(vehicles: Iterable[Vehicle]) -> bool:
    """True if any vehicle in the group is MPGe; one FCV relabels the group."""
    return any(is_equivalent_energy(v) for v in vehicles)


def economy_label(equivalent: bool) -> str:
    """Long label for economy figures, e.g. 'City MPG Equivalent (MPGe)'."""
    return MPGE_LABEL if equivalent else MPG_LABEL


def economy_unit(equivalent: bool) -> str:
    """Short unit suffix for a single figure."""
    return "MPGe" if equivalent else MPG_LABEL
