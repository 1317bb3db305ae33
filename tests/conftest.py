"""Shared fixtures for fuel economy catalog tests."""

import json

import pytest

from catalog import Vehicle


def record(**overrides):
    """A valid raw record in the external field format."""
    rec = {
        "Year": 2024,
        "Manufacturer": "Toyota",
        "Model": "Prius",
        "Trim": "",
        "Configuration (trans, eng size, cyl)": "Auto (AV-S6), 2.0L, 4 cyl",
        "City MPG": 50,
        "Highway MPG": 54,
        "Combined MPG": 52,
        "Annual Fuel Cost": "$950",
        "GHG Rating": 10,
        "Notes": None,
    }
    rec.update(overrides)
    return rec


def vehicle(**overrides):
    """A Vehicle with sensible defaults."""
    fields = {
        "year": 2024,
        "manufacturer": "Toyota",
        "model": "Prius",
        "trim": "",
        "configuration": "Auto (AV-S6), 2.0L, 4 cyl",
        "city_mpg": 50,
        "highway_mpg": 54,
        "combined_mpg": 52,
        "annual_fuel_cost": "$950",
        "ghg_rating": 10,
        "notes": None,
    }
    fields.update(overrides)
    return Vehicle(**fields)


@pytest.fixture
def sample_records():
    """Small mixed dataset: two years, a hybrid, a duplicate trim and an FCV."""
    return [
        record(Year=2023, Model="Camry", Trim="LE", **{"City MPG": 28}),
        record(Year=2024, Model="Prius", Trim="", **{"City MPG": 50}),
        record(Year=2024, Model="Prius", Trim="LE", **{"City MPG": 54}),
        record(Year=2024, Model="Camry", Trim="LE", **{"City MPG": 28}),
        record(
            Year=2024,
            Model="Camry",
            Trim="LE",
            Notes="Hybrid",
            **{"City MPG": 51, "Configuration (trans, eng size, cyl)": "Auto (AV-S6)"},
        ),
        record(Year=2024, Model="Mirai", Trim="XLE", Notes="Hydrogen FCV",
               **{"City MPG": 76}),
        record(Year=2024, Model="Mirai", Trim="Limited", Notes=None,
               **{"City MPG": 65}),
    ]


@pytest.fixture
def data_file(tmp_path, sample_records):
    """sample_records written to a JSON data file."""
    path = tmp_path / "vehicles.json"
    path.write_text(json.dumps(sample_records))
    return path
