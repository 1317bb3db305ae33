"""Configuration for locating the bundled vehicle dataset."""

import os
from pathlib import Path

# Project root holds the bundled data/ directory
PROJECT_ROOT = Path(__file__).parent.parent

DEFAULT_DATA_FILE = PROJECT_ROOT / "data" / "toyotadata.json"
DATA_FILE_ENV = "FUEL_DATA_FILE"


def data_file() -> Path:
    """Dataset path: $FUEL_DATA_FILE if set, else the bundled dataset."""
    override = os.environ.get(DATA_FILE_ENV, "").strip()
    if override:
        return Path(override)
    return DEFAULT_DATA_FILE
