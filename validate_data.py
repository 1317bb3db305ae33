#!/usr/bin/env python3
"""Validate vehicle fuel economy data files against the schema."""
import json
import sys
from pathlib import Path

import yaml
from jsonschema import validate, ValidationError

from catalog.config import data_file


def load_schema() -> dict:
    """Load the JSON schema from schema.yaml."""
    schema_path = Path(__file__).parent / "schema.yaml"
    with open(schema_path) as f:
        return yaml.safe_load(f)


def read_data_file(filepath: Path):
    """Parse a .json file as JSON, anything else as YAML."""
    with open(filepath, encoding="utf-8") as f:
        if filepath.suffix.lower() == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def validate_data_file(filepath: Path, schema: dict) -> list[str]:
    """Validate a single data file. Returns list of errors."""
    errors = []
    try:
        data = read_data_file(filepath)
        validate(instance=data, schema=schema)
    except json.JSONDecodeError as e:
        errors.append(f"JSON parse error: {e}")
    except UnicodeDecodeError as e:
        errors.append(f"Parse error: file is not valid UTF-8: {e}")
    except yaml.YAMLError as e:
        errors.append(f"YAML parse error: {e}")
    except ValidationError as e:
        errors.append(f"Schema validation error: {e.message}")
        if e.path:
            errors.append(f"  at path: {'.'.join(str(p) for p in e.path)}")
    except OSError as e:
        errors.append(f"Error: {e}")
    return errors


def main(argv=None):
    """Validate the given data files, or the configured dataset."""
    paths = [Path(p) for p in (argv if argv is not None else sys.argv[1:])]
    if not paths:
        paths = [data_file()]

    schema = load_schema()
    all_valid = True
    for filepath in paths:
        errors = validate_data_file(filepath, schema)
        if errors:
            print(f"FAIL: {filepath.name}")
            for error in errors:
                print(f"  {error}")
            all_valid = False
        else:
            print(f"OK: {filepath.name}")

    return 0 if all_valid else 1


if __name__ == "__main__":
    sys.exit(main())
