"""Flask web application for browsing vehicle fuel economy."""

import logging
from pathlib import Path
from urllib.parse import quote, unquote

from flask import Flask, render_template

# Add parent directory to path for catalog imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog import (
    BASE_TRIM_LABEL,
    Catalog,
    DecodeError,
    NotFound,
    economy_label,
    economy_unit,
)
from catalog.config import data_file

logger = logging.getLogger(__name__)

app = Flask(__name__)

# URL segment standing in for the empty (base) trim.
# Real trims starting with "_" get one more "_" so they never collide with it.
BASE_TRIM_SLUG = "_base"

_catalog = Catalog()
_load_error = None


def load_catalog(path=None) -> Catalog:
    """(Re)load the catalog; on failure serve an empty catalog and remember why."""
    global _catalog, _load_error
    catalog = Catalog()
    try:
        catalog.load(path or data_file())
        _load_error = None
    except DecodeError as e:
        logger.error("Catalog unavailable: %s", e)
        _load_error = str(e)
    _catalog = catalog
    return catalog


def get_catalog() -> Catalog:
    return _catalog


def format_mpg(value):
    """Format an average figure with two decimals."""
    if value is None:
        return "—"
    return f"{value:.2f}"


def trim_label(trim):
    """Display name for a trim."""
    return trim or BASE_TRIM_LABEL


def name_slug(name):
    """URL segment for a model or trim name; "/" and "%" are percent-encoded."""
    return quote(name, safe="")


def name_from_slug(slug):
    """Catalog name for a URL segment produced by name_slug."""
    return unquote(slug)


def trim_slug(trim):
    """URL segment for a trim."""
    if not trim:
        return BASE_TRIM_SLUG
    if trim.startswith("_"):
        return "_" + name_slug(trim)
    return name_slug(trim)


def trim_from_slug(slug):
    """Catalog trim value for a URL segment produced by trim_slug."""
    if slug == BASE_TRIM_SLUG:
        return ""
    if slug.startswith("_"):
        return name_from_slug(slug[1:])
    return name_from_slug(slug)


# Register template filters
app.jinja_env.filters["format_mpg"] = format_mpg
app.jinja_env.filters["trim_label"] = trim_label
app.jinja_env.filters["trim_slug"] = trim_slug
app.jinja_env.filters["name_slug"] = name_slug


@app.errorhandler(NotFound)
def handle_not_found(error: NotFound):
    """Stale or mistyped navigation paths render a 404 page."""
    return render_template("not_found.html", path=error.path), 404


@app.route("/")
def index():
    """Year selection."""
    return render_template(
        "index.html",
        years=get_catalog().list_years(),
        load_error=_load_error,
    )


@app.route("/year/<int:year>")
def year_detail(year: int):
    """Models within a year."""
    models = get_catalog().list_models(year)
    return render_template("year.html", year=year, models=models)


@app.route("/year/<int:year>/model/<model>")
def model_detail(year: int, model: str):
    """Model averages (labelled for the whole model) and its trims."""
    model = name_from_slug(model)
    listing = get_catalog().list_trims_with_stats(year, model)
    return render_template(
        "model.html",
        year=year,
        model=model,
        listing=listing,
        label=economy_label(listing.is_equivalent_energy),
    )


@app.route("/year/<int:year>/model/<model>/trim/<path:trim>")
def trim_detail(year: int, model: str, trim: str):
    """Every configuration of a trim, each row labelled on its own."""
    catalog = get_catalog()
    model = name_from_slug(model)
    trim_value = trim_from_slug(trim)
    vehicles = catalog.list_vehicles(year, model, trim_value)
    rows = [
        {"vehicle": v, "unit": economy_unit(catalog.is_fcv(v))} for v in vehicles
    ]
    return render_template(
        "trim.html",
        year=year,
        model=model,
        trim=trim_value,
        rows=rows,
    )


load_catalog()


if __name__ == "__main__":
    # Using 5001 to avoid conflict with macOS AirPlay Receiver on 5000
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host="0.0.0.0", port=5001)
