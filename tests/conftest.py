"""Shared fixtures for the crime rate map tests."""

import json

import pytest
from shapely.geometry import Polygon, mapping

from crime_rate_app.shading import CountryMarker


def _square(x, y, size=1.0):
    return Polygon([(x, y), (x + size, y), (x + size, y + size), (x, y + size)])


@pytest.fixture
def write_csv(tmp_path):
    """Write CSV rows to a temporary file and return its path."""
    def _write(*rows, name="CrimeRate.csv"):
        path = tmp_path / name
        path.write_text("\n".join(rows) + "\n", encoding="utf-8")
        return path
    return _write


@pytest.fixture
def countries_geojson(tmp_path):
    """A small FeatureCollection with top-level feature ids."""
    collection = {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "id": "USA",
                "properties": {"name": "United States of America"},
                "geometry": mapping(_square(-100, 35)),
            },
            {
                "type": "Feature",
                "id": "FRA",
                "properties": {"name": "France"},
                "geometry": mapping(_square(2, 46)),
            },
            {
                "type": "Feature",
                "id": "ATA",
                "properties": {"name": "Antarctica"},
                "geometry": mapping(_square(0, -80)),
            },
        ],
    }
    path = tmp_path / "countries.geo.json"
    path.write_text(json.dumps(collection), encoding="utf-8")
    return path


@pytest.fixture
def markers():
    return [
        CountryMarker(id="USA", name="United States of America", geometry=_square(-100, 35)),
        CountryMarker(id="FRA", name="France", geometry=_square(2, 46)),
        CountryMarker(id="ATA", name="Antarctica", geometry=_square(0, -80)),
    ]
