import logging
import math
from pathlib import Path

import geopandas as gpd

from crime_rate_app.constants import MISSING_VALUE

logger = logging.getLogger(__name__)


class CrimeRateParseError(ValueError):
    """Raised when a crime rate value is neither a number nor the no-data marker."""

    def __init__(self, path, line_number, value):
        self.path = str(path)
        self.line_number = line_number
        self.value = value
        super().__init__(
            f"{self.path}:{line_number}: could not parse crime rate {value!r}"
        )


def _split_row(row):
    columns = row.split(",")
    # Trailing empty fields do not count as columns ("USA," is one field)
    while columns and columns[-1] == "":
        columns.pop()
    return columns


def load_crime_rate_from_csv(path) -> dict[str, float]:
    """Load the crime rate table from a ``country,value`` CSV file.

    Rows that do not split into exactly two fields and rows whose value is the
    no-data marker are skipped. Any other value must parse as a finite float, or
    ``CrimeRateParseError`` is raised. A repeated country id keeps its last value.
    """
    crime_rates = {}

    rows = Path(path).read_text(encoding="utf-8-sig").splitlines()
    for line_number, row in enumerate(rows, start=1):
        columns = _split_row(row)
        if len(columns) != 2:
            logger.debug("Skipping malformed row %d: %r", line_number, row)
            continue

        country_id, value = columns
        if value == MISSING_VALUE:
            continue

        try:
            rate = float(value)
        except ValueError as exc:
            raise CrimeRateParseError(path, line_number, value) from exc
        # float() accepts "nan" and "inf", which have no place on the color ramp
        if not math.isfinite(rate):
            raise CrimeRateParseError(path, line_number, value)
        crime_rates[country_id] = rate

    logger.info("Loaded %d data entries", len(crime_rates))
    return crime_rates


def load_countries(path) -> gpd.GeoDataFrame:
    """Load country polygons from a GeoJSON FeatureCollection."""
    countries = gpd.read_file(path)
    if countries.crs is not None and countries.crs.to_epsg() != 4326:
        countries = countries.to_crs(epsg=4326)
    logger.info("Loaded %d country shapes", len(countries))
    return countries
