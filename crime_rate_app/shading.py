from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, NamedTuple, Optional, Protocol

from crime_rate_app.constants import (
    GREEN_LEVEL,
    LEVEL_RANGE,
    NO_DATA_GRAY,
    RATE_RANGE,
)


class RGB(NamedTuple):
    red: int
    green: int
    blue: int

    @property
    def css(self):
        """CSS color string, with channels clamped to what a browser accepts."""
        red, green, blue = (min(255, max(0, channel)) for channel in self)
        return f"rgb({red}, {green}, {blue})"


NO_DATA_COLOR = RGB(NO_DATA_GRAY, NO_DATA_GRAY, NO_DATA_GRAY)


class Marker(Protocol):
    """Anything the shader can color: an identifier and a settable fill color."""

    id: Optional[str]
    color: RGB


@dataclass
class CountryMarker:
    id: Optional[str]
    name: Optional[str]
    geometry: Any = field(repr=False)
    color: RGB = NO_DATA_COLOR


def linear_map(value, from_range, to_range):
    """Rescale ``value`` from one range to another. No clamping is applied."""
    from_low, from_high = from_range
    to_low, to_high = to_range
    return to_low + (to_high - to_low) * (value - from_low) / (from_high - from_low)


def crime_rate_color(rate) -> RGB:
    # Blue for low crime rates, red for high ones
    level = int(round(linear_map(rate, RATE_RANGE, LEVEL_RANGE)))
    return RGB(255 - level, GREEN_LEVEL, level)


def shade_countries(markers: Iterable[Marker], crime_rates: Mapping[str, float]) -> None:
    """Color each marker by its country's crime rate, gray when there is no data."""
    for marker in markers:
        if marker.id in crime_rates:
            marker.color = crime_rate_color(crime_rates[marker.id])
        else:
            marker.color = NO_DATA_COLOR


def create_country_markers(countries) -> list[CountryMarker]:
    """Build one unshaded marker per row of a countries GeoDataFrame."""
    ids = countries.get("id", [None] * len(countries))
    names = countries.get("name", [None] * len(countries))
    return [
        CountryMarker(id=country_id, name=name, geometry=geometry)
        for country_id, name, geometry in zip(ids, names, countries.geometry)
    ]
