"""Tests for joining shaded markers into the map frame and building figures."""

import math

import pytest

from crime_rate_app.rendering import (
    create_choropleth_map,
    create_top_countries_chart,
    markers_to_frame,
    summarize,
)
from crime_rate_app.shading import crime_rate_color, shade_countries

CRIME_RATES = {"USA": 5.2, "FRA": 1.1}


def _shaded_frame(markers):
    shade_countries(markers, CRIME_RATES)
    return markers_to_frame(markers, CRIME_RATES)


class TestMarkersToFrame:

    def test_join(self, markers):
        frame = _shaded_frame(markers)

        assert list(frame.index) == ["USA", "FRA", "ATA"]
        assert frame.loc["USA", "crime_rate"] == 5.2
        assert math.isnan(frame.loc["ATA", "crime_rate"])
        assert frame.loc["USA", "color"] == crime_rate_color(5.2).css
        assert frame.loc["ATA", "color"] == "rgb(150, 150, 150)"

    def test_summarize(self, markers):
        with_data, without_data, mean_rate = summarize(_shaded_frame(markers))
        assert (with_data, without_data) == (2, 1)
        assert mean_rate == pytest.approx((5.2 + 1.1) / 2)

    def test_summarize_without_data(self, markers):
        shade_countries(markers, {})
        assert summarize(markers_to_frame(markers, {})) == (0, 3, None)


class TestFigures:

    def test_choropleth_uses_marker_colors(self, markers):
        frame = _shaded_frame(markers)
        fig = create_choropleth_map(frame)

        colors = {
            trace.locations[0]: trace.colorscale[0][1].replace(" ", "") for trace in fig.data
        }
        assert colors["USA"] == frame.loc["USA", "color"].replace(" ", "")
        assert colors["ATA"] == "rgb(150,150,150)"
        assert fig.layout.showlegend is False

    def test_top_countries_skips_missing_data(self, markers):
        fig = create_top_countries_chart(_shaded_frame(markers), top_n=5)

        names = sorted(name for trace in fig.data for name in trace.y)
        assert names == ["France", "United States of America"]
