# ---------------------------------------------------------------------------
# Input files (resolved against the working directory)
# ---------------------------------------------------------------------------

CRIME_RATE_CSV = "CrimeRate.csv"
COUNTRIES_GEOJSON = "countries.geo.json"

# World Bank placeholder for "no data"
MISSING_VALUE = ".."

# ---------------------------------------------------------------------------
# Color ramp
# ---------------------------------------------------------------------------

# Crime rate per 100,000 inhabitants, as documented for the source data
RATE_RANGE = (0.0, 54.0)
# Blue channel level at the low and high end of RATE_RANGE
LEVEL_RANGE = (165.0, 10.0)

GREEN_LEVEL = 100
NO_DATA_GRAY = 150

# ---------------------------------------------------------------------------
# Map frame
# ---------------------------------------------------------------------------

MAP_WIDTH = 700
MAP_HEIGHT = 500

MAP_STYLE = "carto-positron"
MAP_ZOOM = 0.6
MAP_CENTER = {"lat": 20.0, "lon": 0.0}
