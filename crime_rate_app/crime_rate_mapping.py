import logging

import streamlit as st

from crime_rate_app.constants import COUNTRIES_GEOJSON, CRIME_RATE_CSV
from crime_rate_app.data_loading import (
    CrimeRateParseError,
    load_countries,
    load_crime_rate_from_csv,
)
from crime_rate_app.rendering import (
    create_choropleth_map,
    create_top_countries_chart,
    markers_to_frame,
    summarize,
)
from crime_rate_app.shading import create_country_markers, shade_countries

logging.basicConfig(level=logging.INFO)

# Page configuration
st.set_page_config(
    page_title="World Crime Rate Map",
    page_icon="🌍",
    layout="wide",
)

# Custom CSS for minimal spacing and dark mode metrics
st.markdown("""
<style>
    .main .block-container {
        padding-top: 1rem;
        padding-bottom: 0.5rem;
    }
    [data-testid="metric-container"] {
        background-color: #2b2b2b;
        border: 1px solid #444;
        padding: 0.5rem;
        border-radius: 0.25rem;
        color: white;
    }
    [data-testid="metric-container"] label {
        color: white !important;
    }
    h1, h2, h3 {
        margin-top: 0.5rem;
        margin-bottom: 0.25rem;
    }
</style>
""", unsafe_allow_html=True)

@st.cache_data
def load_data():
    """Load the crime rate table and the country polygons"""
    crime_rates = load_crime_rate_from_csv(CRIME_RATE_CSV)
    countries = load_countries(COUNTRIES_GEOJSON)
    return crime_rates, countries

def main():
    st.title("World Crime Rate Map")
    st.caption("Intentional homicides per 100,000 inhabitants (World Bank). "
               "Blue is low, red is high, gray has no data.")

    try:
        crime_rates, countries = load_data()
    except FileNotFoundError as e:
        st.error(f"{e.filename} not found. Please ensure the file is in the working directory.")
        st.stop()
    except CrimeRateParseError as e:
        st.error(f"Error loading data: {e}")
        st.stop()

    # Country markers are shaded once per run from the cached inputs
    markers = create_country_markers(countries)
    shade_countries(markers, crime_rates)
    frame = markers_to_frame(markers, crime_rates)

    with_data, without_data, mean_rate = summarize(frame)
    col1, col2, col3 = st.columns(3)
    with col1:
        st.metric("Countries with Data", f"{with_data:,}")
    with col2:
        st.metric("Countries without Data", f"{without_data:,}")
    with col3:
        st.metric("Average Crime Rate", f"{mean_rate:.2f}" if mean_rate is not None else "N/A")

    map_col, chart_col = st.columns([2.5, 1])

    with map_col:
        st.plotly_chart(create_choropleth_map(frame), use_container_width=False)

    with chart_col:
        st.plotly_chart(create_top_countries_chart(frame), use_container_width=True)

if __name__ == "__main__":
    main()
