import geopandas as gpd
import pandas as pd
import plotly.express as px

from crime_rate_app.constants import (
    MAP_CENTER,
    MAP_HEIGHT,
    MAP_STYLE,
    MAP_WIDTH,
    MAP_ZOOM,
)

DARK_LAYOUT = dict(
    plot_bgcolor='rgba(20,20,20,0.9)',
    paper_bgcolor='rgba(0,0,0,0)',
    font_color='white',
    title_font_size=14,
    margin=dict(l=0, r=0, t=30, b=0),
    title=dict(font=dict(color='white')),
)


def markers_to_frame(markers, crime_rates):
    """Join shaded markers and their crime rates into a frame indexed by country id"""
    # Markers without an id cannot be located on the map
    markers = [marker for marker in markers if marker.id is not None]
    frame = gpd.GeoDataFrame(
        {
            'name': [marker.name or marker.id for marker in markers],
            'crime_rate': pd.Series(
                [crime_rates.get(marker.id) for marker in markers], dtype='float64'
            ),
            'color': [marker.color.css for marker in markers],
        },
        geometry=[marker.geometry for marker in markers],
        crs='EPSG:4326',
    )
    frame.index = pd.Index([marker.id for marker in markers], name='id')
    return frame


def summarize(frame):
    """Counts for the metrics row"""
    with_data = int(frame['crime_rate'].notna().sum())
    mean_rate = frame['crime_rate'].mean() if with_data else None
    return with_data, len(frame) - with_data, mean_rate


def create_choropleth_map(frame, title='Crime Rate per 100,000 Inhabitants'):
    """Create choropleth map using Plotly, one fill color per shaded country"""
    plot_data = frame.assign(country_id=frame.index)

    fig = px.choropleth_map(
        plot_data,
        geojson=plot_data.geometry.__geo_interface__,
        locations=plot_data.index,
        color='country_id',
        color_discrete_map=dict(zip(plot_data['country_id'], plot_data['color'])),
        hover_name='name',
        hover_data={
            'country_id': False,
            'crime_rate': ':.1f',
        },
        map_style=MAP_STYLE,
        zoom=MAP_ZOOM,
        center=MAP_CENTER,
        opacity=0.8,
        title=title,
        labels={'crime_rate': 'Crime Rate'},
    )

    fig.update_layout(
        **DARK_LAYOUT,
        width=MAP_WIDTH,
        height=MAP_HEIGHT,
        showlegend=False,
    )
    fig.update_traces(marker_line_width=0.5, marker_line_color='white')

    return fig


def create_top_countries_chart(frame, top_n=10):
    """Create top countries bar chart, each bar in its country's map color"""
    sorted_data = frame.dropna(subset=['crime_rate']).nlargest(top_n, 'crime_rate')
    sorted_data = sorted_data.assign(country_id=sorted_data.index)

    fig = px.bar(
        pd.DataFrame(sorted_data.drop(columns='geometry')),
        x='crime_rate',
        y='name',
        orientation='h',
        color='country_id',
        color_discrete_map=dict(zip(sorted_data['country_id'], sorted_data['color'])),
        title=f'Top {top_n} Crime Rates',
        labels={'crime_rate': 'Crime Rate', 'name': 'Country'},
        hover_data={'country_id': False},
    )

    fig.update_layout(
        **DARK_LAYOUT,
        yaxis={
            'categoryorder': 'total ascending',
            'title_font_color': 'white',
            'tickfont_color': 'white',
            'showgrid': True,
            'gridcolor': 'rgba(255,255,255,0.2)'
        },
        xaxis=dict(
            title_font_color='white',
            tickfont_color='white',
            showgrid=True,
            gridcolor='rgba(255,255,255,0.2)'
        ),
        height=MAP_HEIGHT,
        showlegend=False,
    )

    return fig
