"""Interactive folium map of district growth clusters."""

from __future__ import annotations

import logging
from html import escape
from pathlib import Path

import folium
import pandas as pd
from branca.colormap import StepColormap
from folium.plugins import Fullscreen

from district_growth.config import MAP_TILES, MAP_ZOOM_START
from district_growth.data.spatial_ops import centroid_center

LOGGER = logging.getLogger(__name__)


def _popup_html(row) -> str:
    return (
        f"<b>{escape(str(row.District))}</b> ({escape(str(row.State))})<br>"
        f"Population 2001: {row.Population2001:,.0f}<br>"
        f"Population 2011: {row.Population2011:,.0f}<br>"
        f"Projected 2021: {row.Population2021:,.0f}<br>"
        f"Growth: {row.GrowthPercent:.2f}%<br>"
        f"Cluster: {row.Cluster}"
    )


def _cluster_legend(df: pd.DataFrame) -> StepColormap:
    colors = df.groupby("Cluster")["ClusterColor"].first().sort_index()
    legend = StepColormap(
        colors.tolist(),
        vmin=colors.index.min() - 0.5,
        vmax=colors.index.max() + 0.5,
    )
    legend.caption = "Growth cluster"
    return legend


def build_growth_map(df: pd.DataFrame) -> folium.Map:
    """One circle marker per district with a popup of its figures."""

    center_lat, center_lon = centroid_center(df)
    folium_map = folium.Map(location=[center_lat, center_lon], zoom_start=MAP_ZOOM_START, tiles=MAP_TILES)
    Fullscreen(position="topleft").add_to(folium_map)

    placed = 0
    for row in df.dropna(subset=["Latitude", "Longitude"]).itertuples(index=False):
        folium.CircleMarker(
            location=[float(row.Latitude), float(row.Longitude)],
            radius=5,
            color=row.ClusterColor,
            fill=True,
            fill_color=row.ClusterColor,
            fill_opacity=0.75,
            weight=1,
            tooltip=escape(str(row.District)),
            popup=folium.Popup(_popup_html(row), max_width=300),
        ).add_to(folium_map)
        placed += 1

    _cluster_legend(df).add_to(folium_map)
    LOGGER.info("Map built with %d of %d districts placed", placed, len(df))
    return folium_map


def save_growth_map(df: pd.DataFrame, output_path: Path) -> Path:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    build_growth_map(df).save(str(output_path))
    return output_path
