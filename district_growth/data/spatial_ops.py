"""Point geometry helpers for district centroids."""

from __future__ import annotations

from dataclasses import dataclass

import geopandas as gpd
import pandas as pd
from shapely.geometry import Point


@dataclass(frozen=True)
class CRSConfig:
    """Centralized CRS configuration."""

    wgs84: str = "EPSG:4326"


CRS = CRSConfig()


def make_points_from_latlon(
    df: pd.DataFrame, lat_col: str = "Latitude", lon_col: str = "Longitude"
) -> gpd.GeoDataFrame:
    """Create GeoDataFrame from lat/lon."""

    if lat_col not in df or lon_col not in df:
        raise ValueError(f"Missing lat/lon columns: {lat_col}, {lon_col}.")
    geometry = [Point(xy) for xy in zip(df[lon_col], df[lat_col])]
    return gpd.GeoDataFrame(df.copy(), geometry=geometry, crs=CRS.wgs84)


def centroid_center(df: pd.DataFrame, lat_col: str = "Latitude", lon_col: str = "Longitude") -> tuple[float, float]:
    """Mean (lat, lon) of the district centroids, ignoring missing coordinates."""

    coords = df[[lat_col, lon_col]].dropna()
    if coords.empty:
        raise ValueError("No district has both latitude and longitude.")
    return float(coords[lat_col].mean()), float(coords[lon_col].mean())
