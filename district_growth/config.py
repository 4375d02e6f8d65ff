"""Project-wide configuration constants."""

from __future__ import annotations

from pathlib import Path

# Input schema
RAW_POP_2001 = "Population in 2001"
RAW_POP_2011 = "Population in 2011"
REQUIRED_COLUMNS = ("State", "District", "Latitude", "Longitude", RAW_POP_2001, RAW_POP_2011)
COLUMN_RENAMES = {RAW_POP_2001: "Population2001", RAW_POP_2011: "Population2011"}

# Ranking and clustering
RANK_SIZE = 10
N_CLUSTERS = 3
SEED = 42

# Cluster id -> marker color
CLUSTER_COLORS = {1: "#ef4444", 2: "#22c55e", 3: "#3b82f6"}
CLUSTER_COLOR_FALLBACK = "#374151"

# Default locations
DATA_PATH = Path("data/raw/district_census.csv")
OUTPUT_DIR = Path("outputs")
LOG_DIR = Path("logs")

# Interactive map
MAP_TILES = "cartodbpositron"
MAP_ZOOM_START = 5
