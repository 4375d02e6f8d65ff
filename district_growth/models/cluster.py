"""K-means grouping of districts by standardized growth rate."""

from __future__ import annotations

import logging

import pandas as pd
from sklearn.cluster import KMeans
from sklearn.preprocessing import StandardScaler

from district_growth.config import CLUSTER_COLOR_FALLBACK, CLUSTER_COLORS, N_CLUSTERS, SEED

LOGGER = logging.getLogger(__name__)


def cluster_growth(df: pd.DataFrame, n_clusters: int = N_CLUSTERS, seed: int = SEED) -> pd.DataFrame:
    """Append GrowthScaled, Cluster (1..n_clusters) and ClusterColor.

    Assignments are reproducible for a fixed seed and row order, but which id
    ends up holding the fast, moderate or slow growers depends on the data.
    """

    if df.empty:
        raise ValueError("Cannot cluster an empty census table.")

    scaler = StandardScaler()
    df["GrowthScaled"] = scaler.fit_transform(df[["GrowthPercent"]])[:, 0]

    kmeans = KMeans(n_clusters=n_clusters, random_state=seed, n_init=10)
    df["Cluster"] = kmeans.fit_predict(df[["GrowthScaled"]]) + 1
    df["ClusterColor"] = df["Cluster"].map(CLUSTER_COLORS).fillna(CLUSTER_COLOR_FALLBACK)

    LOGGER.info(
        "KMeans k=%d seed=%d inertia=%.3f sizes=%s",
        n_clusters,
        seed,
        kmeans.inertia_,
        df["Cluster"].value_counts().sort_index().to_dict(),
    )
    return df


def cluster_profile(df: pd.DataFrame) -> pd.DataFrame:
    """Per-cluster district count and growth range."""
    return (
        df.groupby("Cluster")
        .agg(
            Districts=("District", "count"),
            MinGrowthPercent=("GrowthPercent", "min"),
            MeanGrowthPercent=("GrowthPercent", "mean"),
            MaxGrowthPercent=("GrowthPercent", "max"),
            ClusterColor=("ClusterColor", "first"),
        )
        .reset_index()
    )
