"""Static matplotlib charts for the growth analysis."""

from __future__ import annotations

from pathlib import Path

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from district_growth.data.spatial_ops import make_points_from_latlon


def _district_labels(df: pd.DataFrame) -> list[str]:
    return [f"{district} ({state})" for district, state in zip(df["District"], df["State"])]


def _finish(fig: Figure, output_path: Path | None) -> Figure:
    fig.tight_layout()
    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(output_path, dpi=200, bbox_inches="tight")
        plt.close(fig)
    return fig


def plot_rank_bars(top: pd.DataFrame, bottom: pd.DataFrame, output_path: Path | None = None) -> Figure:
    """Side-by-side bars for the fastest and slowest growing districts."""

    fig, (ax_top, ax_bottom) = plt.subplots(1, 2, figsize=(14, 6))
    ax_top.barh(_district_labels(top), top["GrowthPercent"], color="#22c55e")
    ax_top.invert_yaxis()
    ax_top.set_title(f"Top {len(top)} districts by growth")
    ax_top.set_xlabel("Growth 2001-2011 (%)")

    ax_bottom.barh(_district_labels(bottom), bottom["GrowthPercent"], color="#ef4444")
    ax_bottom.invert_yaxis()
    ax_bottom.set_title(f"Bottom {len(bottom)} districts by growth")
    ax_bottom.set_xlabel("Growth 2001-2011 (%)")
    return _finish(fig, output_path)


def plot_state_growth(summary: pd.DataFrame, output_path: Path | None = None) -> Figure:
    """Average district growth per state, in summary order."""

    fig, ax = plt.subplots(figsize=(10, max(4, 0.3 * len(summary))))
    ax.barh(summary["State"], summary["MeanGrowthPercent"], color="#3b82f6")
    ax.invert_yaxis()
    ax.set_title("Average district growth by state")
    ax.set_xlabel("Mean growth 2001-2011 (%)")
    return _finish(fig, output_path)


def plot_growth_vs_latitude(df: pd.DataFrame, output_path: Path | None = None) -> Figure:
    fig, ax = plt.subplots(figsize=(8, 6))
    ax.scatter(df["Latitude"], df["GrowthPercent"], s=14, alpha=0.6, color="#6366f1")
    ax.set_title("Growth rate vs latitude")
    ax.set_xlabel("Latitude")
    ax.set_ylabel("Growth 2001-2011 (%)")
    return _finish(fig, output_path)


def plot_cluster_map(df: pd.DataFrame, output_path: Path | None = None) -> Figure:
    """Centroids on lon/lat axes, colored by growth cluster."""

    points = make_points_from_latlon(df.dropna(subset=["Latitude", "Longitude"]))
    fig, ax = plt.subplots(figsize=(8, 9))
    points.plot(ax=ax, color=points["ClusterColor"].tolist(), markersize=18, alpha=0.8)

    handles = [
        Line2D([0], [0], marker="o", linestyle="", color=color, label=f"Cluster {cluster}")
        for cluster, color in points.groupby("Cluster")["ClusterColor"].first().items()
    ]
    ax.legend(handles=handles, title="Growth cluster", loc="lower left")
    ax.set_title("District growth clusters")
    ax.set_xlabel("Longitude")
    ax.set_ylabel("Latitude")
    return _finish(fig, output_path)
