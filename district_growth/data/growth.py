"""Growth-rate derivation, ranking and state aggregation."""

from __future__ import annotations

import logging

import pandas as pd

from district_growth.config import RANK_SIZE

LOGGER = logging.getLogger(__name__)

CORRELATION_COLUMNS = ("Latitude", "Longitude", "Population2001", "Population2011")


def growth_percent(p2001, p2011):
    """Percentage change between the two census years.

    Accepts scalars or aligned Series. A zero 2001 population raises
    ZeroDivisionError for both, rather than yielding inf.
    """

    if isinstance(p2001, pd.Series):
        zero = p2001.eq(0)
        if zero.any():
            raise ZeroDivisionError(f"Population in 2001 is zero for {int(zero.sum())} district(s).")
    elif p2001 == 0:
        raise ZeroDivisionError("Population in 2001 is zero.")
    return (p2011 - p2001) / p2001 * 100.0


def project_population(p2001, p2011):
    """Linear 2021 projection: repeat the 2001-2011 change once more."""
    return p2011 + (p2011 - p2001)


def add_growth_columns(df: pd.DataFrame) -> pd.DataFrame:
    df["GrowthPercent"] = growth_percent(df["Population2001"], df["Population2011"])
    df["Population2021"] = project_population(df["Population2001"], df["Population2011"])
    LOGGER.info(
        "Growth derived: mean=%.2f%% median=%.2f%% min=%.2f%% max=%.2f%%",
        df["GrowthPercent"].mean(),
        df["GrowthPercent"].median(),
        df["GrowthPercent"].min(),
        df["GrowthPercent"].max(),
    )
    return df


def top_growth(df: pd.DataFrame, n: int = RANK_SIZE) -> pd.DataFrame:
    """Fastest-growing districts, highest first."""
    return df.sort_values("GrowthPercent", ascending=False, kind="mergesort").head(n)


def bottom_growth(df: pd.DataFrame, n: int = RANK_SIZE) -> pd.DataFrame:
    """Slowest-growing districts, lowest first."""
    return df.sort_values("GrowthPercent", ascending=True, kind="mergesort").head(n)


def state_growth_summary(df: pd.DataFrame) -> pd.DataFrame:
    """Unweighted mean district growth per state, sorted descending.

    Missing growth values are skipped by the mean.
    """

    summary = (
        df.groupby("State")
        .agg(
            MeanGrowthPercent=("GrowthPercent", "mean"),
            Districts=("District", "count"),
            Population2001=("Population2001", "sum"),
            Population2011=("Population2011", "sum"),
        )
        .reset_index()
    )
    return summary.sort_values("MeanGrowthPercent", ascending=False, kind="mergesort").reset_index(drop=True)


def growth_correlations(df: pd.DataFrame) -> pd.Series:
    """Pearson correlation of GrowthPercent with location and size columns."""
    cols = ["GrowthPercent", *CORRELATION_COLUMNS]
    return df[cols].corr(method="pearson")["GrowthPercent"].drop("GrowthPercent")
