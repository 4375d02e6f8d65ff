"""Unit tests for k-means growth clustering."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from district_growth.config import CLUSTER_COLORS
from district_growth.models.cluster import cluster_growth, cluster_profile


def _make_growth_table() -> pd.DataFrame:
    growth = [1.0, 1.5, 2.0, 20.0, 21.0, 22.0, 50.0, 51.0, 52.0]
    return pd.DataFrame(
        {
            "District": [f"D{i}" for i in range(len(growth))],
            "GrowthPercent": growth,
        }
    )


def test_scaled_growth_is_standardized() -> None:
    df = cluster_growth(_make_growth_table())
    assert df["GrowthScaled"].mean() == pytest.approx(0.0, abs=1e-9)
    assert df["GrowthScaled"].std(ddof=0) == pytest.approx(1.0)


def test_labels_are_one_based() -> None:
    df = cluster_growth(_make_growth_table())
    assert set(df["Cluster"]) == {1, 2, 3}


def test_separated_groups_share_a_cluster() -> None:
    df = cluster_growth(_make_growth_table())
    groups = [df["Cluster"].iloc[i : i + 3] for i in (0, 3, 6)]
    assert all(g.nunique() == 1 for g in groups)
    assert len({g.iloc[0] for g in groups}) == 3


def test_same_seed_is_deterministic() -> None:
    rng = np.random.default_rng(7)
    base = pd.DataFrame({"District": [f"D{i}" for i in range(60)], "GrowthPercent": rng.normal(18, 9, 60)})
    first = cluster_growth(base.copy(), seed=42)
    second = cluster_growth(base.copy(), seed=42)
    assert first["Cluster"].tolist() == second["Cluster"].tolist()


def test_colors_follow_cluster_ids() -> None:
    df = cluster_growth(_make_growth_table())
    assert (df["ClusterColor"] == df["Cluster"].map(CLUSTER_COLORS)).all()


def test_empty_table_fails() -> None:
    with pytest.raises(ValueError, match="empty"):
        cluster_growth(pd.DataFrame({"District": [], "GrowthPercent": []}))


def test_cluster_profile_ranges() -> None:
    profile = cluster_profile(cluster_growth(_make_growth_table()))
    assert profile["Districts"].tolist() == [3, 3, 3]
    assert (profile["MinGrowthPercent"] <= profile["MeanGrowthPercent"]).all()
    assert (profile["MeanGrowthPercent"] <= profile["MaxGrowthPercent"]).all()
    assert sorted(profile["MeanGrowthPercent"].round(1)) == [1.5, 21.0, 51.0]
