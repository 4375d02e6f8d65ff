"""Loader tests against small CSV fixtures."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from district_growth.data.load_census import describe_census, load_census, missing_value_counts


def _write_census(path: Path, **overrides) -> Path:
    data = {
        "State": [" Kerala", "Bihar "],
        "District": ["Wayanad ", "Patna"],
        "Latitude": [11.6, 25.6],
        "Longitude": [76.1, 85.1],
        "Population in 2001": [786_627, 4_718_592],
        "Population in 2011": [817_420, 5_838_465],
    }
    data.update(overrides)
    pd.DataFrame(data).to_csv(path, index=False)
    return path


def test_load_renames_population_columns(tmp_path: Path) -> None:
    df = load_census(_write_census(tmp_path / "census.csv"))
    assert list(df.columns) == [
        "State",
        "District",
        "Latitude",
        "Longitude",
        "Population2001",
        "Population2011",
    ]
    assert df["State"].tolist() == ["Kerala", "Bihar"]
    assert df["District"].tolist() == ["Wayanad", "Patna"]


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError, match="Census file not found"):
        load_census(tmp_path / "absent.csv")


def test_load_missing_columns(tmp_path: Path) -> None:
    path = tmp_path / "bad.csv"
    pd.DataFrame({"State": ["Goa"], "District": ["North Goa"]}).to_csv(path, index=False)
    with pytest.raises(ValueError, match="missing required columns"):
        load_census(path)


def test_missing_values_are_counted_not_dropped(tmp_path: Path) -> None:
    path = _write_census(tmp_path / "census.csv", Latitude=[None, 25.6])
    df = load_census(path)
    assert len(df) == 2
    counts = missing_value_counts(df)
    assert counts["Latitude"] == 1
    assert counts.sum() == 1


def test_describe_numeric_only(tmp_path: Path) -> None:
    stats = describe_census(load_census(_write_census(tmp_path / "census.csv")))
    assert "State" not in stats.columns
    assert stats.loc["count", "Population2011"] == 2
    assert stats.loc["max", "Population2001"] == 4_718_592


def test_missing_names_stay_missing(tmp_path: Path) -> None:
    path = _write_census(tmp_path / "census.csv", State=[None, " Bihar"], District=["Wayanad", None])
    df = load_census(path)
    counts = missing_value_counts(df)
    assert counts["State"] == 1
    assert counts["District"] == 1
    assert counts.sum() == 2
    assert df["State"].isna().tolist() == [True, False]
    assert df.loc[1, "State"] == "Bihar"
    assert "nan" not in df["State"].dropna().tolist()
