"""Load the district census table and report basic data quality."""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from district_growth.config import COLUMN_RENAMES, REQUIRED_COLUMNS

LOGGER = logging.getLogger(__name__)


def _require_cols(df: pd.DataFrame, required: tuple[str, ...]) -> None:
    missing = sorted(set(required) - set(df.columns))
    if missing:
        raise ValueError(f"Census file missing required columns: {missing}. Columns present: {list(df.columns)}")


def missing_value_counts(df: pd.DataFrame) -> pd.Series:
    """Return null counts per column."""
    return df.isna().sum()


def describe_census(df: pd.DataFrame) -> pd.DataFrame:
    """Descriptive statistics for the numeric columns."""
    return df.select_dtypes(include="number").describe()


def load_census(path: Path | str) -> pd.DataFrame:
    """Load the census CSV and rename population columns to canonical names.

    Only column presence is checked. Rows are kept in file order and never
    deduplicated.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Census file not found: {path}")

    LOGGER.info("Loading census table from %s", path)
    df = pd.read_csv(path)
    df.columns = [str(col).strip() for col in df.columns]
    _require_cols(df, REQUIRED_COLUMNS)

    df = df[list(REQUIRED_COLUMNS)].rename(columns=COLUMN_RENAMES).copy()
    nulls = missing_value_counts(df)

    # Missing names stay missing
    for col in ("State", "District"):
        names = df[col]
        df[col] = names.where(names.isna(), names.astype(str).str.strip())

    LOGGER.info(
        "Loaded %d districts across %d states | missing values=%d %s",
        len(df),
        df["State"].nunique(),
        int(nulls.sum()),
        nulls[nulls > 0].to_dict(),
    )
    return df
