"""Create a synthetic district census table with the real column layout."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import pandas as pd

from district_growth.config import DATA_PATH, RAW_POP_2001, RAW_POP_2011

# Rough state centroids (lat, lon) and typical decadal growth (%)
STATES = {
    "Uttar Pradesh": (26.8, 80.9, 20.0),
    "Bihar": (25.6, 85.1, 25.0),
    "Maharashtra": (19.7, 75.7, 16.0),
    "Kerala": (10.5, 76.3, 5.0),
    "Tamil Nadu": (11.1, 78.7, 15.0),
    "Rajasthan": (27.0, 74.2, 21.0),
    "Nagaland": (26.2, 94.6, -0.5),
    "West Bengal": (22.9, 87.9, 14.0),
}


def configure_logging() -> None:
    Path("logs").mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename="logs/create_sample_census.log",
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_sample_census(output_path: Path, districts_per_state: int = 12, seed: int = 42) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    rows = []
    for state, (lat, lon, growth) in STATES.items():
        for idx in range(1, districts_per_state + 1):
            pop_2001 = int(rng.integers(150_000, 4_500_000))
            district_growth = rng.normal(growth, 6.0)
            pop_2011 = int(round(pop_2001 * (1 + district_growth / 100.0)))
            rows.append(
                {
                    "State": state,
                    "District": f"{state.split()[0]} District {idx:02d}",
                    "Latitude": round(lat + rng.normal(0, 1.2), 4),
                    "Longitude": round(lon + rng.normal(0, 1.2), 4),
                    RAW_POP_2001: pop_2001,
                    RAW_POP_2011: pop_2011,
                }
            )

    df = pd.DataFrame(rows)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    logging.info("Created %d sample districts at %s", len(df), output_path)
    print(f"OK: {len(df)} districts | states={df['State'].nunique()} | written to {output_path}")
    return df


def main() -> None:
    configure_logging()
    create_sample_census(DATA_PATH)


if __name__ == "__main__":
    main()
