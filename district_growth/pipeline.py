"""Run the district growth analysis end to end."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from district_growth.config import DATA_PATH, LOG_DIR, N_CLUSTERS, OUTPUT_DIR, RANK_SIZE, SEED
from district_growth.data.growth import (
    add_growth_columns,
    bottom_growth,
    growth_correlations,
    state_growth_summary,
    top_growth,
)
from district_growth.data.load_census import describe_census, load_census, missing_value_counts
from district_growth.models.cluster import cluster_growth, cluster_profile
from district_growth.viz.map_view import save_growth_map
from district_growth.viz.plots import (
    plot_cluster_map,
    plot_growth_vs_latitude,
    plot_rank_bars,
    plot_state_growth,
)


@dataclass
class PipelineResult:
    districts: pd.DataFrame
    stats: pd.DataFrame
    missing_values: int
    top: pd.DataFrame
    bottom: pd.DataFrame
    states: pd.DataFrame
    correlations: pd.Series
    clusters: pd.DataFrame
    artifacts: dict[str, Path]


def _configure_logging() -> None:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=str(LOG_DIR / "pipeline.log"),
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def render_outputs(
    districts: pd.DataFrame,
    top: pd.DataFrame,
    bottom: pd.DataFrame,
    states: pd.DataFrame,
    output_dir: Path,
) -> dict[str, Path]:
    """Stage 5: write charts and the interactive map."""

    artifacts = {
        "rank_bars": output_dir / "growth_rank_bars.png",
        "state_growth": output_dir / "state_growth.png",
        "growth_vs_latitude": output_dir / "growth_vs_latitude.png",
        "cluster_map": output_dir / "cluster_map.png",
        "growth_map": output_dir / "growth_map.html",
    }
    plot_rank_bars(top, bottom, artifacts["rank_bars"])
    plot_state_growth(states, artifacts["state_growth"])
    plot_growth_vs_latitude(districts, artifacts["growth_vs_latitude"])
    plot_cluster_map(districts, artifacts["cluster_map"])
    save_growth_map(districts, artifacts["growth_map"])
    for name, path in artifacts.items():
        logging.info("Wrote %s -> %s", name, path)
    return artifacts


def run_pipeline(
    csv_path: Path,
    output_dir: Path = OUTPUT_DIR,
    n_clusters: int = N_CLUSTERS,
    seed: int = SEED,
) -> PipelineResult:
    """Thin orchestrator: load, derive, aggregate, cluster, render."""

    districts = load_census(csv_path)
    missing_values = int(missing_value_counts(districts).sum())

    districts = add_growth_columns(districts)
    stats = describe_census(districts)
    logging.info("Descriptive statistics:\n%s", stats.round(2).to_string())

    top = top_growth(districts, RANK_SIZE)
    bottom = bottom_growth(districts, RANK_SIZE)
    logging.info("Top districts: %s", top["District"].tolist())
    logging.info("Bottom districts: %s", bottom["District"].tolist())

    states = state_growth_summary(districts)
    correlations = growth_correlations(districts)
    logging.info("Growth correlations: %s", correlations.round(3).to_dict())

    districts = cluster_growth(districts, n_clusters=n_clusters, seed=seed)
    clusters = cluster_profile(districts)
    logging.info("Cluster profile:\n%s", clusters.to_string(index=False))

    artifacts = render_outputs(districts, top, bottom, states, output_dir)

    print(
        f"OK: {len(districts)} districts | states={len(states)} | missing values={missing_values} | "
        f"growth mean={districts['GrowthPercent'].mean():.2f}% | "
        f"top={top['District'].iloc[0] if not top.empty else '-'} | outputs={output_dir}"
    )
    return PipelineResult(
        districts=districts,
        stats=stats,
        missing_values=missing_values,
        top=top,
        bottom=bottom,
        states=states,
        correlations=correlations,
        clusters=clusters,
        artifacts=artifacts,
    )


def main() -> None:
    _configure_logging()
    if not DATA_PATH.exists():
        raise FileNotFoundError(
            f"Missing census file at {DATA_PATH}. Run python scripts/create_sample_census.py for sample data."
        )
    run_pipeline(DATA_PATH, OUTPUT_DIR)


if __name__ == "__main__":
    main()
