"""Aggregate raw timings into per-benchmark medians."""

import subprocess
from datetime import UTC, datetime
from pathlib import Path

import polars as pl

import resultish as rs

from ._registery import BENCHMARKS, Benchmark, Row, collect_raw_timings

RESULTS_DIR = Path("benchmarks", "results")


def run_pipeline() -> pl.DataFrame:
    """Run every registered benchmark and return one median row per variant."""
    return (
        _registered()
        .map(collect_raw_timings)
        .map(_compute_all_stats)
        .unwrap()
        .collect()
    )


def persist(df: pl.DataFrame, path: Path | None = None) -> Path:
    """Write results as ndjson, one file per run unless a path is given."""
    if path is None:
        RESULTS_DIR.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(tz=UTC).strftime("%Y%m%dT%H%M%S")
        path = RESULTS_DIR.joinpath(f"{stamp}.ndjson")
    df.write_ndjson(path)
    return path


def _registered() -> rs.Result[list[Benchmark], str]:
    if not BENCHMARKS:
        return rs.Err("No benchmarks registered!")
    return rs.Ok(BENCHMARKS)


def _get_git_hash() -> rs.Result[str, Exception]:
    """Get current git commit hash."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "HEAD"],  # noqa: S607
            capture_output=True,
            text=True,
            check=True,
        )
        return rs.Ok(result.stdout.strip())
    except (OSError, subprocess.CalledProcessError) as e:
        return rs.Err(e)


def _compute_all_stats(raw_rows: list[Row]) -> pl.LazyFrame:
    """Compute median stats from raw timings."""
    now = datetime.now(tz=UTC)
    return (
        pl.LazyFrame(
            [(r.category, r.name, r.size, r.run_idx, r.time) for r in raw_rows],
            schema=["category", "name", "size", "run_idx", "time"],
            orient="row",
        )
        .group_by("category", "name", "size")
        .agg(
            pl.col("time").median().alias("median"),
            pl.len().alias("runs"),
        )
        .with_columns(
            pl.lit(now).alias("timestamp"),
            pl.lit(_get_git_hash().unwrap_or("unknown")).alias("git_hash"),
        )
        .sort("category", "name", "size")
        .select("category", "name", "size", "runs", "median", "timestamp", "git_hash")
    )
