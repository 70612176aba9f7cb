"""
rollband Polars I/O Utilities

Tabular adapters between DataFrames and the rolling band engine, plus
atomic writes for exported band tables.

Key Functions:
    series_from_frame(df, ...) - polars/pandas DataFrame -> list of Observation
    results_to_frame(results)  - list of WindowResult -> polars DataFrame
    write_table_atomic(df, path) - Write to temp file, rename (atomic)
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

import pandas as pd
import polars as pl

from rollband.engines.types import Observation, WindowResult

logger = logging.getLogger(__name__)


RESULT_SCHEMA = {
    'time': pl.Float64,
    'group': pl.Utf8,
    'rolling_average': pl.Float64,
    'rolling_lower': pl.Float64,
    'rolling_upper': pl.Float64,
}

TABLE_FORMATS = ('.parquet', '.csv')


def series_from_frame(
    df: Union[pl.DataFrame, pd.DataFrame],
    time_col: str = 'time',
    value_col: str = 'value',
    group_col: Optional[str] = None,
) -> List[Observation]:
    """
    Convert a table to Observations, preserving row order.

    Args:
        df: polars or pandas DataFrame
        time_col: Numeric ordering column
        value_col: Numeric value column
        group_col: Optional categorical column (group "" when None)

    Returns:
        List of Observation

    Raises:
        KeyError: if a named column is missing

    Example:
        >>> series = series_from_frame(df, value_col='amplitude', group_col='class')
    """
    if isinstance(df, pd.DataFrame):
        df = pl.from_pandas(df)

    required = [time_col, value_col] + ([group_col] if group_col else [])
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise KeyError(f"Missing columns: {missing}. Available: {df.columns}")

    times = df[time_col].cast(pl.Float64).to_list()
    values = df[value_col].cast(pl.Float64).to_list()
    if group_col:
        groups = df[group_col].cast(pl.Utf8).to_list()
    else:
        groups = [""] * df.height

    return [
        Observation(time=t, value=v, group=g)
        for t, v, g in zip(times, values, groups)
    ]


def results_to_frame(results: Sequence[WindowResult]) -> pl.DataFrame:
    """
    Convert band results to a polars DataFrame (input order kept).

    Empty input gives an empty frame with the result schema.
    """
    if not results:
        return pl.DataFrame(schema=RESULT_SCHEMA)
    return pl.DataFrame([r.as_dict() for r in results], schema=RESULT_SCHEMA)


def write_table_atomic(
    df: pl.DataFrame,
    path: Union[str, Path],
    compression: str = "zstd",
) -> int:
    """
    Atomically write a band table.

    Writes to a temporary file first, then renames to target path.
    Format follows the suffix (.parquet or .csv).

    Args:
        df: Polars DataFrame to write
        path: Target path
        compression: Parquet compression algorithm (ignored for CSV)

    Returns:
        Number of rows written

    Raises:
        ValueError: for any other suffix

    Example:
        >>> write_table_atomic(results_to_frame(results), 'out/bands.parquet')
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in TABLE_FORMATS:
        raise ValueError(f"Unsupported table format '{suffix}'. Use one of: {', '.join(TABLE_FORMATS)}")

    path.parent.mkdir(parents=True, exist_ok=True)

    # Temp file in same directory (for atomic rename)
    temp_path = path.with_suffix(suffix + ".tmp")

    try:
        if suffix == '.parquet':
            df.write_parquet(temp_path, compression=compression)
        else:
            df.write_csv(temp_path)
        temp_path.replace(path)
    except Exception:
        if temp_path.exists():
            temp_path.unlink()
        raise

    logger.info(f"Wrote {len(df)} rows to {path}")
    return len(df)
