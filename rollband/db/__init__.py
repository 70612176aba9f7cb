"""rollband tabular I/O (polars)."""

from rollband.db.polars_io import (
    series_from_frame,
    results_to_frame,
    write_table_atomic,
)

__all__ = ['series_from_frame', 'results_to_frame', 'write_table_atomic']
