"""
Rolling Band Engine
===================

Centered rolling mean with a two-sided confidence band, per observation.

For each observation o in its partition:
    F(o)            = { o' : |o'.time - o.time| <= width/2 }   (frame='time')
    rolling_average = mean(F(o).value)
    rolling_lower   = mean - z * std / sqrt(|F(o)|)
    rolling_upper   = mean + z * std / sqrt(|F(o)|)

std is the sample std (ddof=1); frames with a single point get a
zero-width band. An observation with a NaN time is its own frame.
Results come back in input order, one per observation.

Usage:
    from rollband.engines.rolling.rolling_band import compute
    from rollband.config.windows import WindowConfig

    results = compute(series, WindowConfig(width=2.0, groupby=['group']))
"""

import logging
import math
from typing import Dict, List, Sequence, Tuple

import numpy as np

from rollband.config.windows import WindowConfig
from rollband.engines.rolling.frames import (
    band_margin,
    critical_value,
    frame_bounds,
    frame_stats,
    row_frame_bounds,
)
from rollband.engines.types import Observation, WindowResult
from rollband.engines.validation import validate_window_config


logger = logging.getLogger(__name__)


def partition(series: Sequence[Observation], groupby) -> Dict[Tuple, List[int]]:
    """
    Split input positions by groupby key, keeping relative order.

    groupby=None puts every observation in one partition.
    """
    partitions: Dict[Tuple, List[int]] = {}
    for i, obs in enumerate(series):
        key = tuple(obs.get(name) for name in groupby) if groupby is not None else ()
        partitions.setdefault(key, []).append(i)
    return partitions


def compute(series: Sequence[Observation], config: WindowConfig) -> List[WindowResult]:
    """
    Compute rolling bands for every observation.

    Args:
        series: Observations, ideally time-ascending within each group
        config: WindowConfig (validated here, before any computation)

    Returns:
        List of WindowResult, same length and order as series

    Raises:
        InvalidConfiguration: if config is unusable
    """
    validate_window_config(config)

    n = len(series)
    if n == 0:
        return []

    z = critical_value(config.confidence)
    partitions = partition(series, config.groupby)
    logger.debug(
        f"Rolling bands: {n} observations, {len(partitions)} partition(s), "
        f"frame={config.frame}, width={config.width}"
    )

    average = np.full(n, np.nan)
    lower = np.full(n, np.nan)
    upper = np.full(n, np.nan)

    for indices in partitions.values():
        idx = np.asarray(indices)
        times = np.array([series[i].time for i in indices], dtype=float)
        values = np.array([series[i].value for i in indices], dtype=float)

        if config.frame == 'rows':
            # Row frames follow input order within the partition
            lo, hi = row_frame_bounds(len(idx), config.half_rows)
            bands = frame_stats(values, lo, hi, z)
        else:
            # Stable sort: input is only assumed time-ascending
            order = np.argsort(times, kind='stable')
            lo, hi = frame_bounds(times[order], config.half_width)
            sorted_bands = frame_stats(values[order], lo, hi, z)
            bands = {}
            for name, arr in sorted_bands.items():
                unsorted = np.empty_like(arr)
                unsorted[order] = arr
                bands[name] = unsorted

        average[idx] = bands['rolling_average']
        lower[idx] = bands['rolling_lower']
        upper[idx] = bands['rolling_upper']

    return [
        WindowResult(
            time=obs.time,
            group=obs.group,
            rolling_average=float(average[i]),
            rolling_lower=float(lower[i]),
            rolling_upper=float(upper[i]),
        )
        for i, obs in enumerate(series)
    ]


def compute_reference(series: Sequence[Observation], config: WindowConfig) -> List[WindowResult]:
    """
    Brute-force rolling bands: every frame is rebuilt by scanning its partition.

    Same contract as compute(); used to check the sorted sweep.
    """
    validate_window_config(config)

    if len(series) == 0:
        return []

    z = critical_value(config.confidence)
    partitions = partition(series, config.groupby)
    results: List[WindowResult] = [None] * len(series)

    for indices in partitions.values():
        for pos, i in enumerate(indices):
            obs = series[i]
            if config.frame == 'rows':
                members = indices[max(0, pos - config.half_rows):pos + config.half_rows + 1]
            elif math.isnan(obs.time):
                members = [i]
            else:
                members = [
                    j for j in indices
                    if obs.time - config.half_width <= series[j].time <= obs.time + config.half_width
                ]
            chunk = np.array([series[j].value for j in members], dtype=float)
            mean, margin = band_margin(chunk, z)
            results[i] = WindowResult(
                time=obs.time,
                group=obs.group,
                rolling_average=mean,
                rolling_lower=mean - margin,
                rolling_upper=mean + margin,
            )

    return results
