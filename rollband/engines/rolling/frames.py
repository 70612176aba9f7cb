"""
Rolling Frame Primitives.

Array-level building blocks for the rolling band engine:
frame bounds over sorted times (or row positions) and per-frame statistics.
"""

import numpy as np
from scipy import stats


def critical_value(confidence: float = 0.95) -> float:
    """Two-sided normal critical value (1.959964 for 95%)."""
    return float(stats.norm.ppf(0.5 + confidence / 2.0))


def frame_bounds(times: np.ndarray, half_width: float) -> tuple:
    """
    Compute inclusive time frames over sorted times.

    NaN times sort last and never match a comparison; each NaN-time
    row gets a frame of itself only.

    Args:
        times: Times sorted ascending (NaNs last, as np.argsort leaves them)
        half_width: Frame spans [t - half_width, t + half_width]

    Returns:
        (lo, hi) index arrays; frame i is times[lo[i]:hi[i]]
    """
    times = np.asarray(times, dtype=float)
    lo = np.searchsorted(times, times - half_width, side='left')
    hi = np.searchsorted(times, times + half_width, side='right')

    missing = np.isnan(times)
    if missing.any():
        own = np.arange(len(times))
        lo = np.where(missing, own, lo)
        hi = np.where(missing, own + 1, hi)
    return lo, hi


def row_frame_bounds(n: int, half_rows: int) -> tuple:
    """
    Compute row-position frames [i - half_rows, i + half_rows], clipped to [0, n).

    Returns:
        (lo, hi) index arrays, same convention as frame_bounds
    """
    # Offsets past n cover the whole partition; clamp before numpy sees them
    half_rows = min(int(half_rows), n)
    idx = np.arange(n)
    lo = np.clip(idx - half_rows, 0, n)
    hi = np.clip(idx + half_rows + 1, 0, n)
    return lo, hi


def frame_stats(values: np.ndarray, lo: np.ndarray, hi: np.ndarray, z: float) -> dict:
    """
    Compute mean and confidence bounds for each frame.

    Args:
        values: Values aligned with the arrays that produced lo/hi
        lo, hi: Frame index bounds (half-open)
        z: Critical value for the confidence interval

    Returns:
        dict with 'rolling_average', 'rolling_lower', 'rolling_upper' arrays
    """
    values = np.asarray(values, dtype=float)
    n = len(values)

    average = np.full(n, np.nan)
    lower = np.full(n, np.nan)
    upper = np.full(n, np.nan)

    for i in range(n):
        chunk = values[lo[i]:hi[i]]
        mean, margin = band_margin(chunk, z)
        average[i] = mean
        lower[i] = mean - margin
        upper[i] = mean + margin

    return {
        'rolling_average': average,
        'rolling_lower': lower,
        'rolling_upper': upper,
    }


def band_margin(chunk: np.ndarray, z: float) -> tuple:
    """
    Mean and half-width of the normal-approximation interval for one frame.

    Frames with fewer than two points have no sample std: margin is 0.
    """
    count = len(chunk)
    mean = float(np.mean(chunk))
    if count < 2:
        return mean, 0.0
    std = float(np.std(chunk, ddof=1))
    return mean, z * std / np.sqrt(count)
