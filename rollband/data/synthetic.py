"""
Synthetic noisy sine/cosine series.

Group "A" is sin(t) + sigma * N(0, 1), group "B" is cos(t) + sigma * N(0, 1),
sampled on t = 0, step, 2*step, ... <= stop.

The random generator is always passed in; nothing here touches global
random state, so a seeded generator gives a reproducible series.

Usage:
    import numpy as np
    from rollband.data.synthetic import generate_series

    series = generate_series(np.random.default_rng(42), sigma=0.2)
"""

from typing import List

import numpy as np
import polars as pl

from rollband.engines.types import Observation


TWO_PI = 2.0 * np.pi

# Observation field -> generate_frame column
FRAME_FIELD_NAMES = {'time': 'time', 'value': 'amplitude', 'group': 'class'}


def sample_times(step: float = 0.01, stop: float = TWO_PI) -> np.ndarray:
    """Inclusive grid 0, step, ..., <= stop."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    n = int(np.floor(stop / step + 1e-9)) + 1
    return np.arange(n) * step


def _noisy_curves(rng: np.random.Generator, sigma: float, step: float, stop: float) -> tuple:
    if sigma < 0:
        raise ValueError(f"sigma must be non-negative, got {sigma}")
    t = sample_times(step, stop)
    a = np.sin(t) + sigma * rng.standard_normal(len(t))
    b = np.cos(t) + sigma * rng.standard_normal(len(t))
    return t, a, b


def generate_series(
    rng: np.random.Generator,
    sigma: float = 0.2,
    step: float = 0.01,
    stop: float = TWO_PI,
) -> List[Observation]:
    """
    Generate the two-class noisy series as Observations.

    Args:
        rng: numpy Generator (e.g. np.random.default_rng(seed))
        sigma: Noise standard deviation
        step: Sampling step on the time axis
        stop: Last time (inclusive, up to float tolerance)

    Returns:
        All "A" observations followed by all "B" observations
    """
    t, a, b = _noisy_curves(rng, sigma, step, stop)
    series = [Observation(time=float(ti), value=float(vi), group="A") for ti, vi in zip(t, a)]
    series.extend(Observation(time=float(ti), value=float(vi), group="B") for ti, vi in zip(t, b))
    return series


def generate_frame(
    rng: np.random.Generator,
    sigma: float = 0.2,
    step: float = 0.01,
    stop: float = TWO_PI,
) -> pl.DataFrame:
    """Same data as generate_series, as a (time, amplitude, class) table."""
    t, a, b = _noisy_curves(rng, sigma, step, stop)
    return pl.DataFrame({
        FRAME_FIELD_NAMES['time']: np.concatenate([t, t]),
        FRAME_FIELD_NAMES['value']: np.concatenate([a, b]),
        FRAME_FIELD_NAMES['group']: ['A'] * len(t) + ['B'] * len(t),
    })
