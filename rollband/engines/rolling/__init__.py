"""
rollband Rolling Engines - Observation-level computations.

Each engine computes values for every observation (rolling frame).
"""

from . import frames
from . import rolling_band

__all__ = [
    'frames',
    'rolling_band',
]
