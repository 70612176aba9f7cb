"""Synthetic data sources for rolling band demos and tests."""

from rollband.data.synthetic import FRAME_FIELD_NAMES, generate_series, generate_frame, sample_times

__all__ = ['FRAME_FIELD_NAMES', 'generate_series', 'generate_frame', 'sample_times']
