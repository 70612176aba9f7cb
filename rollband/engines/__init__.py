"""
rollband Engines
================

    - types.py:       Observation / WindowResult records
    - validation.py:  InvalidConfiguration and config checks
    - rolling/:       Rolling band engine and frame primitives
"""

from rollband.engines.types import Observation, WindowResult
from rollband.engines.validation import InvalidConfiguration, validate_window_config

__all__ = [
    'Observation',
    'WindowResult',
    'InvalidConfiguration',
    'validate_window_config',
]
