"""rollband Configuration Module."""

from rollband.config.windows import WindowConfig

from rollband.config.defaults import (
    SliderRange,
    PresentationDefaults,
    load_defaults,
    clear_defaults_cache,
)

__all__ = [
    # Window config
    'WindowConfig',
    # Presentation defaults (YAML-based)
    'SliderRange',
    'PresentationDefaults',
    'load_defaults',
    'clear_defaults_cache',
]
