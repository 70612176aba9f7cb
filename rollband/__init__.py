"""
rollband - Rolling Window Bands
===============================

Centered rolling mean and confidence band for every observation
of a (grouped) numeric series.

Architecture:
    - engines/rolling/:  Rolling band engine (compute / compute_reference)
    - engines/types.py:  Observation / WindowResult
    - config/:           WindowConfig and YAML presentation defaults
    - data/:             Seeded synthetic noisy sine/cosine series
    - db/:               polars adapters and atomic table writes
    - cli.py:            Command line interface

Usage:
    # CLI
    python -m rollband bands --width 20 --frame rows

    # Python
    from rollband import compute, WindowConfig
    results = compute(series, WindowConfig(width=2.0, groupby=['group']))
"""

__version__ = "0.1.0"

# Lazy imports to avoid circular dependencies
__all__ = [
    'compute', 'compute_reference', 'WindowConfig', 'Observation', 'WindowResult',
    'InvalidConfiguration', 'engines', 'config', 'data', 'db', '__version__',
]


def __getattr__(name):
    """Lazy import of submodules and the public API."""
    if name in ('compute', 'compute_reference'):
        from rollband.engines.rolling import rolling_band
        return getattr(rolling_band, name)
    elif name == 'WindowConfig':
        from rollband.config.windows import WindowConfig
        return WindowConfig
    elif name in ('Observation', 'WindowResult'):
        from rollband.engines import types
        return getattr(types, name)
    elif name == 'InvalidConfiguration':
        from rollband.engines.validation import InvalidConfiguration
        return InvalidConfiguration
    elif name in ('engines', 'config', 'data', 'db'):
        import importlib
        return importlib.import_module(f'rollband.{name}')
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
