"""
Window Configuration Validation
===============================

Configuration problems fail loudly and up front.
No silent clamping. No partial results.

Usage:
    from rollband.engines.validation import validate_window_config, InvalidConfiguration

    validate_window_config(config)   # raises before any frame is computed
"""

import math
import numbers
from typing import Any

from rollband.engines.types import OBSERVATION_FIELDS


FRAME_MODES = ('time', 'rows')


class InvalidConfiguration(ValueError):
    """Raised when a WindowConfig cannot be used to compute bands."""
    pass


def validate_window_config(config: Any) -> None:
    """
    Check a WindowConfig before computing.

    Raises:
        InvalidConfiguration: on non-positive or non-finite width, an
            explicitly empty groupby list, an unknown groupby field, an
            unknown frame mode, or a confidence outside (0, 1).
    """
    width = config.width
    if isinstance(width, bool) or not isinstance(width, numbers.Real):
        raise InvalidConfiguration(f"Window width must be a number, got {width!r}")
    if not math.isfinite(width) or width <= 0:
        raise InvalidConfiguration(f"Window width must be positive and finite, got {width}")

    # None means absent (one partition); [] is a caller mistake
    if config.groupby is not None:
        if isinstance(config.groupby, str):
            raise InvalidConfiguration(
                f"groupby must be a list of field names, got the string {config.groupby!r}. "
                f"Use [{config.groupby!r}]."
            )
        if len(config.groupby) == 0:
            raise InvalidConfiguration(
                "groupby was given as an empty list. Omit it (None) to use a single partition."
            )
        for name in config.groupby:
            if not isinstance(name, str) or not name:
                raise InvalidConfiguration(f"groupby field names must be non-empty strings, got {name!r}")
            if name not in OBSERVATION_FIELDS:
                raise InvalidConfiguration(
                    f"Unknown groupby field '{name}'. "
                    f"Available: {', '.join(OBSERVATION_FIELDS)}"
                )

    if config.frame not in FRAME_MODES:
        raise InvalidConfiguration(
            f"Unknown frame mode '{config.frame}'. Available: {', '.join(FRAME_MODES)}"
        )

    confidence = config.confidence
    if not isinstance(confidence, numbers.Real) or not 0.0 < confidence < 1.0:
        raise InvalidConfiguration(f"Confidence must lie in (0, 1), got {confidence!r}")
