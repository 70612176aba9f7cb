"""
rollband Window Configuration
=============================
Typed replacement for the declarative window transform a chart compiler
consumes (window ops + frame + groupby).

The config is validated at the API boundary (rollband.engines.validation)
and can be exported back to the transform dictionary for display.

Usage:
    from rollband.config.windows import WindowConfig

    config = WindowConfig(width=20, groupby=['group'], frame='rows')
    print(config.to_json())
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional
import hashlib
import json


@dataclass
class WindowConfig:
    """
    Rolling window configuration.

    width:      Full frame width; the frame is symmetric (width/2 each side)
    groupby:    Observation fields to partition on. None = single partition,
                [] is rejected by validation
    frame:      'time' frames on the time axis, 'rows' on partition positions
    confidence: Confidence level for the rolling_lower / rolling_upper band
    """

    width: float

    groupby: Optional[List[str]] = None

    frame: Literal['time', 'rows'] = 'time'

    confidence: float = 0.95

    @property
    def half_width(self) -> float:
        return self.width / 2.0

    @property
    def half_rows(self) -> int:
        """Row offset on each side in 'rows' mode."""
        return int(self.width // 2)

    def validate(self) -> 'WindowConfig':
        """Validate and return self (raises InvalidConfiguration)."""
        from rollband.engines.validation import validate_window_config
        validate_window_config(self)
        return self

    def to_transform(self, field_names: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        Export as a declarative window transform.

        The mean/ci0/ci1 ops produce the same three fields as WindowResult.
        The transform frame is a row offset, so only frame='rows' configs
        can be exported.

        Args:
            field_names: Observation field -> table column, e.g.
                {'value': 'amplitude', 'group': 'class'}. Unmapped fields
                keep their own name.

        Raises:
            InvalidConfiguration: for frame='time' or an invalid config
        """
        from rollband.engines.validation import InvalidConfiguration

        self.validate()
        if self.frame != 'rows':
            raise InvalidConfiguration(
                "Only frame='rows' configs export to a window transform; "
                "its frame is a row offset, not a time span."
            )

        names = field_names or {}
        value_col = names.get('value', 'value')
        transform: Dict[str, Any] = {
            'window': [
                {'field': value_col, 'op': 'mean', 'as': 'rolling_average'},
                {'field': value_col, 'op': 'ci0', 'as': 'rolling_lower'},
                {'field': value_col, 'op': 'ci1', 'as': 'rolling_upper'},
            ],
            'frame': [-self.half_width, self.half_width],
        }
        if self.groupby is not None:
            transform['groupby'] = [names.get(name, name) for name in self.groupby]
        return transform

    def to_json(self, field_names: Optional[Dict[str, str]] = None, indent: int = 2) -> str:
        return json.dumps(self.to_transform(field_names), indent=indent)

    @property
    def config_hash(self) -> str:
        """Generate short hash for this config (for tagging exported tables)."""
        config_dict = {
            'width': self.width,
            'groupby': self.groupby,
            'frame': self.frame,
            'confidence': self.confidence,
        }
        config_str = json.dumps(config_dict, sort_keys=True)
        return hashlib.md5(config_str.encode()).hexdigest()[:8]

    def __repr__(self) -> str:
        return (
            f"WindowConfig(width={self.width}, groupby={self.groupby}, "
            f"frame={self.frame}, confidence={self.confidence})"
        )
