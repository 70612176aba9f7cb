"""
Record types shared by the rolling engines.

Observation is the input row, WindowResult the per-row output.
Both are frozen: the aggregator never mutates what it is given.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class Observation:
    """A single (time, value, group) data point."""
    time: float
    value: float
    group: str = ""

    def get(self, field_name: str) -> Any:
        """Resolve a groupby field name against this observation."""
        from rollband.engines.validation import InvalidConfiguration

        if field_name not in OBSERVATION_FIELDS:
            raise InvalidConfiguration(
                f"Unknown groupby field '{field_name}'. "
                f"Available: {', '.join(OBSERVATION_FIELDS)}"
            )
        return getattr(self, field_name)


@dataclass(frozen=True)
class WindowResult:
    """Rolling band for one observation, in the observation's position."""
    time: float
    group: str
    rolling_average: float
    rolling_lower: float
    rolling_upper: float

    @property
    def band_width(self) -> float:
        return self.rolling_upper - self.rolling_lower

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


OBSERVATION_FIELDS = ('time', 'value', 'group')
