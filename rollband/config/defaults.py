"""
rollband Defaults Loader
========================

Loads presentation defaults from config/defaults.yaml: noise level and
rolling width (with their slider ranges), sampling grid, seed, and the
default window settings.

Usage:
    from rollband.config.defaults import load_defaults

    defaults = load_defaults()
    defaults.width.default      # 20
    defaults.window_config()    # WindowConfig(width=20, groupby=['group'], ...)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from rollband.config.windows import WindowConfig

logger = logging.getLogger(__name__)


# =============================================================================
# DATA CLASSES
# =============================================================================

@dataclass
class SliderRange:
    """A bounded, stepped parameter with a default."""
    name: str
    default: float
    min: float
    max: float
    step: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def clamp(self, value: float) -> float:
        return min(self.max, max(self.min, value))

    def __repr__(self) -> str:
        return f"SliderRange({self.name}: {self.min}..{self.max} step {self.step}, default={self.default})"


@dataclass
class PresentationDefaults:
    """Complete defaults configuration."""
    noise: SliderRange
    width: SliderRange
    sample_step: float
    sample_stop: float
    seed: int
    groupby: Optional[List[str]]
    frame: str
    confidence: float

    def window_config(self, width: Optional[float] = None) -> WindowConfig:
        """Build a WindowConfig from the defaults (width overridable)."""
        return WindowConfig(
            width=self.width.default if width is None else width,
            groupby=list(self.groupby) if self.groupby is not None else None,
            frame=self.frame,
            confidence=self.confidence,
        )

    def as_dict(self) -> Dict[str, Any]:
        return {
            'noise': vars(self.noise),
            'width': vars(self.width),
            'sample_step': self.sample_step,
            'sample_stop': self.sample_stop,
            'seed': self.seed,
            'groupby': self.groupby,
            'frame': self.frame,
            'confidence': self.confidence,
        }


# =============================================================================
# CONFIG LOADING
# =============================================================================

_defaults_cache: Optional[PresentationDefaults] = None


def _find_defaults_path() -> Path:
    """Find the defaults.yaml shipped next to this module."""
    config_path = Path(__file__).parent / "defaults.yaml"
    if config_path.exists():
        return config_path
    raise FileNotFoundError(f"Could not find defaults.yaml config at {config_path}")


def _parse_range(name: str, cfg: Dict[str, Any]) -> SliderRange:
    return SliderRange(
        name=name,
        default=cfg['default'],
        min=cfg['min'],
        max=cfg['max'],
        step=cfg['step'],
    )


def load_defaults(
    path: Optional[Union[str, Path]] = None,
    force_reload: bool = False,
) -> PresentationDefaults:
    """
    Load presentation defaults from YAML.

    Args:
        path: Optional explicit YAML path (not cached)
        force_reload: If True, reload the packaged file even if cached

    Returns:
        PresentationDefaults
    """
    global _defaults_cache

    if path is None and _defaults_cache is not None and not force_reload:
        return _defaults_cache

    config_path = Path(path) if path is not None else _find_defaults_path()
    logger.info(f"Loading defaults from {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f)

    sampling = raw.get('sampling', {})
    window = raw.get('window', {})

    defaults = PresentationDefaults(
        noise=_parse_range('noise', raw['noise']),
        width=_parse_range('width', raw['width']),
        sample_step=sampling.get('step', 0.01),
        sample_stop=sampling.get('stop', 6.283185307179586),
        seed=sampling.get('seed', 42),
        groupby=window.get('groupby'),
        frame=window.get('frame', 'time'),
        confidence=window.get('confidence', 0.95),
    )

    if path is None:
        _defaults_cache = defaults

    return defaults


def clear_defaults_cache() -> None:
    """Clear the cached defaults (forces reload on next access)."""
    global _defaults_cache
    _defaults_cache = None
