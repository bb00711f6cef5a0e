"""
Configuration Settings Module
==============================

Dataclass-based configuration with validation and defaults.
Every section is frozen: a planning run reads its parameters, it never
changes them. Use ``Config.with_overrides`` or ``dataclasses.replace``
to derive variants.
"""

from dataclasses import dataclass, field, asdict, replace
from typing import Dict, Optional, Any, Tuple


class ConfigError(ValueError):
    """Raised when a configuration value is out of range"""


def _require(condition: bool, message: str):
    if not condition:
        raise ConfigError(message)


@dataclass(frozen=True)
class TerrainConfig:
    """Height field (simplex noise) parameters"""
    seed: int = 0
    noise_scale: float = 100.0  # world units per noise unit
    amplitude: float = 10.0     # meters
    octaves: int = 1

    def __post_init__(self):
        _require(self.noise_scale > 0, 'noise_scale must be positive')
        _require(self.octaves >= 1, 'octaves must be >= 1')


@dataclass(frozen=True)
class MotionConfig:
    """Vehicle motion constraints per step"""
    max_turn_deg: int = 5
    leg_distance: float = 20.0  # meters
    signed_heading: bool = False  # atan2 headings instead of unsigned acos

    def __post_init__(self):
        _require(self.max_turn_deg >= 0, 'max_turn_deg must be >= 0')
        _require(self.leg_distance > 0, 'leg_distance must be positive')


@dataclass(frozen=True)
class CostConfig:
    """Integer encoding of heights and slope costs"""
    height_multiplier: int = 1000
    slope_cost_scale: float = 1000.0

    def __post_init__(self):
        _require(self.height_multiplier > 0, 'height_multiplier must be positive')
        _require(self.slope_cost_scale >= 0, 'slope_cost_scale must be >= 0')


@dataclass(frozen=True)
class MapConfig:
    """Canvas dimensions; width also defines the goal boundary"""
    width: int = 512
    height: int = 512

    def __post_init__(self):
        _require(self.width > 0 and self.height > 0, 'canvas dimensions must be positive')

    @property
    def start_position(self) -> Tuple[int, int]:
        """Entry point on the left edge, vertically centred"""
        return (0, int(self.height / 2))


@dataclass(frozen=True)
class SearchConfig:
    """A* search parameters"""
    heuristic_weight: float = 1.0
    max_expansions: Optional[int] = 5_000_000  # None disables the bound

    def __post_init__(self):
        _require(self.heuristic_weight >= 0, 'heuristic_weight must be >= 0')
        _require(self.max_expansions is None or self.max_expansions > 0,
                 'max_expansions must be positive or None')


@dataclass(frozen=True)
class VisualizationConfig:
    """Rendering of the terrain background and route overlay"""
    background_gain: float = 10.0
    background_offset: float = 100.0
    path_color: str = 'red'
    path_linewidth: float = 1.0
    dpi: int = 100
    image_name: str = 'result_image.png'


@dataclass(frozen=True)
class Config:
    """
    Master configuration class combining all sub-configurations.

    Usage:
        config = Config()
        config = Config(motion=MotionConfig(max_turn_deg=10))
        config = config.with_overrides(map=MapConfig(width=256, height=256))
    """
    terrain: TerrainConfig = field(default_factory=TerrainConfig)
    motion: MotionConfig = field(default_factory=MotionConfig)
    cost: CostConfig = field(default_factory=CostConfig)
    map: MapConfig = field(default_factory=MapConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    visualization: VisualizationConfig = field(default_factory=VisualizationConfig)

    verbose: bool = False

    _SECTIONS = {
        'terrain': TerrainConfig,
        'motion': MotionConfig,
        'cost': CostConfig,
        'map': MapConfig,
        'search': SearchConfig,
        'visualization': VisualizationConfig,
    }

    def with_overrides(self, **changes) -> 'Config':
        """Return a copy with whole sections or top-level fields replaced"""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'Config':
        """Create Config from a (possibly partial) nested dictionary"""
        kwargs = {}
        for key, value in d.items():
            section = cls._SECTIONS.get(key)
            if section is not None:
                kwargs[key] = section(**value) if isinstance(value, dict) else value
            elif key == 'verbose':
                kwargs[key] = bool(value)
            else:
                raise ConfigError(f'unknown configuration key: {key!r}')
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Export config to dictionary"""
        return asdict(self)
