"""
Map generation configuration.

MapConfig gathers every tunable parameter of a generation run. Defaults come
from the module constants in map4x.config.
"""
from dataclasses import dataclass
from typing import Optional

from map4x.config import (
    CENTER_POINTS_DENSITY, MAP_COLS, MAP_ROWS, RESOURCE_PROBABILITY, get_logger
)
from map4x.maps.errors import ConfigurationError

logger = get_logger(__name__)


@dataclass
class MapConfig:
    """
    Parameters of a generation run.

    Attributes:
        rows: Map height in tiles
        cols: Map width in tiles
        seed: Seed for the generator's random.Random (None = unseeded)
        use_pcg: Use the tessellation generator instead of the random one
        resource_probability: Chance of adding each further resource to a tile
        center_points_density: Center points per tile on large maps
    """

    rows: int = MAP_ROWS
    cols: int = MAP_COLS
    seed: Optional[int] = None
    use_pcg: bool = True
    resource_probability: float = RESOURCE_PROBABILITY
    center_points_density: float = CENTER_POINTS_DENSITY

    def __post_init__(self):
        if self.rows < 0 or self.cols < 0:
            logger.error(f"Invalid map size {self.rows}x{self.cols}")
            raise ConfigurationError(f"Map size must be >= 0, got {self.rows}x{self.cols}")
        if not 0.0 <= self.resource_probability <= 1.0:
            raise ConfigurationError(
                f"resource_probability must be in [0, 1], got {self.resource_probability}"
            )
        if self.center_points_density < 0:
            raise ConfigurationError(
                f"center_points_density must be >= 0, got {self.center_points_density}"
            )

    @property
    def area(self) -> int:
        return self.rows * self.cols
