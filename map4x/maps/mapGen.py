"""
Map generator: uniform random maps and tessellated (PCG) maps.

This module implements MapGenerator which exposes:
    generator = MapGenerator(terrains, resources, MapConfig(seed=42))
    grid = generator.generate()
    stats = generator.get_statistics()

and the functional shortcuts generate_random() / generate_tessellated().
"""
import random
from typing import Dict, List, Optional, Tuple

import numpy as np

from map4x.config import MIN_PCG_TILES, SMALL_MAP_SCALE, SMALL_MAP_TILES, PerformanceTimer, get_map_logger
from map4x.maps.config import MapConfig
from map4x.maps.errors import ConfigurationError
from map4x.maps.grid import Grid
from map4x.maps.terrain import ResourceRegistry, TerrainRegistry
from map4x.maps.tile import TERRAIN_MASK, TileCodec
from map4x.maps.utils import all_positions, nearest_center, shuffle

CenterPoint = Tuple[Tuple[int, int], int]


class MapGenerator:
    """
    Map generator class.

    - Terrain and resource registries are fixed at construction.
    - Uses an explicit random.Random: the one passed in, or one seeded from
      config.seed. The same seed always yields the same maps.
    - Each create_* call returns a fresh, frozen Grid.
    """
    def __init__(self, terrains, resources, config: MapConfig = None, rng: random.Random = None):
        self.config = config or MapConfig()
        self.logger = get_map_logger()

        self.terrains = TerrainRegistry.coerce(terrains)
        self.resources = ResourceRegistry.coerce(resources)
        if not self.terrains:
            self.logger.error("Generator needs at least one terrain")
            raise ConfigurationError("Terrain registry is empty")
        self.codec = TileCodec.for_registries(self.terrains, self.resources)
        self._resource_bits = self.codec.resource_bits

        # None when the caller supplies the rng
        self.seed = self.config.seed if rng is None else None
        if rng is not None:
            self.rng = rng
        elif self.config.seed is not None:
            self.rng = random.Random(self.config.seed)
            self.logger.info(f"Generator initialized with seed: {self.config.seed}")
        else:
            self.rng = random.Random()
            self.logger.info("Generator initialized with random seed")

        # Last run state
        self.grid: Optional[Grid] = None
        self.center_points: List[CenterPoint] = []
        self.last_method: Optional[str] = None

        self.logger.debug(
            f"Registries: {len(self.terrains)} terrains, {len(self.resources)} resources"
        )

    # -------------------------
    # Entry point
    # -------------------------
    def generate(self) -> Grid:
        """Generate a map with the size and method from the config."""
        if self.config.use_pcg:
            return self.create_pcg_map(self.config.rows, self.config.cols)
        return self.create_random_map(self.config.rows, self.config.cols)

    # -------------------------
    # Random map
    # -------------------------
    def create_random_map(self, rows: int, cols: int) -> Grid:
        """Every cell gets an independent random terrain and random resources."""
        with PerformanceTimer(self.logger, f"random map {rows}x{cols}"):
            grid = Grid(rows, cols)
            terrain_count = len(self.terrains)
            for r in range(rows):
                for c in range(cols):
                    tile = self.rng.randrange(terrain_count)
                    grid[r, c] = self._add_random_resources(tile)

        self.center_points = []
        return self._finish(grid, "random")

    # -------------------------
    # Tessellated (PCG) map
    # -------------------------
    def create_pcg_map(self, rows: int, cols: int) -> Grid:
        """
        Grow terrain regions from random center points.

        Every tile takes the terrain of its nearest center point, measuring
        distance around the map edges so regions wrap seamlessly. Maps with
        fewer than MIN_PCG_TILES tiles are generated by create_random_map.
        """
        total = rows * cols
        if total < MIN_PCG_TILES:
            self.logger.debug(f"{rows}x{cols} map too small to tessellate, using random map")
            return self.create_random_map(rows, cols)

        num_centers = self.center_point_count(total)
        if not 1 <= num_centers <= total:
            self.logger.error(f"Cannot place {num_centers} center points on {total} tiles")
            raise ConfigurationError(
                f"center_points_density {self.config.center_points_density} gives "
                f"{num_centers} center points for {total} tiles"
            )

        with PerformanceTimer(self.logger, f"PCG map {rows}x{cols}"):
            centers = self._place_center_points(rows, cols, num_centers)
            self.logger.debug(f"Placed {len(centers)} center points")

            # Centers are at distance 0 from themselves, so they keep their own terrain
            center_pos = np.array([pos for pos, _ in centers], dtype=np.int64)
            center_terrain = np.array([t for _, t in centers], dtype=np.int64)
            closest = nearest_center(all_positions(rows, cols), center_pos, rows, cols)
            terrain_map = center_terrain[closest].reshape(rows, cols)

            grid = Grid(rows, cols)
            for r in range(rows):
                for c in range(cols):
                    grid[r, c] = self._add_random_resources(int(terrain_map[r, c]))

        self.center_points = centers
        return self._finish(grid, "pcg")

    def center_point_count(self, total: int) -> int:
        """
        Number of center points for a map of ``total`` tiles.

        The product is rounded with the built-in round() rather than
        truncated, so maps saved by truncating generators can differ:
        14 tiles give 10 centers here instead of 9.
        """
        density = self.config.center_points_density
        if total > SMALL_MAP_TILES:
            return round(total * density)
        # Integer division happens before the multiply; existing maps depend on it
        return round(total * density * (SMALL_MAP_SCALE // total))

    def _place_center_points(self, rows: int, cols: int, count: int) -> List[CenterPoint]:
        """Pick ``count`` distinct random tiles, each with a random terrain, in acceptance order."""
        taken = set()
        centers: List[CenterPoint] = []
        terrain_count = len(self.terrains)
        while len(centers) < count:
            pos = (self.rng.randrange(rows), self.rng.randrange(cols))
            if pos in taken:
                continue
            taken.add(pos)
            centers.append((pos, self.rng.randrange(terrain_count)))
        return centers

    # -------------------------
    # Resources
    # -------------------------
    def _add_random_resources(self, tile: int) -> int:
        """
        OR a random number of resources into ``tile``.

        Resources are added in a freshly shuffled order while random draws
        stay below resource_probability, up to every resource once.
        """
        order = list(self._resource_bits)
        shuffle(order, self.rng)
        p = self.config.resource_probability
        added = 0
        while self.rng.random() < p and added < len(order):
            tile |= order[added]
            added += 1
        return tile

    def _finish(self, grid: Grid, method: str) -> Grid:
        grid.freeze()
        self.grid = grid
        self.last_method = method
        self.logger.info(f"Map complete: {grid.rows}x{grid.cols} ({method})")
        return grid

    # -------------------------
    # Statistics helpers
    # -------------------------
    def get_statistics(self, grid: Grid = None) -> Dict:
        """Return summary statistics about ``grid`` (default: the last generated map)."""
        grid = grid if grid is not None else self.grid
        if grid is None:
            raise ValueError("No map generated yet")

        codes = grid.to_array()
        terrain_idx = (codes & np.uint64(TERRAIN_MASK)).astype(np.int64).ravel()
        if terrain_idx.size:
            # raises RegistryMismatchError for unknown terrains
            self.codec.terrain_of(int(terrain_idx.max()))
        terrain_counts = np.bincount(terrain_idx, minlength=len(self.terrains))

        stats = {
            'rows': grid.rows,
            'cols': grid.cols,
            'area': grid.area,
            'seed': self.seed,
            'method': self.last_method if grid is self.grid else None,
            'center_points': len(self.center_points) if grid is self.grid else None,
            'terrains': {name: int(terrain_counts[i]) for i, name in enumerate(self.terrains)},
            'resources': {},
        }
        for i, name in enumerate(self.resources):
            stats['resources'][name] = int(np.count_nonzero(codes & np.uint64(self._resource_bits[i])))
        stats['resource_total'] = sum(stats['resources'].values())
        return stats


# -------------------------
# Functional API
# -------------------------
def generate_random(rows: int, cols: int, terrains, resources, rng: random.Random = None,
                    config: MapConfig = None) -> Grid:
    """Generate a uniformly random map."""
    return MapGenerator(terrains, resources, config=config, rng=rng).create_random_map(rows, cols)


def generate_tessellated(rows: int, cols: int, terrains, resources, rng: random.Random = None,
                         config: MapConfig = None) -> Grid:
    """Generate a tessellated (PCG) map."""
    return MapGenerator(terrains, resources, config=config, rng=rng).create_pcg_map(rows, cols)
