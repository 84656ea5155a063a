"""
Maps Package - Tile Codec, Map Generators and Map Files

This package generates 2D tile maps, packs each tile into a single integer
and saves maps in the plain-text ``.map4x`` format.

MODULES:
--------
config.py
    MapConfig dataclass with every tunable generation parameter.

terrain.py
    Immutable terrain and resource registries, preset names.

tile.py
    TileCodec: terrain index + resource set <-> packed integer.

grid.py
    Grid of packed tile codes backed by a NumPy array.

utils.py
    Fisher-Yates shuffle, toroidal (wraparound) distances.

mapGen.py
    MapGenerator: random maps and tessellated (PCG) maps.

serializer.py
    Writes a grid and its registries to the map file format.

files.py
    MapFileStore: naming, listing, renaming, deleting and generating map files.

USAGE:
------
```python
import random
from map4x.maps import generate_tessellated, save_map

terrains = ["desert", "hills", "plains"]
resources = ["plants", "metals"]

grid = generate_tessellated(20, 30, terrains, resources, random.Random(7))
save_map(grid, terrains, resources, "example.map4x")
```

TILE CODE LAYOUT:
-----------------
- bits 0-3: terrain index (at most 16 terrains)
- bit 4: unused
- bit 5 + i: resource i present
"""

from map4x.maps.config import MapConfig
from map4x.maps.errors import ConfigurationError, MapGenerationError, RegistryMismatchError
from map4x.maps.files import MapFileStore
from map4x.maps.grid import Grid
from map4x.maps.mapGen import MapGenerator, generate_random, generate_tessellated
from map4x.maps.serializer import format_map, save, save_map, write_map
from map4x.maps.terrain import (
    DEFAULT_RESOURCES, DEFAULT_TERRAINS, Registry, ResourceRegistry,
    TerrainRegistry, default_registries, raw_name
)
from map4x.maps.tile import TERRAIN_MASK, TileCodec, resource_bit
from map4x.maps.utils import shuffle, toroidal_distance

__all__ = [
    # Configuration
    'MapConfig',

    # Errors
    'MapGenerationError',
    'ConfigurationError',
    'RegistryMismatchError',

    # Registries
    'Registry',
    'TerrainRegistry',
    'ResourceRegistry',
    'DEFAULT_TERRAINS',
    'DEFAULT_RESOURCES',
    'default_registries',
    'raw_name',

    # Codec and grid
    'TileCodec',
    'TERRAIN_MASK',
    'resource_bit',
    'Grid',

    # Generation
    'MapGenerator',
    'generate_random',
    'generate_tessellated',
    'shuffle',
    'toroidal_distance',

    # Files
    'save_map',
    'save',
    'write_map',
    'format_map',
    'MapFileStore',
]
