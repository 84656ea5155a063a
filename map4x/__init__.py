"""map4x - procedural tile map generator for 4X games."""

from map4x.maps import (
    ConfigurationError, Grid, MapConfig, MapFileStore, MapGenerationError, MapGenerator,
    RegistryMismatchError, ResourceRegistry, TerrainRegistry, TileCodec,
    generate_random, generate_tessellated, save, save_map, shuffle, toroidal_distance
)

__version__ = "0.1.0"

__all__ = [
    'ConfigurationError',
    'Grid',
    'MapConfig',
    'MapFileStore',
    'MapGenerationError',
    'MapGenerator',
    'RegistryMismatchError',
    'ResourceRegistry',
    'TerrainRegistry',
    'TileCodec',
    'generate_random',
    'generate_tessellated',
    'save',
    'save_map',
    'shuffle',
    'toroidal_distance',
]
