"""Exceptions raised by the map generation package."""


class MapGenerationError(Exception):
    """Base class for map4x errors."""


class ConfigurationError(MapGenerationError, ValueError):
    """Registries or generation parameters that cannot be encoded or used."""


class RegistryMismatchError(MapGenerationError, IndexError):
    """A tile references a terrain or resource index the registry does not have."""

    def __init__(self, kind: str, index: int, size: int):
        self.kind = kind
        self.index = index
        self.size = size
        super().__init__(f"{kind} index {index} out of range for registry of {size} {kind}s")
