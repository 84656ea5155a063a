"""
Terrain and resource registries.

A registry is the ordered list of names that defines the tile encoding: a
terrain's code is its position in the terrain registry, a resource's bit is
its position in the resource registry.
"""
from typing import Iterable, Iterator, Tuple

from map4x.config import MAX_RESOURCES, MAX_TERRAINS, get_logger
from map4x.maps.errors import ConfigurationError, RegistryMismatchError

logger = get_logger(__name__)


def raw_name(name: str) -> str:
    """Return ``name`` lowercased with all whitespace removed ("Fossil Fuel" -> "fossilfuel")."""
    return "".join(name.split()).lower()


class Registry:
    """Immutable, ordered, duplicate-free sequence of names."""

    kind = "entry"
    max_size = None

    def __init__(self, names: Iterable[str]):
        names = tuple(names)
        for name in names:
            if not isinstance(name, str) or not name.strip():
                logger.error(f"Rejected {self.kind} registry: invalid name {name!r}")
                raise ConfigurationError(f"{self.kind} names must be non-empty strings, got {name!r}")
        if len(set(names)) != len(names):
            dupes = sorted({n for n in names if names.count(n) > 1})
            logger.error(f"Rejected {self.kind} registry: duplicates {dupes}")
            raise ConfigurationError(f"Duplicate {self.kind} names: {', '.join(dupes)}")
        if self.max_size is not None and len(names) > self.max_size:
            logger.error(f"Rejected {self.kind} registry: {len(names)} names, limit is {self.max_size}")
            raise ConfigurationError(
                f"{len(names)} {self.kind}s cannot be encoded (at most {self.max_size})"
            )
        self._names = names
        self._index = {name: i for i, name in enumerate(names)}

    @classmethod
    def coerce(cls, names) -> "Registry":
        """Return ``names`` if it already is a registry of this kind, else build one."""
        if isinstance(names, cls):
            return names
        return cls(names)

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    def name_of(self, index: int) -> str:
        """Name at ``index``; raises RegistryMismatchError when out of range."""
        if not 0 <= index < len(self._names):
            raise RegistryMismatchError(self.kind, index, len(self._names))
        return self._names[index]

    def index_of(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError:
            raise KeyError(f"Unknown {self.kind}: '{name}'") from None

    def __contains__(self, name) -> bool:
        return name in self._index

    def __getitem__(self, index: int) -> str:
        return self.name_of(index)

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __eq__(self, other) -> bool:
        if isinstance(other, Registry):
            return self.kind == other.kind and self._names == other._names
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.kind, self._names))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._names)!r})"


class TerrainRegistry(Registry):
    kind = "terrain"
    max_size = MAX_TERRAINS


class ResourceRegistry(Registry):
    kind = "resource"
    max_size = MAX_RESOURCES


# Display names of the preset terrains and resources
DEFAULT_TERRAINS = ("Desert", "Hills", "Mountain", "Plains", "Water")
DEFAULT_RESOURCES = ("Plants", "Animals", "Metals", "Fossil Fuel", "Luxury", "Pollution")


def default_registries() -> Tuple[TerrainRegistry, ResourceRegistry]:
    """Registries of the preset terrains and resources, using raw names."""
    return (
        TerrainRegistry(raw_name(n) for n in DEFAULT_TERRAINS),
        ResourceRegistry(raw_name(n) for n in DEFAULT_RESOURCES),
    )
