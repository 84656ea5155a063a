"""
Tile codec: packs one terrain and a set of resources into a single integer.

Bit layout:
    bits [0, TERRAIN_BITS)      terrain index
    bit  TERRAIN_BITS           unused
    bits [TERRAIN_BITS + 1, ..) one bit per resource, in registry order
"""
from typing import FrozenSet, Iterable, Tuple

from map4x.config import RESOURCE_BIT_OFFSET, TERRAIN_BITS
from map4x.maps.errors import RegistryMismatchError

TERRAIN_MASK = (1 << TERRAIN_BITS) - 1


def resource_bit(index: int) -> int:
    """Bit value that marks resource ``index`` as present in a tile code."""
    return 1 << (RESOURCE_BIT_OFFSET + index)


class TileCodec:
    """Encodes and decodes tile codes for registries of the given sizes."""

    def __init__(self, terrain_count: int, resource_count: int):
        self.terrain_count = terrain_count
        self.resource_count = resource_count

    @classmethod
    def for_registries(cls, terrains, resources) -> "TileCodec":
        return cls(len(terrains), len(resources))

    @property
    def resource_bits(self) -> Tuple[int, ...]:
        """Bit value of every resource, in registry order."""
        return tuple(resource_bit(i) for i in range(self.resource_count))

    def encode(self, terrain_index: int, resource_indices: Iterable[int] = ()) -> int:
        """
        Pack a terrain index and resource indices into a tile code.

        Terrain indices are masked to TERRAIN_BITS, so values of 16 and above
        alias onto lower indices.
        """
        if terrain_index < 0:
            raise RegistryMismatchError("terrain", terrain_index, self.terrain_count)
        code = terrain_index & TERRAIN_MASK
        for index in resource_indices:
            if not 0 <= index < self.resource_count:
                raise RegistryMismatchError("resource", index, self.resource_count)
            code |= resource_bit(index)
        return code

    def decode(self, code: int) -> Tuple[int, FrozenSet[int]]:
        """Unpack a tile code into ``(terrain_index, resource_indices)``."""
        code = int(code)
        terrain_index = self.terrain_of(code)
        resources = frozenset(
            i for i in range(self.resource_count) if code & resource_bit(i)
        )
        return terrain_index, resources

    def terrain_of(self, code: int) -> int:
        terrain_index = int(code) & TERRAIN_MASK
        if terrain_index >= self.terrain_count:
            raise RegistryMismatchError("terrain", terrain_index, self.terrain_count)
        return terrain_index

    def has_resource(self, code: int, index: int) -> bool:
        if not 0 <= index < self.resource_count:
            raise RegistryMismatchError("resource", index, self.resource_count)
        return bool(int(code) & resource_bit(index))
