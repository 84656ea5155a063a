"""
Map serializer.

File format:

    <rows> <cols>
    <terrain> [resource]*[\\t# Start of row <r>]
    ...

One tile line per cell in row-major order. Resources follow the terrain in
registry order. The first tile of each row carries a comment that readers
ignore.
"""
import io
import os
from typing import Iterator

from map4x.config import get_logger
from map4x.maps.grid import Grid
from map4x.maps.terrain import ResourceRegistry, TerrainRegistry
from map4x.maps.tile import TileCodec

logger = get_logger(__name__)


def iter_map_lines(grid: Grid, terrains, resources) -> Iterator[str]:
    """Yield the lines of the map file, without line terminators."""
    terrains = TerrainRegistry.coerce(terrains)
    resources = ResourceRegistry.coerce(resources)
    codec = TileCodec.for_registries(terrains, resources)

    yield f"{grid.rows} {grid.cols}"
    for r, c, code in grid.cells():
        terrain_index, present = codec.decode(code)
        parts = [terrains.name_of(terrain_index)]
        parts.extend(resources.name_of(i) for i in sorted(present))
        line = " ".join(parts)
        if c == 0:
            line += f"\t# Start of row {r}"
        yield line


def write_map(grid: Grid, terrains, resources, stream) -> None:
    """Write the map to an open text stream. The stream is left open."""
    for line in iter_map_lines(grid, terrains, resources):
        stream.write(line)
        stream.write("\n")


def save_map(grid: Grid, terrains, resources, sink) -> None:
    """
    Save a map to ``sink``.

    Args:
        grid: Generated map
        terrains: Terrain registry (or names) the grid was encoded with
        resources: Resource registry (or names) the grid was encoded with
        sink: File path (overwritten) or writable text stream

    Raises:
        RegistryMismatchError: A tile references a name the registries lack
        OSError: Writing failed
    """
    if isinstance(sink, (str, os.PathLike)):
        # Render fully before touching the file
        text = format_map(grid, terrains, resources)
        with open(sink, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
        logger.info(f"Saved {grid.rows}x{grid.cols} map to {os.fspath(sink)}")
    else:
        write_map(grid, terrains, resources, sink)
        logger.debug(f"Wrote {grid.rows}x{grid.cols} map to stream")


save = save_map


def format_map(grid: Grid, terrains, resources) -> str:
    """Return the map file contents as a string."""
    buf = io.StringIO()
    write_map(grid, terrains, resources, buf)
    return buf.getvalue()
