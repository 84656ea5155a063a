"""
Map file store: locates, names and manipulates ``.map4x`` files in a folder.
"""
import re
from pathlib import Path
from typing import List

from map4x.config import MAP_FILE_EXTENSION, MAPS_FOLDER, get_logger
from map4x.maps.config import MapConfig
from map4x.maps.mapGen import MapGenerator
from map4x.maps.serializer import save_map

# Characters not allowed in map file names
ILLEGAL_CHARS = re.compile(r"[#%&{}\\<>*?/$!'\":@+`|= ]")


def default_maps_folder() -> Path:
    """``~/Desktop/map4xfiles``"""
    return Path.home() / "Desktop" / MAPS_FOLDER


class MapFileStore:
    """Map files living in one folder, addressed by name without extension."""

    def __init__(self, folder=None):
        self.folder = Path(folder) if folder is not None else default_maps_folder()
        self.logger = get_logger(__name__)

    def map_path(self, name: str) -> Path:
        return self.folder / f"{name}{MAP_FILE_EXTENSION}"

    def exists(self, name: str) -> bool:
        return self.map_path(name).exists()

    # -------------------------
    # Naming
    # -------------------------
    def validate_file_name(self, name: str) -> str:
        """Replace illegal characters with '_' and avoid clashing with existing files."""
        return self.dup_name_protection(ILLEGAL_CHARS.sub("_", name))

    def dup_name_protection(self, name: str) -> str:
        """Return ``name``, or ``name_N`` with the lowest N that is not taken yet."""
        candidate = name
        version = 0
        while self.exists(candidate):
            version += 1
            candidate = f"{name}_{version}"
        if candidate != name:
            self.logger.debug(f"Map name '{name}' taken, using '{candidate}'")
        return candidate

    # -------------------------
    # Browsing
    # -------------------------
    def list_map_names(self) -> List[str]:
        """Sorted names of the map files in the folder (empty if it does not exist)."""
        if not self.folder.is_dir():
            return []
        return sorted(p.stem for p in self.folder.glob(f"*{MAP_FILE_EXTENSION}") if p.is_file())

    def rename_map_file(self, old_name: str, new_name: str) -> Path:
        old_path = self.map_path(old_name)
        new_path = self.map_path(new_name)
        if not old_path.exists():
            raise FileNotFoundError(f"No map named '{old_name}' in {self.folder}")
        if new_path.exists():
            raise FileExistsError(f"A map named '{new_name}' already exists in {self.folder}")
        old_path.rename(new_path)
        self.logger.info(f"Renamed map '{old_name}' to '{new_name}'")
        return new_path

    def delete_map_file(self, name: str) -> None:
        path = self.map_path(name)
        path.unlink()
        self.logger.info(f"Deleted map '{name}'")

    # -------------------------
    # Generation
    # -------------------------
    def generate_new_map_file(self, name: str, rows: int, cols: int, terrains, resources,
                              rng=None, use_pcg: bool = True) -> str:
        """
        Generate a map and save it as a new file in the folder.

        The name is validated first, so an existing file is never
        overwritten.

        Returns:
            str: Name of the generated map (without extension)
        """
        name = self.validate_file_name(name)
        self.folder.mkdir(parents=True, exist_ok=True)

        generator = MapGenerator(terrains, resources, MapConfig(rows=rows, cols=cols, use_pcg=use_pcg), rng=rng)
        grid = generator.generate()
        save_map(grid, generator.terrains, generator.resources, self.map_path(name))
        return name
