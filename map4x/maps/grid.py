"""Grid: fixed-size 2D container of packed tile codes."""
from typing import Iterator, Tuple

import numpy as np

from map4x.maps.utils import valid_pos


class Grid:
    """
    Dense ``rows x cols`` array of tile codes, addressed as ``grid[row, col]``.

    Codes are stored row-major in an unsigned 64-bit NumPy array. Generators
    write cells in place and freeze the grid before returning it; a frozen
    grid rejects writes.
    """

    def __init__(self, rows: int, cols: int):
        if rows < 0 or cols < 0:
            raise ValueError(f"Grid dimensions must be >= 0, got {rows}x{cols}")
        self._tiles = np.zeros((rows, cols), dtype=np.uint64)

    @property
    def rows(self) -> int:
        return self._tiles.shape[0]

    @property
    def cols(self) -> int:
        return self._tiles.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def area(self) -> int:
        return self.rows * self.cols

    @property
    def frozen(self) -> bool:
        return not self._tiles.flags.writeable

    def freeze(self) -> "Grid":
        """Make the grid read-only. Returns self."""
        self._tiles.flags.writeable = False
        return self

    def _check_bounds(self, row: int, col: int) -> None:
        if not valid_pos(row, col, self.rows, self.cols):
            raise IndexError(f"({row}, {col}) out of bounds for {self.rows}x{self.cols} grid")

    def __getitem__(self, pos: Tuple[int, int]) -> int:
        row, col = pos
        self._check_bounds(row, col)
        return int(self._tiles[row, col])

    def __setitem__(self, pos: Tuple[int, int], code: int) -> None:
        row, col = pos
        self._check_bounds(row, col)
        if self.frozen:
            raise ValueError("Grid is frozen")
        self._tiles[row, col] = code

    def __len__(self) -> int:
        return self.area

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield ``(row, col, code)`` for every cell in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col, int(self._tiles[row, col])

    def to_array(self) -> np.ndarray:
        """Read-only copy of the codes as a (rows, cols) uint64 array."""
        arr = self._tiles.copy()
        arr.flags.writeable = False
        return arr

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._tiles, other._tiles))

    __hash__ = None

    def __repr__(self) -> str:
        state = "frozen" if self.frozen else "writable"
        return f"Grid({self.rows}x{self.cols}, {state})"
