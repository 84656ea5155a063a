"""
Utility functions for map generation (NumPy-accelerated).

Holds the random-order helpers and the wraparound distance used by the
tessellation generator. The vectorized distances produce exactly the
same values as the scalar function, so either can be used to pick the
nearest center.
"""

import math
from typing import MutableSequence, Sequence, Tuple

import numpy as np


# ============================================================================
# RANDOM ORDERING
# ============================================================================

def shuffle(items: MutableSequence, rng) -> None:
    """
    Shuffle ``items`` in place (backward Fisher-Yates walk).

    Args:
        items: Mutable sequence to permute
        rng: random.Random-compatible source
    """
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]


# ============================================================================
# GRID OPERATIONS
# ============================================================================

def valid_pos(row: int, col: int, rows: int, cols: int) -> bool:
    """Check if position is within grid bounds."""
    return 0 <= row < rows and 0 <= col < cols


def all_positions(rows: int, cols: int) -> np.ndarray:
    """Every (row, col) of a grid in row-major order, shape (rows * cols, 2)."""
    rr, cc = np.divmod(np.arange(rows * cols, dtype=np.int64), max(cols, 1))
    return np.stack([rr, cc], axis=1)


# ============================================================================
# DISTANCE CALCULATIONS
# ============================================================================

def toroidal_distance(pos1: Tuple[int, int], pos2: Tuple[int, int], rows: int, cols: int) -> float:
    """
    Euclidean distance with row and column deltas wrapped around the edges.

    A delta larger than half the grid dimension is replaced by the distance
    going the other way around.
    """
    dr = abs(pos1[0] - pos2[0])
    dc = abs(pos1[1] - pos2[1])
    if dr > rows / 2:
        dr = rows - dr
    if dc > cols / 2:
        dc = cols - dc
    return math.sqrt(dr * dr + dc * dc)


def toroidal_distances(points: Sequence, center: Tuple[int, int], rows: int, cols: int) -> np.ndarray:
    """
    Toroidal distance from every point to one center, shape (len(points),).

    Args:
        points: (n, 2) array-like of (row, col)
        center: (row, col) of the center
        rows, cols: Grid dimensions used for wrapping
    """
    pts = np.asarray(points, dtype=np.int64).reshape(-1, 2)
    dr = np.abs(pts[:, 0] - int(center[0]))
    dc = np.abs(pts[:, 1] - int(center[1]))
    dr = np.where(dr > rows / 2, rows - dr, dr)
    dc = np.where(dc > cols / 2, cols - dc, dc)
    return np.sqrt((dr * dr + dc * dc).astype(float))


def nearest_center(points: Sequence, centers: Sequence, rows: int, cols: int) -> np.ndarray:
    """
    Index of the closest center for every point.

    Keeps a running minimum over the centers, so memory stays linear in the
    number of points. Ties go to the center that comes first in ``centers``.
    """
    pts = np.asarray(points, dtype=np.int64).reshape(-1, 2)
    best = np.full(len(pts), np.inf)
    closest = np.zeros(len(pts), dtype=np.int64)
    for k, center in enumerate(np.asarray(centers, dtype=np.int64).reshape(-1, 2)):
        dists = toroidal_distances(pts, center, rows, cols)
        closer = dists < best
        best[closer] = dists[closer]
        closest[closer] = k
    return closest
