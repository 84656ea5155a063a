"""Pytest configuration for map4x tests."""
from __future__ import annotations

import logging
import random
import sys
from pathlib import Path

import pytest

# Ensure repository root is available on the Python path for package imports.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from map4x.maps.terrain import ResourceRegistry, TerrainRegistry  # noqa: E402


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def terrains() -> TerrainRegistry:
    return TerrainRegistry(["desert", "hills", "mountain", "plains", "water"])


@pytest.fixture
def resources() -> ResourceRegistry:
    return ResourceRegistry(["plants", "animals", "metals", "fossilfuel"])


@pytest.fixture
def restore_root_logging():
    """Undo handler and level changes made to the root logger by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
