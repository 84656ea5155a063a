"""
Configuration and logging utilities for map4x.

This module provides:
- Global generation constants (tile bit layout, probabilities, file naming)
- Logging setup with automatic file rotation
- Performance timing for generation passes

The configuration module is imported early by every other module and has no
dependencies on the rest of the package.
"""

import logging
import shutil
import sys
import time
from datetime import datetime, timedelta
from pathlib import Path

# ============================================================================
# CONFIGURATION CONSTANTS
# ============================================================================

# Tile code bit layout
TERRAIN_BITS = 4  # Low bits holding the terrain index (max 16 terrains)
RESOURCE_BIT_OFFSET = TERRAIN_BITS + 1  # Bit TERRAIN_BITS is left unused
CODE_BITS = 64  # Width of the grid's unsigned storage
MAX_TERRAINS = 1 << TERRAIN_BITS
MAX_RESOURCES = CODE_BITS - RESOURCE_BIT_OFFSET

# Generation tuning
RESOURCE_PROBABILITY = 0.5  # Chance of adding one more resource to a tile
CENTER_POINTS_DENSITY = 0.1  # Center points per tile on large maps
MIN_PCG_TILES = 10  # Smaller maps fall back to the random generator
SMALL_MAP_TILES = 50  # Maps up to this size use the scaled center formula
SMALL_MAP_SCALE = 100

# Default map dimensions in tiles
MAP_ROWS = 20
MAP_COLS = 30

# Map files
MAP_FILE_EXTENSION = ".map4x"
MAPS_FOLDER = "map4xfiles"

APP_LOGGER_NAME = "map4x"


# ============================================================================
# LOGGING CONFIGURATION
# ============================================================================

def setup_logging(log_root, level=logging.DEBUG):
    """
    Configure logging with automatic file management.

    Creates two directories under ``log_root``:
    - log_dump/: Current logs (files less than 1 day old)
    - old_log_dump/: Archived logs (files older than 1 day)

    Log files are named: map4x_YYYYMMDD_HHMMSS.log

    Args:
        log_root (Path): Directory that receives the log folders
        level (int): Root logger level

    Returns:
        logging.Logger: Configured logger instance for the application
    """
    log_dir = Path(log_root) / "log_dump"
    old_log_dir = Path(log_root) / "old_log_dump"

    log_dir.mkdir(parents=True, exist_ok=True)
    old_log_dir.mkdir(parents=True, exist_ok=True)

    # Archive old log files before starting new session
    _archive_old_logs(log_dir, old_log_dir)

    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    log_path = log_dir / f"{APP_LOGGER_NAME}_{timestamp}.log"

    logging.basicConfig(
        level=level,
        format='[%(asctime)s] - [%(name)s] - [%(levelname)s] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.FileHandler(log_path, encoding='utf-8'),
            logging.StreamHandler(sys.stdout)
        ],
        force=True
    )

    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.info(f"Logging initialized. Log file: {log_path}")

    return logger


def _archive_old_logs(log_dir, archive_dir):
    """
    Move log files older than 1 day to archive directory.

    Args:
        log_dir (Path): Directory containing current logs
        archive_dir (Path): Directory for archived logs

    Returns:
        int: Number of archived files
    """
    cutoff_time = datetime.now() - timedelta(days=1)
    archived = 0

    for log_file in log_dir.glob("*.log"):
        file_mtime = datetime.fromtimestamp(log_file.stat().st_mtime)

        if file_mtime < cutoff_time:
            shutil.move(str(log_file), str(archive_dir / log_file.name))
            archived += 1

    return archived


def get_logger(name=None):
    """
    Get a logger instance for a specific module.

    This should be called at the top of each module:
        logger = get_logger(__name__)

    Args:
        name (str, optional): Logger name, typically __name__

    Returns:
        logging.Logger: Logger instance
    """
    return logging.getLogger(name or APP_LOGGER_NAME)


def get_map_logger():
    """
    Get a specialized logger for map generation.

    Returns:
        logging.Logger: Map generation logger instance
    """
    return logging.getLogger(f'{APP_LOGGER_NAME}.MapGeneration')


class PerformanceTimer:
    """
    Context manager for timing and logging operation duration.

    Usage:
        with PerformanceTimer(logger, "Operation name"):
            # ... code to time ...

    Attributes:
        logger: Logger instance to use for output
        operation_name: Name of the operation being timed
        start_time: Time when context was entered
        elapsed: Seconds spent inside the context, set on exit
    """

    def __init__(self, logger, operation_name):
        self.logger = logger
        self.operation_name = operation_name
        self.start_time = None
        self.elapsed = None

    def __enter__(self):
        self.start_time = time.perf_counter()
        self.logger.debug(f"Starting: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.info(f"Completed: {self.operation_name} in {self.elapsed:.3f}s")
        else:
            self.logger.error(f"Failed: {self.operation_name} after {self.elapsed:.3f}s ({exc_type.__name__})")
        return False
