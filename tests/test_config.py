"""Tests for configuration, logging setup and MapConfig."""
from __future__ import annotations

import logging
import os
import time

import pytest

from map4x.config import (
    MAX_RESOURCES, MAX_TERRAINS, PerformanceTimer, get_logger, get_map_logger, setup_logging
)
from map4x.maps.config import MapConfig
from map4x.maps.errors import ConfigurationError


class TestLogging:
    def test_setup_creates_log_file(self, tmp_path, restore_root_logging) -> None:
        logger = setup_logging(tmp_path, level=logging.INFO)
        assert logger.name == "map4x"
        logs = list((tmp_path / "log_dump").glob("map4x_*.log"))
        assert len(logs) == 1
        get_logger("map4x.test").info("hello from test")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "hello from test" in logs[0].read_text(encoding="utf-8")

    def test_old_logs_archived(self, tmp_path, restore_root_logging) -> None:
        log_dir = tmp_path / "log_dump"
        log_dir.mkdir()
        stale = log_dir / "map4x_old.log"
        stale.write_text("old\n", encoding="utf-8")
        two_days_ago = time.time() - 2 * 24 * 3600
        os.utime(stale, (two_days_ago, two_days_ago))

        setup_logging(tmp_path)

        assert not stale.exists()
        assert (tmp_path / "old_log_dump" / "map4x_old.log").exists()

    def test_logger_names(self) -> None:
        assert get_logger().name == "map4x"
        assert get_logger("map4x.maps").name == "map4x.maps"
        assert get_map_logger().name == "map4x.MapGeneration"


class TestPerformanceTimer:
    def test_logs_elapsed(self, caplog) -> None:
        logger = get_logger("map4x.timer")
        with caplog.at_level(logging.DEBUG, logger="map4x.timer"):
            with PerformanceTimer(logger, "work") as timer:
                pass
        assert timer.elapsed >= 0
        messages = [rec.getMessage() for rec in caplog.records]
        assert "Starting: work" in messages
        assert any(m.startswith("Completed: work in ") for m in messages)

    def test_logs_failure_and_reraises(self, caplog) -> None:
        logger = get_logger("map4x.timer")
        with caplog.at_level(logging.DEBUG, logger="map4x.timer"):
            with pytest.raises(RuntimeError):
                with PerformanceTimer(logger, "boom"):
                    raise RuntimeError("x")
        assert any("Failed: boom" in rec.getMessage() for rec in caplog.records)


class TestConstants:
    def test_encoding_limits(self) -> None:
        assert MAX_TERRAINS == 16
        assert MAX_RESOURCES == 59


class TestMapConfig:
    def test_defaults(self) -> None:
        config = MapConfig()
        assert config.resource_probability == 0.5
        assert config.center_points_density == 0.1
        assert config.use_pcg is True
        assert config.seed is None

    def test_area(self) -> None:
        assert MapConfig(rows=4, cols=6).area == 24

    @pytest.mark.parametrize("kwargs", [
        {"rows": -1},
        {"cols": -3},
        {"resource_probability": 1.5},
        {"resource_probability": -0.1},
        {"center_points_density": -1.0},
    ])
    def test_invalid_values(self, kwargs) -> None:
        with pytest.raises(ConfigurationError):
            MapConfig(**kwargs)
