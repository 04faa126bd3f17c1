"""
Tests for sensor, settings and package-level helpers.
"""
import logging
import math
import pytest
from pydantic import ValidationError

from radar_coverage import __version__, setup_logging
from radar_coverage.geometry import Point
from radar_coverage.models import CoverageSettings, Sensor


def test_sensor_defaults():
    """Test default sensor parameters."""
    sensor = Sensor(id=7)

    assert sensor.name == "Radar"
    assert sensor.range == 50000.0
    assert sensor.height == 10.0
    assert sensor.is_omnidirectional
    assert sensor.azimuth_span == pytest.approx(2 * math.pi)


def test_sensor_accepts_coordinate_pairs():
    """Positions can be given as plain pairs."""
    sensor = Sensor(id=1, position=(3.0, 4.0))

    assert sensor.position == Point(3.0, 4.0)
    assert isinstance(sensor.position, Point)


def test_sector_sensor_is_not_omnidirectional():
    """Test span classification."""
    sector = Sensor(id=1, azimuth_start=0.0, azimuth_end=math.pi)
    nearly_full = Sensor(id=2, azimuth_start=1.0, azimuth_end=1.0 + 2 * math.pi - 0.005)

    assert not sector.is_omnidirectional
    assert nearly_full.is_omnidirectional


def test_sensor_is_immutable():
    """Sensor records are frozen."""
    sensor = Sensor(id=1)

    with pytest.raises(ValidationError):
        sensor.range = 10.0


def test_settings_validation():
    """Out-of-range settings are rejected."""
    with pytest.raises(ValidationError):
        CoverageSettings(num_rays=0)
    with pytest.raises(ValidationError):
        CoverageSettings(range_tolerance=1.0)
    with pytest.raises(ValidationError):
        CoverageSettings(los_samples=1)
    with pytest.raises(ValidationError):
        CoverageSettings(max_workers=0)


def test_version_exported():
    """Test package version export."""
    assert __version__ == "1.0.0"


def test_setup_logging_sets_package_level():
    """setup_logging applies the level to the package logger."""
    setup_logging(logging.DEBUG)

    assert logging.getLogger('radar_coverage').level == logging.DEBUG
