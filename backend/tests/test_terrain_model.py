"""
Tests for the terrain model.
"""
import math
import numpy as np
import pytest
from pydantic import ValidationError

from radar_coverage.core.terrain_model import TerrainModel
from radar_coverage.geometry import Point
from radar_coverage.models import TerrainObstacle


def test_obstacle_elevation_profile():
    """Peak at the center, Gaussian falloff, zero outside the ellipse."""
    obs = TerrainObstacle(center=Point(0, 0), rx=20, ry=10, height=100)

    assert obs.elevation_at(Point(0, 0)) == pytest.approx(100.0)
    # d² = 0.25 along x at half radius
    assert obs.elevation_at(Point(10, 0)) == pytest.approx(100.0 * math.exp(-0.75))
    assert obs.elevation_at(Point(20, 0)) == 0.0
    assert obs.elevation_at(Point(0, 15)) == 0.0


def test_obstacle_requires_positive_radii():
    """Test obstacle validation."""
    with pytest.raises(ValidationError):
        TerrainObstacle(center=Point(0, 0), rx=0, ry=10, height=100)


def test_obstacles_combine_by_max():
    """Overlapping obstacles do not add up."""
    terrain = TerrainModel()
    terrain.add_obstacle(TerrainObstacle(center=Point(0, 0), rx=50, ry=50, height=300))
    terrain.add_obstacle(TerrainObstacle(center=Point(0, 0), rx=50, ry=50, height=200))

    assert terrain.elevation(Point(0, 0)) == pytest.approx(300.0)


def test_vectorized_elevations_match_scalar():
    """Array queries agree with point queries."""
    terrain = TerrainModel()
    terrain.add_obstacle(TerrainObstacle(center=Point(10, 5), rx=30, ry=15, height=250))
    terrain.add_obstacle(TerrainObstacle(center=Point(-20, 0), rx=10, ry=40, height=120))

    xs = np.linspace(-40, 40, 17)
    ys = np.linspace(-20, 20, 17)
    heights = terrain.elevations(xs, ys)

    for x, y, h in zip(xs, ys, heights):
        assert h == pytest.approx(terrain.elevation(Point(x, y)))


def test_custom_elevation_function():
    """Base function is combined with obstacles by max."""
    terrain = TerrainModel()
    terrain.set_elevation_function(lambda x, y: 50.0)
    terrain.add_obstacle(TerrainObstacle(center=Point(0, 0), rx=10, ry=10, height=200))

    assert terrain.elevation(Point(100, 100)) == pytest.approx(50.0)
    assert terrain.elevation(Point(0, 0)) == pytest.approx(200.0)

    terrain.set_elevation_function(None)
    assert terrain.elevation(Point(100, 100)) == 0.0


def test_remove_and_clear_obstacles():
    """Test obstacle removal by name."""
    terrain = TerrainModel()
    terrain.add_obstacle(TerrainObstacle(center=Point(0, 0), name="ridge"))
    terrain.add_obstacle(TerrainObstacle(center=Point(100, 0), name="hill"))

    assert terrain.remove_obstacle("ridge")
    assert not terrain.remove_obstacle("ridge")
    assert [o.name for o in terrain.obstacles] == ["hill"]

    terrain.clear_obstacles()
    assert terrain.obstacles == []


def test_zero_length_segment_never_blocked():
    """Degenerate sight lines are visible."""
    terrain = TerrainModel()
    terrain.add_obstacle(TerrainObstacle(center=Point(0, 0), rx=50, ry=50, height=1000))

    assert not terrain.is_blocked(Point(0, 0), 0.0, Point(0, 0), 0.0)


def test_line_of_sight_blocked_by_obstacle():
    """A tall hill between two points blocks the view."""
    terrain = TerrainModel()
    terrain.add_obstacle(TerrainObstacle(center=Point(50, 0), rx=20, ry=20, height=1000))

    assert terrain.is_blocked(Point(0, 0), 10.0, Point(100, 0), 0.0)
    assert not terrain.is_blocked(Point(0, 0), 10.0, Point(0, 100), 0.0)


def test_high_observer_sees_over_obstacle():
    """Raising both ends above the peak clears the sight line."""
    terrain = TerrainModel()
    terrain.add_obstacle(TerrainObstacle(center=Point(50, 0), rx=20, ry=20, height=100))

    assert terrain.is_blocked(Point(0, 0), 10.0, Point(100, 0), 10.0)
    assert not terrain.is_blocked(Point(0, 0), 150.0, Point(100, 0), 150.0)


def test_curvature_drop_blocks_long_ground_paths():
    """Over long distances the sight line falls below flat ground."""
    curved = TerrainModel()
    flat = TerrainModel(curvature_factor=0.0)

    assert curved.is_blocked(Point(0, 0), 0.0, Point(10000, 0), 0.0)
    assert not flat.is_blocked(Point(0, 0), 0.0, Point(10000, 0), 0.0)


def test_sample_count_is_configurable():
    """A narrow obstacle can slip between coarse samples."""
    obstacle = TerrainObstacle(center=Point(51, 0), rx=1.0, ry=1.0, height=1000)
    coarse = TerrainModel(num_samples=2)
    fine = TerrainModel(num_samples=200)
    coarse.add_obstacle(obstacle)
    fine.add_obstacle(obstacle)

    # Coarse model samples only x=50, just outside the 1 m obstacle
    assert not coarse.is_blocked(Point(0, 0), 10.0, Point(100, 0), 10.0)
    assert fine.is_blocked(Point(0, 0), 10.0, Point(100, 0), 10.0)

    with pytest.raises(ValueError):
        TerrainModel(num_samples=1)
