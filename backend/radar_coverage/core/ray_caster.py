"""
Visibility Ray Caster.

Finds how far a sensor can see along one bearing by binary search over
the terrain line-of-sight test.
"""
import math
import logging

from radar_coverage.geometry import Point
from radar_coverage.core.terrain_model import TerrainModel

logger = logging.getLogger(__name__)


class VisibilityRayCaster:
    """Binary-search range finder on top of a TerrainModel."""

    def __init__(self, terrain: TerrainModel, range_tolerance: float = 0.01):
        """
        Initialize ray caster.

        Args:
            terrain: Terrain model used for line-of-sight tests
            range_tolerance: Search stops once the bracket is narrower than
                this fraction of the maximum range
        """
        if not 0 < range_tolerance < 1:
            raise ValueError(f"range_tolerance must be in (0, 1), got {range_tolerance}")

        self.terrain = terrain
        self.range_tolerance = range_tolerance

    def max_visible_range(
        self,
        sensor_position: Point,
        sensor_height: float,
        bearing: float,
        max_range: float,
        target_height: float = 0.0
    ) -> float:
        """
        Largest unobstructed distance along a bearing.

        Assumes visibility is monotonic in range along the bearing, which
        holds for a single obstacle but not for every terrain layout.

        Args:
            sensor_position: Sensor position
            sensor_height: Antenna height
            bearing: Bearing in radians (0 = +x axis, counter-clockwise)
            max_range: Maximum detection range
            target_height: Height of the target above terrain

        Returns:
            Last distance known visible, in [0, max_range]
        """
        if max_range <= 0:
            return 0.0

        direction = Point(math.cos(bearing), math.sin(bearing))

        lo, hi = 0.0, max_range
        stop = max_range * self.range_tolerance

        while hi - lo > stop:
            mid = (lo + hi) / 2.0
            target = sensor_position + direction * mid

            if self.terrain.is_blocked(sensor_position, sensor_height, target, target_height):
                hi = mid
            else:
                lo = mid

        return lo
