"""
Coverage Polygon Generator.

Samples the ray caster across a sensor's azimuth span to build the
sensor's detectable footprint as one simple ring.
"""
import math
import logging

from radar_coverage.geometry import Point, Ring
from radar_coverage.core.ray_caster import VisibilityRayCaster
from radar_coverage.models.sensor import Sensor

logger = logging.getLogger(__name__)


class CoverageGenerator:
    """Build per-sensor coverage rings."""

    def __init__(self, ray_caster: VisibilityRayCaster, num_rays: int = 72):
        """
        Initialize coverage generator.

        Args:
            ray_caster: Ray caster bound to the terrain model
            num_rays: Bearings sampled across each sensor's span
        """
        if num_rays <= 0:
            raise ValueError(f"num_rays must be positive, got {num_rays}")

        self.ray_caster = ray_caster
        self.num_rays = num_rays

    def generate(self, sensor: Sensor, target_height: float = 0.0) -> Ring:
        """
        Generate the coverage ring of one sensor.

        Bearings are spaced span / num_rays apart starting at azimuth_start,
        so a full circle is tiled without a duplicate endpoint. Sector
        sensors get their own position appended to close the wedge.

        Args:
            sensor: Sensor parameters
            target_height: Height of targets above terrain

        Returns:
            Ring of range samples; degenerate (all vertices on the sensor)
            when the sensor range is non-positive
        """
        step = sensor.azimuth_span / self.num_rays
        vertices = []

        for i in range(self.num_rays):
            bearing = sensor.azimuth_start + i * step

            distance = self.ray_caster.max_visible_range(
                sensor.position,
                sensor.height,
                bearing,
                sensor.range,
                target_height
            )

            vertices.append(Point(
                sensor.position.x + distance * math.cos(bearing),
                sensor.position.y + distance * math.sin(bearing)
            ))

        if not sensor.is_omnidirectional:
            vertices.append(sensor.position)

        logger.debug(
            f"Sensor {sensor.id} ({sensor.name}): generated {len(vertices)} vertices, "
            f"span={math.degrees(sensor.azimuth_span):.1f}°"
        )

        return tuple(vertices)
