"""
Sensor data models.
"""
import math
from pydantic import BaseModel, ConfigDict, Field

from radar_coverage.geometry import Point

FULL_CIRCLE = 2 * math.pi


class Sensor(BaseModel):
    """Radar parameters as supplied by the host simulation (planar coordinates)."""
    id: int
    name: str = "Radar"
    position: Point = Point(0.0, 0.0)
    range: float = Field(default=50000.0, description="Maximum detection range in meters")
    height: float = Field(default=10.0, description="Antenna height in meters")
    min_elevation: float = Field(default=-0.01, description="Lower beam elevation in radians")
    max_elevation: float = Field(default=0.7, description="Upper beam elevation in radians")
    azimuth_start: float = Field(default=0.0, description="Span start in radians")
    azimuth_end: float = Field(default=FULL_CIRCLE, description="Span end in radians")

    model_config = ConfigDict(frozen=True)

    @property
    def azimuth_span(self) -> float:
        return self.azimuth_end - self.azimuth_start

    @property
    def is_omnidirectional(self) -> bool:
        return abs(self.azimuth_span - FULL_CIRCLE) < 0.01
