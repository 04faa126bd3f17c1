"""
Terrain obstacle data models.
"""
import math
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from radar_coverage.geometry import Point


class TerrainObstacle(BaseModel):
    """Elliptical hill with a Gaussian height profile."""
    center: Point
    rx: float = Field(default=50.0, gt=0, description="Ellipse radius along x")
    ry: float = Field(default=50.0, gt=0, description="Ellipse radius along y")
    height: float = Field(default=500.0, description="Peak height in meters")
    name: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def elevation_at(self, p: Point) -> float:
        """
        Height contributed at a point.

        Args:
            p: Query point

        Returns:
            height * exp(-3 * d²) inside the ellipse, 0 outside
        """
        dx = (p.x - self.center.x) / self.rx
        dy = (p.y - self.center.y) / self.ry
        dist_sq = dx * dx + dy * dy

        if dist_sq >= 1.0:
            return 0.0

        return self.height * math.exp(-3.0 * dist_sq)
