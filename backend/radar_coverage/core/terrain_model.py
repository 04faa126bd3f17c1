"""
Terrain Model.

Holds localized elevation obstacles and answers elevation and
line-of-sight queries. Obstacles combine by max ("tallest feature wins").
"""
from typing import Callable, List, Optional
import numpy as np
import logging

from radar_coverage.geometry import Point
from radar_coverage.models.terrain import TerrainObstacle

logger = logging.getLogger(__name__)

ElevationFunction = Callable[[float, float], float]

EARTH_RADIUS_M = 6371000.0


class TerrainModel:
    """Elevation field built from Gaussian obstacles and an optional base function."""

    def __init__(
        self,
        earth_radius_m: float = EARTH_RADIUS_M,
        curvature_factor: float = 0.5,
        num_samples: int = 40
    ):
        """
        Initialize terrain model.

        Args:
            earth_radius_m: Earth radius used for the curvature drop
            curvature_factor: Scale applied to the curvature drop
            num_samples: Segments the sight line is divided into; the
                num_samples - 1 interior points are tested
        """
        if num_samples < 2:
            raise ValueError(f"num_samples must be >= 2, got {num_samples}")

        self.earth_radius_m = earth_radius_m
        self.curvature_factor = curvature_factor
        self.num_samples = num_samples
        self._obstacles: List[TerrainObstacle] = []
        self._elevation_function: Optional[ElevationFunction] = None

    @property
    def obstacles(self) -> List[TerrainObstacle]:
        return list(self._obstacles)

    def add_obstacle(self, obstacle: TerrainObstacle):
        self._obstacles.append(obstacle)
        logger.debug(
            f"Added obstacle {obstacle.name or '<unnamed>'} at "
            f"({obstacle.center.x:.1f}, {obstacle.center.y:.1f}), height={obstacle.height:.1f}m"
        )

    def remove_obstacle(self, name: str) -> bool:
        """
        Remove every obstacle with the given name.

        Returns:
            True if at least one obstacle was removed
        """
        kept = [obs for obs in self._obstacles if obs.name != name]
        removed = len(self._obstacles) - len(kept)
        self._obstacles = kept
        return removed > 0

    def clear_obstacles(self):
        self._obstacles.clear()

    def set_elevation_function(self, func: Optional[ElevationFunction]):
        """Install (or clear with None) a base elevation function f(x, y)."""
        self._elevation_function = func

    def elevation(self, p: Point) -> float:
        """
        Terrain height at a point.

        Args:
            p: Query point

        Returns:
            Max of the base function (0 when unset) and every obstacle contribution
        """
        h = 0.0

        if self._elevation_function is not None:
            h = float(self._elevation_function(p.x, p.y))

        for obs in self._obstacles:
            h = max(h, obs.elevation_at(p))

        return h

    def elevations(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        """
        Vectorized elevation over coordinate arrays.

        Args:
            xs: X coordinates
            ys: Y coordinates (same shape as xs)

        Returns:
            Array of terrain heights
        """
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)

        if self._elevation_function is not None:
            heights = np.array(
                [self._elevation_function(x, y) for x, y in zip(xs.ravel(), ys.ravel())],
                dtype=float
            ).reshape(xs.shape)
        else:
            heights = np.zeros(xs.shape, dtype=float)

        for obs in self._obstacles:
            dx = (xs - obs.center.x) / obs.rx
            dy = (ys - obs.center.y) / obs.ry
            dist_sq = dx * dx + dy * dy
            contribution = np.where(dist_sq < 1.0, obs.height * np.exp(-3.0 * dist_sq), 0.0)
            heights = np.maximum(heights, contribution)

        return heights

    def is_blocked(
        self,
        from_point: Point,
        from_height: float,
        to_point: Point,
        to_height: float = 0.0
    ) -> bool:
        """
        Check whether terrain blocks the sight line between two positions.

        The sight height at each interior sample is interpolated between the
        endpoint heights and lowered by the scaled curvature drop
        (fraction * distance)² / (2 * earth_radius).

        Args:
            from_point: Observer position
            from_height: Observer height
            to_point: Target position
            to_height: Target height

        Returns:
            True if any sampled terrain height exceeds the corrected sight line
        """
        delta = to_point - from_point
        total_dist = delta.length()

        if total_dist < 1e-6:
            return False

        fractions = np.arange(1, self.num_samples) / self.num_samples
        xs = from_point.x + delta.x * fractions
        ys = from_point.y + delta.y * fractions

        los_heights = from_height * (1.0 - fractions) + to_height * fractions
        arc_dist = fractions * total_dist
        curvature_drop = arc_dist * arc_dist / (2.0 * self.earth_radius_m)
        effective_los = los_heights - curvature_drop * self.curvature_factor

        terrain_heights = self.elevations(xs, ys)

        return bool(np.any(terrain_heights > effective_los))
