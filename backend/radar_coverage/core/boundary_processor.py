"""
Boundary Post-Processor.

Simplifies (vertex reduction within a tolerance) and smooths
(corner-cutting subdivision) every ring of a coverage map.
"""
from typing import Optional
import numpy as np
import logging

from radar_coverage.core.clipping_engine import ClippingEngine, ShapelyClippingEngine
from radar_coverage.geometry import CoverageMap, Region, Ring, make_ring

logger = logging.getLogger(__name__)


class BoundaryProcessor:
    """Ring simplification and smoothing."""

    def __init__(self, engine: Optional[ClippingEngine] = None):
        """
        Initialize boundary processor.

        Args:
            engine: Engine that performs simplification (Shapely by default)
        """
        self.engine = engine if engine is not None else ShapelyClippingEngine()

    def simplify(self, ring: Ring, tolerance: float) -> Ring:
        """
        Reduce vertex count keeping every vertex within tolerance.

        Args:
            ring: Input ring
            tolerance: Maximum perpendicular deviation (<= 0 disables)

        Returns:
            Simplified ring, or the original ring if simplification would
            leave fewer than 3 vertices
        """
        if len(ring) < 3 or tolerance <= 0:
            return ring

        simplified = self.engine.simplify(ring, tolerance)

        if len(simplified) < 3:
            logger.debug(
                f"Simplification of {len(ring)}-vertex ring at tolerance {tolerance} "
                f"would be degenerate, keeping original"
            )
            return ring

        return simplified

    @staticmethod
    def smooth(ring: Ring, iterations: int = 2) -> Ring:
        """
        Chaikin corner cutting.

        Each pass replaces edge (p0, p1) with 0.75*p0 + 0.25*p1 and
        0.25*p0 + 0.75*p1, doubling the vertex count.

        Args:
            ring: Input ring
            iterations: Number of passes (<= 0 is a no-op)

        Returns:
            Smoothed ring
        """
        if len(ring) < 3 or iterations <= 0:
            return ring

        coords = np.asarray(ring, dtype=float)

        for _ in range(iterations):
            nxt = np.roll(coords, -1, axis=0)
            smoothed = np.empty((coords.shape[0] * 2, 2), dtype=float)
            smoothed[0::2] = 0.75 * coords + 0.25 * nxt
            smoothed[1::2] = 0.25 * coords + 0.75 * nxt
            coords = smoothed

        return make_ring(coords)

    def simplify_all(self, coverage: CoverageMap, tolerance: float) -> CoverageMap:
        return [
            Region(
                outer=self.simplify(region.outer, tolerance),
                holes=tuple(self.simplify(h, tolerance) for h in region.holes)
            )
            for region in coverage
        ]

    def smooth_all(self, coverage: CoverageMap, iterations: int) -> CoverageMap:
        return [
            Region(
                outer=self.smooth(region.outer, iterations),
                holes=tuple(self.smooth(h, iterations) for h in region.holes)
            )
            for region in coverage
        ]

    def process(
        self,
        coverage: CoverageMap,
        tolerance: float,
        iterations: int
    ) -> CoverageMap:
        """
        Simplify then smooth every outer and hole ring.

        Args:
            coverage: Classified coverage map
            tolerance: Simplification tolerance (<= 0 skips the step)
            iterations: Smoothing passes (<= 0 skips the step)

        Returns:
            Post-processed coverage map
        """
        if tolerance > 0:
            coverage = self.simplify_all(coverage, tolerance)
        if iterations > 0:
            coverage = self.smooth_all(coverage, iterations)
        return coverage
