"""
Region Classifier.

Turns the flat ring output of a clipping engine into regions with one
outer boundary and zero or more holes, and exposes the classified
boolean operations used by the rest of the core.
"""
from typing import List, Sequence
import logging

from radar_coverage.core.clipping_engine import ClippingEngine
from radar_coverage.geometry import (
    CoverageMap,
    Region,
    Ring,
    ensure_orientation,
    point_in_polygon,
    signed_area,
)

logger = logging.getLogger(__name__)


class RegionClassifier:
    """Assign holes to outer boundaries."""

    @staticmethod
    def classify(rings: Sequence[Ring]) -> CoverageMap:
        """
        Classify clipping output into regions.

        Positive-area rings become outer boundaries and negative-area rings
        holes; zero-area rings are dropped. A hole belongs to the first outer
        (in input order) that contains its first vertex. Holes contained by
        no outer are dropped.

        Args:
            rings: Closed rings from a non-zero fill rule boolean operation

        Returns:
            One Region per positive-area ring, outer CCW and holes CW
        """
        outers: List[Ring] = []
        holes: List[Ring] = []

        for ring in rings:
            a = signed_area(ring)
            if a > 0:
                outers.append(tuple(ring))
            elif a < 0:
                holes.append(tuple(ring))

        assigned = [False] * len(holes)
        result: CoverageMap = []

        for outer in outers:
            region_holes = []

            for idx, hole in enumerate(holes):
                if assigned[idx]:
                    continue
                if point_in_polygon(hole[0], outer):
                    region_holes.append(ensure_orientation(hole, ccw=False))
                    assigned[idx] = True

            result.append(Region(outer=outer, holes=tuple(region_holes)))

        orphaned = assigned.count(False)
        if orphaned:
            logger.warning(f"Dropped {orphaned} hole(s) not contained in any outer boundary")

        logger.debug(
            f"Classified {len(rings)} rings into {len(result)} regions "
            f"with {len(holes) - orphaned} holes"
        )

        return result


class PolygonBoolean:
    """Boolean operations whose results are classified into regions."""

    def __init__(self, engine: ClippingEngine):
        """
        Args:
            engine: Clipping engine producing flat ring output
        """
        self.engine = engine

    def union_all(self, rings: Sequence[Ring]) -> CoverageMap:
        """
        Union any number of simple rings.

        A single input ring is returned as one region (normalized to CCW)
        without calling the engine.
        """
        if not rings:
            return []

        if len(rings) == 1:
            return [Region(outer=ensure_orientation(rings[0], ccw=True))]

        return RegionClassifier.classify(self.engine.union(rings))

    def intersection(self, a: Ring, b: Ring) -> CoverageMap:
        return RegionClassifier.classify(self.engine.intersection([a], [b]))

    def difference(self, a: Ring, b: Ring) -> CoverageMap:
        """Area of a not covered by b."""
        return RegionClassifier.classify(self.engine.difference([a], [b]))

    def xor(self, a: Ring, b: Ring) -> CoverageMap:
        return RegionClassifier.classify(self.engine.xor([a], [b]))

    def offset(self, ring: Ring, delta: float) -> CoverageMap:
        """Inflate (delta > 0) or deflate (delta < 0) a ring."""
        return RegionClassifier.classify(self.engine.offset([ring], delta))
