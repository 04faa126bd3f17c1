"""
Clipping engine capability.

The coverage core consumes polygon booleans through the ClippingEngine
protocol. Every operation takes simple rings (any winding) and returns a
flat list of closed rings: positive signed area for outer boundaries,
negative for holes. ShapelyClippingEngine is the GEOS-backed default.
"""
from typing import List, Protocol, Sequence
from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient
from shapely.ops import unary_union
import logging

from radar_coverage.geometry import Ring, make_ring

logger = logging.getLogger(__name__)


class ClippingEngine(Protocol):
    """Polygon boolean operations over the Ring type."""

    def union(self, rings: Sequence[Ring]) -> List[Ring]:
        ...

    def intersection(self, subjects: Sequence[Ring], clips: Sequence[Ring]) -> List[Ring]:
        ...

    def difference(self, subjects: Sequence[Ring], clips: Sequence[Ring]) -> List[Ring]:
        ...

    def xor(self, subjects: Sequence[Ring], clips: Sequence[Ring]) -> List[Ring]:
        ...

    def offset(self, rings: Sequence[Ring], delta: float) -> List[Ring]:
        ...

    def simplify(self, ring: Ring, tolerance: float) -> Ring:
        ...


class ShapelyClippingEngine:
    """ClippingEngine implemented with Shapely (GEOS)."""

    def union(self, rings: Sequence[Ring]) -> List[Ring]:
        return self._to_rings(self._merge(rings))

    def intersection(self, subjects: Sequence[Ring], clips: Sequence[Ring]) -> List[Ring]:
        return self._to_rings(self._merge(subjects).intersection(self._merge(clips)))

    def difference(self, subjects: Sequence[Ring], clips: Sequence[Ring]) -> List[Ring]:
        return self._to_rings(self._merge(subjects).difference(self._merge(clips)))

    def xor(self, subjects: Sequence[Ring], clips: Sequence[Ring]) -> List[Ring]:
        return self._to_rings(self._merge(subjects).symmetric_difference(self._merge(clips)))

    def offset(self, rings: Sequence[Ring], delta: float) -> List[Ring]:
        """
        Inflate (delta > 0) or deflate (delta < 0) with round joins.
        """
        return self._to_rings(self._merge(rings).buffer(delta, join_style="round"))

    def simplify(self, ring: Ring, tolerance: float) -> Ring:
        """
        Douglas-Peucker simplification of a closed ring.

        The ring's first vertex is kept as the anchor, so repeating the call
        with the same tolerance changes nothing.

        Args:
            ring: Input ring
            tolerance: Maximum perpendicular deviation

        Returns:
            Simplified ring (may have fewer than 3 vertices)
        """
        if len(ring) < 2:
            return ring

        closed = LineString(list(ring) + [ring[0]])
        simplified = closed.simplify(tolerance, preserve_topology=False)
        return make_ring(simplified.coords[:-1])

    def _merge(self, rings: Sequence[Ring]) -> BaseGeometry:
        """Union input rings as polygons under the non-zero fill rule."""
        polygons = []

        for ring in rings:
            if len(ring) < 3:
                logger.debug(f"Skipping degenerate ring with {len(ring)} vertices")
                continue

            poly = Polygon(ring)
            if not poly.is_valid:
                logger.warning("Input ring is not a valid simple polygon, fixing...")
                poly = poly.buffer(0)

            if not poly.is_empty:
                polygons.append(poly)

        return unary_union(polygons)

    def _to_rings(self, geom: BaseGeometry) -> List[Ring]:
        """Flatten polygonal output to CCW exterior rings and CW interior rings."""
        if geom.is_empty:
            return []

        if isinstance(geom, Polygon):
            polygons = [geom]
        elif isinstance(geom, MultiPolygon):
            polygons = list(geom.geoms)
        elif hasattr(geom, 'geoms'):
            polygons = [g for g in geom.geoms if isinstance(g, Polygon)]
            polygons += [p for g in geom.geoms if isinstance(g, MultiPolygon) for p in g.geoms]
        else:
            logger.warning(f"Unexpected geometry type {geom.geom_type} from clipping, ignoring")
            return []

        rings = []
        for poly in polygons:
            poly = orient(poly, sign=1.0)
            rings.append(make_ring(poly.exterior.coords[:-1]))
            for interior in poly.interiors:
                rings.append(make_ring(interior.coords[:-1]))

        return rings
