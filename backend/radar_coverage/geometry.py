"""
Planar geometry primitives shared by every coverage stage.

Rings are stored as tuples of Points without a closing duplicate. Positive
signed area means counter-clockwise winding.
"""
import math
from typing import Iterable, List, NamedTuple, Sequence, Tuple

import numpy as np


class Point(NamedTuple):
    """2-D coordinate in the shared planar projection."""
    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scale: float) -> "Point":
        return Point(self.x * scale, self.y * scale)

    __rmul__ = __mul__

    def dot(self, other: "Point") -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Point") -> float:
        return self.x * other.y - self.y * other.x

    def length(self) -> float:
        return math.hypot(self.x, self.y)


Ring = Tuple[Point, ...]


def make_ring(coords: Iterable[Sequence[float]]) -> Ring:
    """
    Build a ring from any iterable of (x, y) pairs.

    Args:
        coords: Coordinate pairs (tuples, lists, Points or numpy rows)

    Returns:
        Tuple of Points
    """
    return tuple(Point(float(c[0]), float(c[1])) for c in coords)


def signed_area(ring: Sequence[Point]) -> float:
    """
    Signed area of a ring (shoelace formula).

    Args:
        ring: Ordered ring vertices, closing edge implicit

    Returns:
        Positive for counter-clockwise, negative for clockwise, 0 if degenerate
    """
    if len(ring) < 3:
        return 0.0

    coords = np.asarray(ring, dtype=float)
    x = coords[:, 0]
    y = coords[:, 1]
    return float(np.dot(x, np.roll(y, -1)) - np.dot(np.roll(x, -1), y)) / 2.0


def area(ring: Sequence[Point]) -> float:
    return abs(signed_area(ring))


def perimeter(ring: Sequence[Point]) -> float:
    """Total edge length including the implicit closing edge."""
    if len(ring) < 2:
        return 0.0

    coords = np.asarray(ring, dtype=float)
    edges = np.roll(coords, -1, axis=0) - coords
    return float(np.hypot(edges[:, 0], edges[:, 1]).sum())


def is_counter_clockwise(ring: Sequence[Point]) -> bool:
    return signed_area(ring) > 0


def ensure_orientation(ring: Sequence[Point], ccw: bool) -> Ring:
    """
    Return the ring with the requested winding.

    Args:
        ring: Input ring
        ccw: True for counter-clockwise, False for clockwise

    Returns:
        The ring unchanged if already oriented, otherwise reversed
    """
    if is_counter_clockwise(ring) == ccw:
        return tuple(ring)
    return tuple(reversed(ring))


def point_in_polygon(pt: Point, ring: Sequence[Point]) -> bool:
    """
    Even-odd ray casting containment test.

    Points exactly on the boundary get whatever the crossing rule decides.
    """
    inside = False
    n = len(ring)
    j = n - 1

    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]
        if (yi > pt.y) != (yj > pt.y):
            x_cross = (xj - xi) * (pt.y - yi) / (yj - yi) + xi
            if pt.x < x_cross:
                inside = not inside
        j = i

    return inside


class BoundingBox(NamedTuple):
    """Axis-aligned extent of a ring."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)


def bounding_box(ring: Sequence[Point]) -> BoundingBox:
    """
    Compute the bounding box of a ring.

    Raises:
        ValueError: If the ring is empty
    """
    if not ring:
        raise ValueError("Cannot compute bounding box of an empty ring")

    coords = np.asarray(ring, dtype=float)
    min_x, min_y = coords.min(axis=0)
    max_x, max_y = coords.max(axis=0)
    return BoundingBox(float(min_x), float(min_y), float(max_x), float(max_y))


class Region(NamedTuple):
    """
    One connected coverage area.

    The outer ring is counter-clockwise; every hole is clockwise and lies
    inside the outer ring.
    """
    outer: Ring
    holes: Tuple[Ring, ...] = ()

    @property
    def area(self) -> float:
        return area(self.outer) - sum(area(h) for h in self.holes)

    @property
    def perimeter(self) -> float:
        return perimeter(self.outer) + sum(perimeter(h) for h in self.holes)


CoverageMap = List[Region]
