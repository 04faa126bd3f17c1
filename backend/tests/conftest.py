"""
Shared fixtures and stub clipping engines.
"""
import math
import pytest

from radar_coverage.geometry import Point, ensure_orientation


def make_square(cx, cy, size):
    half = size / 2
    return (
        Point(cx - half, cy - half),
        Point(cx + half, cy - half),
        Point(cx + half, cy + half),
        Point(cx - half, cy + half),
    )


def make_circle(cx, cy, radius, segments=32):
    return tuple(
        Point(cx + radius * math.cos(2 * math.pi * i / segments),
              cy + radius * math.sin(2 * math.pi * i / segments))
        for i in range(segments)
    )


class StubClippingEngine:
    """Handles only non-overlapping inputs: union passes rings through as outers."""

    def __init__(self):
        self.union_calls = 0

    def union(self, rings):
        self.union_calls += 1
        return [ensure_orientation(r, ccw=True) for r in rings]

    def intersection(self, subjects, clips):
        raise NotImplementedError

    def difference(self, subjects, clips):
        raise NotImplementedError

    def xor(self, subjects, clips):
        raise NotImplementedError

    def offset(self, rings, delta):
        raise NotImplementedError

    def simplify(self, ring, tolerance):
        return ring


class FailingClippingEngine(StubClippingEngine):
    """Engine whose union always fails."""

    def union(self, rings):
        self.union_calls += 1
        raise RuntimeError("clipping backend unavailable")


@pytest.fixture
def stub_engine():
    return StubClippingEngine()


@pytest.fixture
def failing_engine():
    return FailingClippingEngine()


@pytest.fixture
def unit_square():
    return make_square(0, 0, 2)
