"""
Core processing modules for radar coverage generation and merging.
"""

from radar_coverage.geometry import Point, Region, BoundingBox
from .terrain_model import TerrainModel
from .ray_caster import VisibilityRayCaster
from .coverage_generator import CoverageGenerator
from .clipping_engine import ClippingEngine, ShapelyClippingEngine
from .region_classifier import RegionClassifier, PolygonBoolean
from .boundary_processor import BoundaryProcessor
from .coverage_manager import CoverageMergeManager, CacheState

__all__ = [
    'Point',
    'Region',
    'BoundingBox',
    'TerrainModel',
    'VisibilityRayCaster',
    'CoverageGenerator',
    'ClippingEngine',
    'ShapelyClippingEngine',
    'RegionClassifier',
    'PolygonBoolean',
    'BoundaryProcessor',
    'CoverageMergeManager',
    'CacheState',
]
