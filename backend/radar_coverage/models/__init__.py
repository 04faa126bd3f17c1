"""
Data models for the radar coverage core.
"""

from .sensor import Sensor
from .terrain import TerrainObstacle
from .coverage import CoverageSettings, CoverageStats

__all__ = [
    'Sensor',
    'TerrainObstacle',
    'CoverageSettings',
    'CoverageStats',
]
