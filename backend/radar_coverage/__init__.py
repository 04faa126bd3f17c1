"""
Terrain-aware radar coverage generation and merging.
"""

from .version import VERSION as __version__
from .logging_config import setup_logging

__all__ = ['__version__', 'setup_logging']
