"""
Logging setup for hosts embedding the coverage core.
"""
import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO):
    """Configure root logging with the project format."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('radar_coverage').setLevel(level)
