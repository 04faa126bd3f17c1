"""Version information for the coverage core."""

VERSION = "1.0.0"
