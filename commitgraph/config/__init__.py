"""Configuration for commitgraph"""

from commitgraph.config.settings import Settings

__all__ = ["Settings"]
