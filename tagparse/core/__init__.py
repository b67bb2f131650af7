"""
tagparse Core Package
=====================

Configuration shared by the command-line tools.
"""

from tagparse.core.config import Config, ConfigSource, load_config

__all__ = ["Config", "ConfigSource", "load_config"]
