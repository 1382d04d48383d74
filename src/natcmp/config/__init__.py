"""
Configuration management.

Dataclass configuration loaded from YAML.
"""

from .settings import ComparisonConfig, load_config

__all__ = ["ComparisonConfig", "load_config"]
