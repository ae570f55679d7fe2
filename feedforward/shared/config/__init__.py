"""
Configuration Module

Provides type-safe configuration loading and validation using Pydantic.
"""

from .schema import (
    DemoConfig,
    FeedforwardConfig,
    LoggingConfig,
)
from .loader import (
    find_config_file,
    load_config,
    load_yaml_config,
)

__all__ = [
    # Config classes
    "FeedforwardConfig",
    "LoggingConfig",
    "DemoConfig",
    # Loaders
    "find_config_file",
    "load_config",
    "load_yaml_config",
]
