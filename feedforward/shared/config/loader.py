"""
Configuration Loader with Validation

Loads and validates configuration using Pydantic schemas. A missing
configuration file is not an error: the defaults reproduce the built-in demo.
Environment variables (FEEDFORWARD_*) are applied by the settings model.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml
from pydantic import ValidationError

from feedforward.shared.config.schema import FeedforwardConfig
from feedforward.shared.exceptions import ConfigurationError

logger = structlog.get_logger(__name__)

DEFAULT_CONFIG_NAME = "feedforward.yaml"


def load_yaml_config(config_path: Path) -> Dict[str, Any]:
    """
    Load YAML configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        Configuration dictionary (empty for an empty file)

    Raises:
        ConfigurationError: If configuration cannot be loaded
    """
    try:
        with open(config_path, "r") as f:
            config_dict = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            context={"path": str(config_path)}
        ) from e
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in configuration file: {e}",
            context={"path": str(config_path)}
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to load configuration: {e}",
            context={"path": str(config_path)}
        ) from e

    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration root must be a mapping: {config_path}",
            context={"path": str(config_path)}
        )

    logger.info("config_loaded", path=str(config_path))
    return config_dict


def find_config_file() -> Optional[Path]:
    """Look for a configuration file in the usual locations."""
    candidates = [
        Path(DEFAULT_CONFIG_NAME),
        Path.home() / ".feedforward" / DEFAULT_CONFIG_NAME,
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_config(config_path: Optional[Path] = None) -> FeedforwardConfig:
    """
    Load and validate configuration.

    Args:
        config_path: Path to configuration file. When omitted, the default
            locations are searched and built-in defaults are used if none
            exists.

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If configuration is invalid or an explicit path
            does not exist

    Example:
        >>> config = load_config()
        >>> config.demo.input
        [3.0, 4.0, 2.0]
    """
    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        config_dict: Dict[str, Any] = {}
        logger.debug("config_defaults_used")
    else:
        config_dict = load_yaml_config(Path(config_path))

    try:
        config = FeedforwardConfig(**config_dict)
    except ValidationError as e:
        error_details = []
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            error_details.append(f"{loc}: {error['msg']}")

        raise ConfigurationError(
            "Configuration validation failed:\n" + "\n".join(error_details),
            context={"path": str(config_path), "errors": error_details}
        ) from e

    logger.debug("config_validated", path=str(config_path))
    return config
