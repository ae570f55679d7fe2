"""
Configuration Schema using Pydantic

Provides type-safe configuration validation for the feedforward demo.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from feedforward.core.activation_functions import Activation
from feedforward.shared.log_config import LogRenderer

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO", description="Minimum log level")
    renderer: LogRenderer = Field(default=LogRenderer.CONSOLE, description="Log output format")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalise and validate the level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(LOG_LEVELS)}")
        return level


class DemoConfig(BaseModel):
    """Demonstration run configuration."""
    input: List[float] = Field(
        default=[3.0, 4.0, 2.0],
        min_length=1,
        description="Input vector fed to the unit, layer and network",
    )
    layer_activation: Activation = Field(
        default=Activation.TANH,
        description="Activation forced onto the first two demo layers",
    )

    @field_validator("layer_activation", mode="before")
    @classmethod
    def validate_layer_activation(cls, v: Any) -> Any:
        """Resolve aliases such as "none" and "linear"."""
        if isinstance(v, str):
            return Activation(v)
        return v


class FeedforwardConfig(BaseSettings):
    """
    Main configuration with validation.

    Values can be overridden with FEEDFORWARD_-prefixed environment variables,
    using a double underscore for nesting (FEEDFORWARD_LOGGING__LEVEL=DEBUG).
    """
    model_config = SettingsConfigDict(
        env_prefix="FEEDFORWARD_",
        env_nested_delimiter="__",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return self.model_dump()
