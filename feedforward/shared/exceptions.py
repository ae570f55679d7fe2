"""
Custom Exceptions for the Feedforward Network

Every error carries a closed ``kind`` plus a context dict so callers can branch
on the failure without parsing messages.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Closed set of failure kinds."""
    INVALID_INPUT = "invalid_input"
    SHAPE_MISMATCH = "shape_mismatch"
    EMPTY_LAYER = "empty_layer"
    EMPTY_NETWORK = "empty_network"
    CONFIGURATION = "configuration"


class FeedforwardError(Exception):
    """Base exception for all feedforward errors."""

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InvalidInputError(FeedforwardError):
    """Raised when an operation receives an empty or malformed vector."""
    kind = ErrorKind.INVALID_INPUT


class ShapeMismatchError(FeedforwardError):
    """Raised when the widths of two composed components disagree."""
    kind = ErrorKind.SHAPE_MISMATCH

    def __init__(
        self,
        message: str,
        expected: int,
        actual: int,
        context: Optional[Dict[str, Any]] = None,
    ):
        context = dict(context or {})
        context.setdefault("expected", expected)
        context.setdefault("actual", actual)
        super().__init__(message, context=context)
        self.expected = expected
        self.actual = actual


class EmptyLayerError(FeedforwardError):
    """Raised when a layer is built without units."""
    kind = ErrorKind.EMPTY_LAYER


class EmptyNetworkError(FeedforwardError):
    """Raised when a network is built without layers."""
    kind = ErrorKind.EMPTY_NETWORK


class ConfigurationError(FeedforwardError):
    """Raised when configuration is invalid."""
    kind = ErrorKind.CONFIGURATION
