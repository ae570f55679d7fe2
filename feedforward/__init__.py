"""
Feedforward

Inference-only multi-layer perceptron: units, fully-connected layers and a
linear stack of layers, with softmax and argmax post-processing.
"""

from .core import (
    Activation,
    Layer,
    MaxInfo,
    Network,
    Unit,
    argmax_with_probability,
    softmax,
)
from .shared.exceptions import (
    ConfigurationError,
    EmptyLayerError,
    EmptyNetworkError,
    ErrorKind,
    FeedforwardError,
    InvalidInputError,
    ShapeMismatchError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "Unit",
    "Layer",
    "Network",
    "Activation",
    "MaxInfo",
    "softmax",
    "argmax_with_probability",
    # Errors
    "ErrorKind",
    "FeedforwardError",
    "InvalidInputError",
    "ShapeMismatchError",
    "EmptyLayerError",
    "EmptyNetworkError",
    "ConfigurationError",
]
