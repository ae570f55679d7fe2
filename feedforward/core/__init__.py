"""Neural Network Core Components."""

from .activation_functions import Activation, get_activation
from .neural_base import Layer, Network, Unit
from .tensor_utils import (
    MaxInfo,
    argmax_with_probability,
    as_tensor,
    format_shape,
    format_vector,
    softmax,
)

__all__ = [
    "Unit",
    "Layer",
    "Network",
    "Activation",
    "get_activation",
    "MaxInfo",
    "argmax_with_probability",
    "as_tensor",
    "format_shape",
    "format_vector",
    "softmax",
]
