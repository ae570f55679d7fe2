"""
Activation Functions Library

Scalar nonlinearities applied to a unit's weighted sum, selected through the
closed ``Activation`` enum rather than free-form strings.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Union

import numpy as np


class Activation(str, Enum):
    """Supported activation functions."""
    IDENTITY = "identity"
    SIGMOID = "sigmoid"
    TANH = "tanh"

    @classmethod
    def _missing_(cls, value: object) -> Optional["Activation"]:
        if isinstance(value, str):
            name = value.strip().lower()
            if name in _ALIASES:
                return _ALIASES[name]
            for member in cls:
                if member.value == name:
                    return member
        return None


_ALIASES: Dict[str, Activation] = {
    "none": Activation.IDENTITY,
    "linear": Activation.IDENTITY,
}


def identity(x: float) -> float:
    return float(x)


def sigmoid(x: float) -> float:
    """Logistic function 1 / (1 + e^-x)."""
    # e^-x overflows to inf for x < -709, which correctly yields 0.0
    with np.errstate(over="ignore"):
        return float(1.0 / (1.0 + np.exp(-x)))


def tanh(x: float) -> float:
    """Hyperbolic tangent."""
    return float(np.tanh(x))


_ACTIVATION_MAP: Dict[Activation, Callable[[float], float]] = {
    Activation.IDENTITY: identity,
    Activation.SIGMOID: sigmoid,
    Activation.TANH: tanh,
}


def get_activation(name: Union[str, Activation]) -> Callable[[float], float]:
    """
    Get activation function by name.

    Args:
        name: Activation enum member or tag ("identity", "sigmoid", "tanh",
            with "none" and "linear" accepted for identity)

    Returns:
        Scalar activation function

    Raises:
        ValueError: If the name is not a known activation
    """
    try:
        activation = Activation(name)
    except ValueError:
        raise ValueError(f"Unknown activation function: {name}") from None
    return _ACTIVATION_MAP[activation]


__all__ = [
    "Activation",
    "get_activation",
    "identity",
    "sigmoid",
    "tanh",
]
