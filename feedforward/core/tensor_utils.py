"""
Tensor Utilities

Conversion of plain sequences into 1-D tensors, plus the post-processing
applied to a network's final output (softmax and argmax).
"""

from __future__ import annotations

from typing import NamedTuple, Sequence, Tuple, Union

import numpy as np

from feedforward.shared.exceptions import InvalidInputError

TensorLike = Union[Sequence[float], np.ndarray]


def as_tensor(x: TensorLike, operation: str = "as_tensor") -> np.ndarray:
    """
    Convert a sequence of numbers to a 1-D float64 tensor.

    Args:
        x: Sequence of numbers or numpy array
        operation: Name of the calling operation, recorded in error context

    Returns:
        1-D float64 array

    Raises:
        InvalidInputError: If the input is not a 1-D vector of numbers
    """
    try:
        tensor = np.asarray(x, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(
            f"{operation} expects a 1-D vector of numbers: {e}",
            context={"operation": operation},
        ) from e
    if tensor.ndim != 1:
        raise InvalidInputError(
            f"{operation} expects a 1-D vector, got {tensor.ndim} dimensions",
            context={"operation": operation, "ndim": tensor.ndim},
        )
    return tensor


def softmax(x: TensorLike) -> np.ndarray:
    """
    Normalize a vector into a probability distribution.

    Computes exp(x_i) / sum(exp(x)) directly, without shifting by the maximum.
    An empty input yields an empty tensor.
    """
    tensor = as_tensor(x, operation="softmax")
    if tensor.size == 0:
        return tensor
    exps = np.exp(tensor)
    return exps / float(exps.sum())


class MaxInfo(NamedTuple):
    """Index and value of a vector's largest element."""
    index: int
    value: float

    def __str__(self) -> str:
        return f"{{ idx: {self.index}, prob:{self.value:.6f} }}"


def argmax_with_probability(x: TensorLike) -> MaxInfo:
    """
    Find the largest element of a vector.

    Ties resolve to the first occurrence.

    Raises:
        InvalidInputError: If the vector is empty
    """
    tensor = as_tensor(x, operation="argmax_with_probability")
    if tensor.size == 0:
        raise InvalidInputError(
            "argmax_with_probability requires a non-empty vector",
            context={"operation": "argmax_with_probability"},
        )
    index = int(np.argmax(tensor))
    return MaxInfo(index=index, value=float(tensor[index]))


def format_vector(x: TensorLike) -> str:
    """Render a vector as ``{ a, b, c }``; an empty vector renders as ''."""
    tensor = as_tensor(x, operation="format_vector")
    if tensor.size == 0:
        return ""
    return "{ " + ", ".join(f"{v:.6f}" for v in tensor) + " }"


def format_shape(shape: Tuple[int, ...]) -> str:
    """Render an (input_width, output_width) pair as ``( i, o )``."""
    if len(shape) != 2:
        raise InvalidInputError(
            f"shape must have 2 entries, got {len(shape)}",
            context={"operation": "format_shape", "length": len(shape)},
        )
    return f"( {shape[0]}, {shape[1]} )"
