"""
Neural Network Core - Base Architecture

Implements the forward-pass building blocks: Unit (a single neuron), Layer (a
fully-connected set of units) and Network (a linear stack of layers).
Parameters are fixed at construction; there is no training.
"""

from __future__ import annotations

import copy
from typing import Dict, Iterable, List, Tuple, Union

import numpy as np
import structlog

from feedforward.core.activation_functions import Activation, get_activation
from feedforward.core.tensor_utils import TensorLike, as_tensor
from feedforward.shared.exceptions import (
    EmptyLayerError,
    EmptyNetworkError,
    InvalidInputError,
    ShapeMismatchError,
)

logger = structlog.get_logger(__name__)

Shape = Tuple[int, int]


class Unit:
    """
    Individual neuron in a neural network.

    Each unit:
    - Receives an input vector of fixed width
    - Applies weights and bias
    - Applies activation function
    """

    def __init__(
        self,
        weight: TensorLike,
        bias: float = 0.0,
        activation: Union[Activation, str] = Activation.IDENTITY,
    ):
        """
        Initialize unit.

        Args:
            weight: Weight vector, one entry per input connection
            bias: Bias term added to the weighted sum
            activation: Activation function tag

        Raises:
            InvalidInputError: If the weight vector is empty
        """
        weight = np.array(as_tensor(weight, operation="Unit"), copy=True)
        if weight.size == 0:
            raise InvalidInputError(
                "Unit weight must not be empty",
                context={"operation": "Unit"},
            )
        weight.setflags(write=False)

        self._weight = weight
        self._bias = float(bias)
        self.activation = activation

        logger.debug(
            "unit_initialized",
            input_size=self.size(),
            bias=self._bias,
            activation=self._activation.value,
        )

    @property
    def weight(self) -> np.ndarray:
        return self._weight

    @property
    def bias(self) -> float:
        return self._bias

    @property
    def activation(self) -> Activation:
        return self._activation

    @activation.setter
    def activation(self, activation: Union[Activation, str]) -> None:
        self._activation = Activation(activation)
        self._activation_fn = get_activation(self._activation)

    def size(self) -> int:
        """Input width of the unit."""
        return int(self._weight.size)

    def activate(self, x: float) -> float:
        return self._activation_fn(x)

    def forward(self, x: TensorLike) -> float:
        """
        Forward pass through unit: activation(w . x + b).

        Raises:
            ShapeMismatchError: If len(x) differs from the weight width
        """
        x = as_tensor(x, operation="Unit.forward")
        if x.size != self._weight.size:
            raise ShapeMismatchError(
                f"unit input size not match, {x.size} != {self._weight.size}",
                expected=self.size(),
                actual=int(x.size),
                context={"component": "unit"},
            )
        return self.activate(float(np.dot(x, self._weight)) + self._bias)

    def copy(self) -> "Unit":
        """Independent copy; the read-only weight array is shared."""
        return copy.copy(self)

    def __repr__(self) -> str:
        return (
            f"Unit(weight={self._weight.tolist()}, bias={self._bias}, "
            f"activation={self._activation.value!r})"
        )


class Layer:
    """
    Fully-connected layer (ordered collection of units).

    Every unit shares the layer's input width and is forced onto the layer's
    activation function. Units are copied in, so the caller's units keep their
    own activation.
    """

    def __init__(
        self,
        units: Iterable[Unit],
        activation: Union[Activation, str] = Activation.TANH,
    ):
        """
        Initialize layer.

        Args:
            units: Units of the layer, in output order
            activation: Activation applied to every unit

        Raises:
            EmptyLayerError: If no units are given
            ShapeMismatchError: If units have different input widths
        """
        units = list(units)
        if not units:
            raise EmptyLayerError("Layer requires at least one unit")

        activation = Activation(activation)
        item_size = units[0].size()
        copies: List[Unit] = []
        for i, unit in enumerate(units):
            if unit.size() != item_size:
                raise ShapeMismatchError(
                    f"unit {i} size not match, {unit.size()} != {item_size}",
                    expected=item_size,
                    actual=unit.size(),
                    context={"component": "layer", "unit_index": i},
                )
            unit = unit.copy()
            unit.activation = activation
            copies.append(unit)

        self._units = tuple(copies)
        self._activation = activation

        logger.debug(
            "layer_initialized",
            in_features=self.input_width,
            out_features=self.output_width,
            activation=activation.value,
        )

    @property
    def units(self) -> Tuple[Unit, ...]:
        """Copies of the layer's units; the layer keeps its own."""
        return tuple(unit.copy() for unit in self._units)

    @property
    def activation(self) -> Activation:
        return self._activation

    @property
    def input_width(self) -> int:
        return self._units[0].size()

    @property
    def output_width(self) -> int:
        return len(self._units)

    def size(self) -> int:
        """Number of units (the output width)."""
        return self.output_width

    def shape(self) -> Shape:
        return (self.input_width, self.output_width)

    def forward(self, x: TensorLike) -> np.ndarray:
        """
        Forward pass through layer, one output per unit.

        Raises:
            ShapeMismatchError: If len(x) differs from the layer input width
        """
        x = as_tensor(x, operation="Layer.forward")
        if x.size != self.input_width:
            raise ShapeMismatchError(
                f"layer input size not match, {x.size} != {self.input_width}",
                expected=self.input_width,
                actual=int(x.size),
                context={"component": "layer"},
            )
        return np.array([unit.forward(x) for unit in self._units], dtype=np.float64)

    def activation_stats(self, x: TensorLike) -> Dict[str, float]:
        """Get statistics about layer activations."""
        output = self.forward(x)
        return {
            "mean": float(output.mean()),
            "std": float(output.std()),
            "min": float(output.min()),
            "max": float(output.max()),
        }

    def __repr__(self) -> str:
        return f"Layer(shape={self.shape()}, activation={self._activation.value!r})"


class Network:
    """
    Multi-layer perceptron: a linear stack of fully-connected layers.

    Each layer's output width must equal the next layer's input width.
    """

    def __init__(self, layers: Iterable[Layer]):
        """
        Initialize network.

        Args:
            layers: Layers in evaluation order

        Raises:
            EmptyNetworkError: If no layers are given
            ShapeMismatchError: If adjacent layer widths disagree
        """
        layers = tuple(layers)
        if not layers:
            raise EmptyNetworkError("Network requires at least one layer")

        for i in range(len(layers) - 1):
            out_width = layers[i].output_width
            in_width = layers[i + 1].input_width
            if out_width != in_width:
                raise ShapeMismatchError(
                    f"layer shape not match, please check {out_width} != {in_width}",
                    expected=out_width,
                    actual=in_width,
                    context={"component": "network", "layer_index": i + 1},
                )

        self._layers = layers

        logger.debug(
            "network_initialized",
            input_size=self.shape()[0],
            output_size=self.shape()[1],
            num_layers=len(layers),
        )

    @property
    def layers(self) -> Tuple[Layer, ...]:
        return self._layers

    def size(self) -> int:
        """Number of layers."""
        return len(self._layers)

    def shape(self) -> Shape:
        return (self._layers[0].input_width, self._layers[-1].output_width)

    def forward(self, x: TensorLike) -> np.ndarray:
        """Forward pass through network."""
        output = as_tensor(x, operation="Network.forward")
        for layer in self._layers:
            output = layer.forward(output)
        return output

    def layer_activations(self, x: TensorLike) -> List[np.ndarray]:
        """Get activations from each layer (for interpretability)."""
        activations = []
        current = as_tensor(x, operation="Network.layer_activations")

        for layer in self._layers:
            current = layer.forward(current)
            activations.append(current.copy())

        return activations

    def __repr__(self) -> str:
        return f"Network(shape={self.shape()}, num_layers={self.size()})"
