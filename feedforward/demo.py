"""
Feedforward Demo Entry Point

Runs a fixed input vector through:
1. A single unit
2. A fully-connected layer, followed by softmax and argmax
3. A three-layer network

Results are printed to stdout. Configuration and network errors are reported
on stderr and do not change the exit status.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

import structlog

from feedforward.core.activation_functions import Activation
from feedforward.core.neural_base import Layer, Network, Unit
from feedforward.core.tensor_utils import (
    argmax_with_probability,
    format_shape,
    format_vector,
    softmax,
)
from feedforward.shared.config import FeedforwardConfig, load_config
from feedforward.shared.exceptions import ConfigurationError, FeedforwardError
from feedforward.shared.log_config import configure_logging

logger = structlog.get_logger(__name__)


def build_demo_units() -> Tuple[Unit, Unit, Unit]:
    """The three hard-coded units of the demo."""
    return (
        Unit([1, -1, 3], 1, Activation.TANH),
        Unit([-1, 1, 5], 1, Activation.SIGMOID),
        Unit([-1, -1, 9], 1),
    )


def build_demo_network(
    units: Sequence[Unit],
    layer_activation: Union[Activation, str] = Activation.TANH,
) -> Network:
    """Stack two layers using ``layer_activation`` and a final identity layer."""
    return Network([
        Layer(units, layer_activation),
        Layer(units, layer_activation),
        Layer(units, Activation.IDENTITY),
    ])


def run_demo(config: FeedforwardConfig) -> None:
    """
    Run the demonstration and print each result.

    Raises:
        FeedforwardError: If any component rejects the configured input
    """
    x = config.demo.input
    m, n, o = build_demo_units()

    print(f"{m.forward(x):g}")

    layer = Layer([m, n, o], config.demo.layer_activation)
    ret = layer.forward(x)
    print(format_vector(ret))
    prob = softmax(ret)
    print(format_vector(prob))
    print(argmax_with_probability(prob))
    logger.debug("layer_activation_stats", **layer.activation_stats(x))

    print("linear shape: " + format_shape(layer.shape()))
    network = build_demo_network([m, n, o], config.demo.layer_activation)
    print(format_shape(network.shape()))
    activations = network.layer_activations(x)
    for i, activation in enumerate(activations):
        logger.debug("layer_output", layer_index=i, output=activation.tolist())
    output = activations[-1]
    print(format_vector(output))

    logger.info(
        "demo_complete",
        network_shape=network.shape(),
        output=output.tolist(),
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Feedforward network forward-pass demo")
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file (default: feedforward.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Override the configured log level",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo."""
    args = parse_args(argv)

    # Bootstrap logging so config loading is logged to stderr too
    configure_logging(level=args.log_level or "INFO")

    try:
        config = load_config(Path(args.config) if args.config else None)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        logger.error("config_load_failed", error=str(e), context=e.context)
        return 0

    configure_logging(
        level=args.log_level or config.logging.level,
        renderer=config.logging.renderer,
    )
    logger.debug("demo_starting", config=config.to_dict())

    try:
        run_demo(config)
    except FeedforwardError as e:
        print(e, file=sys.stderr)
        logger.error("demo_failed", kind=e.kind, error=str(e), context=e.context)

    return 0


if __name__ == "__main__":
    sys.exit(main())
