"""
Unit Tests for Activation Functions
"""

import math
import warnings

import pytest

from feedforward.core.activation_functions import (
    Activation,
    get_activation,
    identity,
    sigmoid,
    tanh,
)


class TestActivationEnum:
    """Tests for the Activation enum."""

    def test_values(self):
        """Test Activation enum values."""
        assert Activation.IDENTITY.value == "identity"
        assert Activation.SIGMOID.value == "sigmoid"
        assert Activation.TANH.value == "tanh"

    @pytest.mark.parametrize("name", ["none", "linear", "identity", "Identity", " NONE "])
    def test_identity_aliases(self, name):
        """Test that identity aliases resolve."""
        assert Activation(name) is Activation.IDENTITY

    def test_case_insensitive(self):
        """Test that tags are matched case-insensitively."""
        assert Activation("TANH") is Activation.TANH
        assert Activation("Sigmoid") is Activation.SIGMOID

    def test_unknown_tag(self):
        """Test that unknown tags are rejected."""
        with pytest.raises(ValueError):
            Activation("relu")


class TestFunctions:
    """Tests for the scalar activation functions."""

    def test_identity(self):
        assert identity(2.5) == 2.5
        assert identity(-7) == -7.0

    def test_sigmoid(self):
        """Test sigmoid against the closed form."""
        assert sigmoid(0.0) == 0.5
        assert sigmoid(6.0) == pytest.approx(1.0 / (1.0 + math.exp(-6.0)))
        assert sigmoid(-3.0) == pytest.approx(1.0 - sigmoid(3.0))

    def test_sigmoid_large_negative_input(self):
        """Test that e^-x overflowing to inf gives 0.0 without a warning."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert sigmoid(-1000.0) == 0.0
            assert sigmoid(1000.0) == 1.0

    def test_tanh(self):
        assert tanh(0.0) == 0.0
        assert tanh(6.0) == pytest.approx(0.9999877116507956)

    def test_returns_python_float(self):
        assert type(sigmoid(1.0)) is float
        assert type(tanh(1.0)) is float


class TestGetActivation:
    """Tests for get_activation."""

    def test_by_enum(self):
        assert get_activation(Activation.TANH) is tanh
        assert get_activation(Activation.SIGMOID) is sigmoid
        assert get_activation(Activation.IDENTITY) is identity

    def test_by_name(self):
        assert get_activation("sigmoid") is sigmoid
        assert get_activation("none") is identity

    def test_unknown_name(self):
        """Test that unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unknown activation function"):
            get_activation("softplus")
