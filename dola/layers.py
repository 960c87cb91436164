"""Fully connected neurons and layers built on reduced-precision scalars."""

from __future__ import annotations

import math
import random as _random
from typing import Sequence, Type

from dola.primitives import F32, FloatScalar


class Neuron:
    """A single neuron: a weighted sum of its inputs plus a bias."""

    __slots__ = ("weights", "bias")

    def __init__(self, weights: Sequence[FloatScalar], bias: FloatScalar) -> None:
        self.weights: list[FloatScalar] = list(weights)
        self.bias: FloatScalar = bias

    def __repr__(self) -> str:
        return f"Neuron(weights={self.weights!r}, bias={self.bias!r})"

    @classmethod
    def random(
        cls,
        inputs: int,
        kind: Type[FloatScalar] = F32,
        rng: _random.Random | None = None,
    ) -> "Neuron":
        """Create a neuron with ``inputs`` weights drawn uniformly from [0, 1)."""
        bias = kind.random(rng)
        weights = [kind.random(rng) for _ in range(inputs)]
        return cls(weights, bias)

    def sum(self, inputs: Sequence[FloatScalar]) -> FloatScalar:
        """Return the dot product of ``inputs`` with the weights, plus the bias."""
        if len(inputs) != len(self.weights):
            raise ValueError("Neuron received invalid input shape!")
        total = type(self.bias).zero()
        for value, weight in zip(inputs, self.weights):
            total = total + value * weight
        return total + self.bias

    def params(self) -> int:
        """Number of trainable parameters: the weights and the bias."""
        return len(self.weights) + 1


class DenseLayer:
    """A layer of neurons that each see the whole (flattened) input."""

    def __init__(
        self,
        layer_name: str,
        neurons: int,
        input_dim: Sequence[int],
        kind: Type[FloatScalar] = F32,
        rng: _random.Random | None = None,
    ) -> None:
        if not input_dim:
            raise ValueError(f"Layer {layer_name} needs at least one input dimension")
        self.layer_name = layer_name
        self.input_dim: list[int] = list(input_dim)
        self.freeze = False
        size = self._input_size()
        self.neurons: list[Neuron] = [Neuron.random(size, kind, rng) for _ in range(neurons)]

    def _input_size(self) -> int:
        return math.prod(self.input_dim)

    def forward(self, inputs: Sequence[FloatScalar]) -> list[FloatScalar]:
        """Return one output per neuron for the flattened ``inputs``."""
        if len(inputs) != self._input_size():
            raise ValueError(
                f"Layer {self.layer_name} received invalid input shape! "
                f"Expected {self.input_dim} got {len(inputs)}"
            )
        return [neuron.sum(inputs) for neuron in self.neurons]

    def params(self) -> int:
        """Total number of trainable parameters in the layer."""
        return sum(neuron.params() for neuron in self.neurons)