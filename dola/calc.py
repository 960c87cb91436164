"""A small fully connected classifier for 28x28 single-channel images."""

from __future__ import annotations

import random as _random
from typing import Sequence, Type

from dola.activations import Relu, SoftMax
from dola.layers import DenseLayer
from dola.primitives import F32, FloatScalar


class Calculator:
    """Four dense layers with ReLU in between and a normalising output."""

    def __init__(
        self,
        kind: Type[FloatScalar] = F32,
        rng: _random.Random | None = None,
    ) -> None:
        self.kind = kind
        self.layers: list[DenseLayer] = [
            DenseLayer("l0", 256, [28, 28], kind, rng),
            DenseLayer("l1", 30, [256, 1], kind, rng),
            DenseLayer("l2", 30, [30, 1], kind, rng),
            DenseLayer("l3", 10, [30, 1], kind, rng),
        ]
        self._relu = Relu()
        self._softmax = SoftMax()

    def parameter_count(self) -> int:
        """Total number of trainable parameters across all layers."""
        return sum(layer.params() for layer in self.layers)

    def forward(self, inputs: Sequence[FloatScalar]) -> list[FloatScalar]:
        """Run ``inputs`` (784 values) through the network; returns 10 values."""
        *hidden, last = self.layers
        values = list(inputs)
        for layer in hidden:
            values = self._relu.forward(layer.forward(values))
        return self._softmax.forward(last.forward(values))