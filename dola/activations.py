"""Element-wise and normalising activation functions."""

from __future__ import annotations

from typing import Sequence

from dola.primitives import FloatScalar


class Relu:
    """Rectified linear unit: negative values become zero."""

    def forward(self, inputs: Sequence[FloatScalar]) -> list[FloatScalar]:
        """Apply the rectifier to every element."""
        return [value if value > 0.0 else type(value).zero() for value in inputs]


class SoftMax:
    """Normalises the inputs so that they sum to one.

    Each element is divided by the sum of all elements; no exponential is
    applied, so the inputs are expected to be non-negative.
    """

    def forward(self, inputs: Sequence[FloatScalar]) -> list[FloatScalar]:
        """Divide every element by the sum of all elements."""
        if not inputs:
            return []
        total = type(inputs[0]).zero()
        for value in inputs:
            total = total + value
        return [value / total for value in inputs]