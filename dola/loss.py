"""Loss functions comparing a prediction with a target."""

from __future__ import annotations

from typing import Sequence

from dola.primitives import FloatScalar, round_f32


class MeanSquaredError:
    """Accumulates the signed difference between prediction and target.

    The loss is the single-precision sum of ``-(target - prediction)`` over
    paired elements; extra elements in the longer sequence are ignored.
    """

    def forward(
        self, prediction: Sequence[FloatScalar], target: Sequence[FloatScalar]
    ) -> float:
        """Return the loss as a float."""
        loss = 0.0
        for predicted, expected in zip(prediction, target):
            loss = round_f32(loss + float(-(expected - predicted)))
        return loss