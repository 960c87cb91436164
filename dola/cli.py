"""Command line entry point that runs the classifier over a dataset."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from dola.calc import Calculator
from dola.dataloader import ClassificationFolderLoader
from dola.loss import MeanSquaredError
from dola.primitives import F32


def train(
    dataset_path: str,
    epochs: int = 100,
    out: Optional[TextIO] = None,
) -> list[float]:
    """Run every sample through the network for ``epochs`` passes.

    Reports the prediction, target and loss of each sample to ``out`` and
    returns all loss values in order.
    """
    out = out if out is not None else sys.stdout
    dataset = ClassificationFolderLoader(F32)
    dataset.load(dataset_path)
    print(f"Train Dataset Size: {len(dataset)}", file=out)

    net = Calculator(F32)
    print(f"Parameter Count: {net.parameter_count()}", file=out)
    loss_fn = MeanSquaredError()

    losses: list[float] = []
    for epoch in range(epochs):
        print(f"Epoch {epoch}", file=out)
        for pixels, target in dataset:
            prediction = net.forward(pixels)
            loss_value = loss_fn.forward(prediction, target)
            losses.append(loss_value)
            print(f"Prediction: {[p.value for p in prediction]}", file=out)
            print(f"Target: {[t.value for t in target]}", file=out)
            print(f"Loss: {loss_value}", file=out)
    return losses


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run training."""
    parser = argparse.ArgumentParser(
        prog="dola", description="Run the image classifier over a dataset."
    )
    parser.add_argument("dataset", help="folder holding one sub-folder of .jpg files per class")
    parser.add_argument("--epochs", type=int, default=100, help="number of passes (default 100)")
    args = parser.parse_args(argv)
    if args.epochs < 0:
        parser.error("--epochs must not be negative")
    train(args.dataset, args.epochs, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())