"""Loads images from a folder of class sub-folders for classification."""

from __future__ import annotations

import glob
import logging
import os
import random as _random
from typing import Iterator, Optional, Type

import numpy as np
from PIL import Image

from dola.primitives import F32, FloatScalar

logger = logging.getLogger(__name__)

Sample = tuple[list[FloatScalar], list[FloatScalar]]


class ClassificationFolderLoader:
    """Dataset of ``*.jpg`` files whose parent folder name is the label.

    Each sample is a pair of flattened grayscale pixel values and a one-hot
    target vector with one entry per label seen.
    """

    def __init__(self, kind: Type[FloatScalar] = F32) -> None:
        self.kind = kind
        self.images: list[tuple[str, int]] = []
        self.label_map: dict[str, int] = {}
        self.order: list[int] = []

    @property
    def label_count(self) -> int:
        """Number of distinct labels loaded."""
        return len(self.label_map)

    def load(self, path: str | os.PathLike) -> None:
        """Add every ``.jpg`` below ``path``, labelled by its parent folder."""
        pattern = os.path.join(os.fspath(path), "**", "*.jpg")
        for image_path in sorted(glob.glob(pattern, recursive=True)):
            label = os.path.basename(os.path.dirname(image_path))
            label_idx = self.label_map.setdefault(label, len(self.label_map))
            self.images.append((image_path, label_idx))

        logger.info("Loaded %d images", len(self.images))
        logger.info("Loaded %d labels", self.label_count)
        self.order = list(range(len(self.images)))

    def shuffle(self, rng: _random.Random | None = None) -> None:
        """Shuffle the order in which samples are returned."""
        (rng if rng is not None else _random).shuffle(self.order)

    def load_image(self, path: str | os.PathLike) -> list[FloatScalar]:
        """Return the grayscale pixels of the image, scaled down by 255 twice."""
        with Image.open(path) as img:
            luma = np.asarray(img.convert("L"), dtype=np.float32) / np.float32(255.0)
        scaled = luma / np.float32(255.0)
        return [self.kind(float(v)) for v in scaled.ravel()]

    def get(self, index: int) -> Optional[Sample]:
        """Return the sample at ``index`` in the current order, or None."""
        if not 0 <= index < len(self.order):
            return None
        image_path, label = self.images[self.order[index]]
        pixels = self.load_image(image_path)
        target = [self.kind.zero() for _ in range(self.label_count)]
        target[label] = self.kind(1.0)
        return pixels, target

    def __len__(self) -> int:
        return len(self.images)

    def __iter__(self) -> Iterator[Sample]:
        for index in range(len(self.order)):
            sample = self.get(index)
            if sample is not None:
                yield sample