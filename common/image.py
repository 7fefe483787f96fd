"""Image handle and color-layout conversion shared by detectors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import cv2
import numpy as np


class ColorLayout(IntEnum):
    GRAY = 0
    RGB = 1
    BGR = 2


class ColorLayoutError(ValueError):
    """Raised when an image does not have the layout a conversion expects."""


@dataclass(eq=False)
class Image:
    pixels: np.ndarray
    layout: ColorLayout

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def same_as(self, other: "Image") -> bool:
        """True if both handles describe the same picture."""

        if self is other:
            return True
        return (
            self.layout == other.layout
            and self.pixels.shape == other.pixels.shape
            and bool(np.array_equal(self.pixels, other.pixels))
        )


def _channels(pixels: np.ndarray) -> int:
    if pixels.ndim == 2:
        return 1
    if pixels.ndim != 3:
        raise ColorLayoutError(f"Unexpected image ndim={pixels.ndim}, expected 2 or 3.")
    return int(pixels.shape[2])


def rgb_to_bgr(image: Image) -> Image:
    """Swap the first and last channel of an RGB image; returns a new image."""

    if image.layout != ColorLayout.RGB:
        raise ColorLayoutError(f"Expected RGB image, got {image.layout.name}.")
    channels = _channels(image.pixels)
    if channels != 3:
        raise ColorLayoutError(f"RGB image has {channels} channels, expected 3.")
    return Image(cv2.cvtColor(image.pixels, cv2.COLOR_RGB2BGR), ColorLayout.BGR)


def to_bgr(image: Image) -> Image:
    """Normalize any supported layout to a 3-channel BGR image."""

    if image.layout == ColorLayout.BGR:
        if _channels(image.pixels) != 3:
            raise ColorLayoutError("BGR image must have 3 channels.")
        return image
    if image.layout == ColorLayout.RGB:
        return rgb_to_bgr(image)
    if _channels(image.pixels) != 1:
        raise ColorLayoutError("GRAY image must have a single channel.")
    pixels = image.pixels if image.pixels.ndim == 2 else image.pixels[:, :, 0]
    return Image(cv2.cvtColor(pixels, cv2.COLOR_GRAY2BGR), ColorLayout.BGR)
