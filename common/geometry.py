"""Box primitives and the overlap metric used by dedup and fusion."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

BBox = Tuple[int, int, int, int]


class BoxType(IntEnum):
    FACE = 0
    WEAPON = 1
    MASK = 2


@dataclass(frozen=True)
class Box:
    """Axis-aligned ``(x1, y1, x2, y2)`` detection with a class tag."""

    x1: int
    y1: int
    x2: int
    y2: int
    type: BoxType = BoxType.FACE

    @property
    def xyxy(self) -> BBox:
        return self.x1, self.y1, self.x2, self.y2

    @property
    def area(self) -> int:
        # No +1 pixel correction; thresholds are tuned against this.
        return (self.x2 - self.x1) * (self.y2 - self.y1)

    @property
    def is_degenerate(self) -> bool:
        return self.x2 <= self.x1 or self.y2 <= self.y1


def envelope(b1: Box, b2: Box) -> Box:
    """Smallest box covering ``b1`` and ``b2``; keeps the type of ``b1``."""

    return Box(
        min(b1.x1, b2.x1),
        min(b1.y1, b2.y1),
        max(b1.x2, b2.x2),
        max(b1.y2, b2.y2),
        b1.type,
    )


def iou(b1: Box, b2: Box) -> float:
    x_left = max(b1.x1, b2.x1)
    x_right = min(b1.x2, b2.x2)
    y_top = max(b1.y1, b2.y1)
    y_bottom = min(b1.y2, b2.y2)
    if x_left > x_right or y_bottom < y_top:
        return 0.0

    inter = (x_right - x_left) * (y_bottom - y_top)
    denom = b1.area + b2.area - inter
    if denom <= 0:
        return 0.0
    return inter / float(denom)
