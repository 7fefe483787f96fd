from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from common.dedup import fuse, suppress_duplicates
from common.geometry import Box
from common.image import Image


class FrameMismatchError(ValueError):
    """Raised when fusing detections that annotate different images."""


@dataclass
class Frame:
    image: Image
    boxes: List[Box] = field(default_factory=list)


def clean_frame(frame: Frame, threshold: float) -> Frame:
    """Keep one box per object; boxes are the same object if IoU >= threshold."""

    return Frame(frame.image, suppress_duplicates(frame.boxes, threshold))


def union_frames(f1: Frame, f2: Frame, threshold: float) -> Frame:
    """Merge the detections of two frames of the same image into one frame."""

    if not f1.image.same_as(f2.image):
        raise FrameMismatchError(
            "Cannot fuse frames of different images: "
            f"{f1.image.width}x{f1.image.height}/{f1.image.layout.name} vs "
            f"{f2.image.width}x{f2.image.height}/{f2.image.layout.name}"
        )
    return Frame(f1.image, fuse(f1.boxes, f2.boxes, threshold))
