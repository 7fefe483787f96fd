from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from common.geometry import Box, envelope, iou


class _Slot(Enum):
    KEPT = "kept"
    DISCARDED = "discarded"


def suppress_duplicates(boxes: Sequence[Box], threshold: float) -> List[Box]:
    """
    Greedy keep-first dedup within a single detector's output.

    Any later box whose IoU with an earlier kept box is ``>= threshold`` is
    dropped outright. Survivors keep their relative order.
    """
    state: Dict[int, _Slot] = {i: _Slot.KEPT for i in range(len(boxes))}
    for i, anchor in enumerate(boxes):
        if state[i] is _Slot.DISCARDED:
            continue
        for j in range(i + 1, len(boxes)):
            if iou(anchor, boxes[j]) >= threshold:
                state[j] = _Slot.DISCARDED
    return [b for i, b in enumerate(boxes) if state[i] is _Slot.KEPT]


def fuse_assign(
    primary: Sequence[Box], secondary: Sequence[Box], threshold: float
) -> Tuple[List[Box], List[Optional[int]]]:
    """
    Merge ``secondary`` into a copy of ``primary``.

    Returns the fused boxes and, per secondary index, the result index it was
    merged into, or ``None`` if it was appended unchanged.
    """
    result = list(primary)
    merged_into: List[Optional[int]] = []
    for b2 in secondary:
        target = None
        for k, b1 in enumerate(result):
            # first match wins, not best match
            if iou(b1, b2) >= threshold:
                result[k] = envelope(b1, b2)
                target = k
                break
        if target is None:
            result.append(b2)
        merged_into.append(target)
    return result, merged_into


def fuse(primary: Sequence[Box], secondary: Sequence[Box], threshold: float) -> List[Box]:
    """Fuse two detection sets of the same image. Argument order matters."""

    fused, _ = fuse_assign(primary, secondary, threshold)
    return fused
