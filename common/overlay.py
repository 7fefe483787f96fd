"""Draw fused detections onto BGR images."""

from __future__ import annotations

from typing import Dict, Iterable, Tuple

import cv2

from common.geometry import Box, BoxType

Color = Tuple[int, int, int]

TYPE_COLORS: Dict[BoxType, Color] = {
    BoxType.FACE: (0, 200, 0),
    BoxType.WEAPON: (0, 0, 255),
    BoxType.MASK: (255, 160, 0),
}


def _put_label(img, text: str, org: Tuple[int, int], color: Color, font_scale: float = 0.5):
    """Draw ``text`` above ``org`` on a solid background of ``color``."""

    font = cv2.FONT_HERSHEY_SIMPLEX
    (tw, th), base = cv2.getTextSize(text, font, font_scale, 1)
    x, y = org
    pad = 2
    y = max(th + base + 2 * pad, y)
    cv2.rectangle(img, (x, y - th - base - 2 * pad), (x + tw + 2 * pad, y), color, -1)
    cv2.putText(img, text, (x + pad, y - base - pad), font, font_scale, (255, 255, 255), 1, cv2.LINE_AA)


def draw_boxes(frame_bgr, boxes: Iterable[Box], draw_labels: bool = True):
    """Annotate ``frame_bgr`` in place with one rectangle per box."""

    for box in boxes:
        color = TYPE_COLORS.get(box.type, (255, 255, 255))
        cv2.rectangle(frame_bgr, (int(box.x1), int(box.y1)), (int(box.x2), int(box.y2)), color, 2)
        if draw_labels:
            _put_label(frame_bgr, box.type.name.lower(), (int(box.x1), int(box.y1)), color)
    return frame_bgr
