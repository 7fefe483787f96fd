from __future__ import annotations

from typing import Any, List, Sequence, Union

from common.geometry import Box, BoxType
from common.image import Image
from common.interfaces import Detector


def parse_box_type(value: Union[int, str]) -> BoxType:
    if isinstance(value, str):
        try:
            return BoxType[value.upper()]
        except KeyError:
            raise ValueError(f"Unknown box type: {value!r}") from None
    return BoxType(int(value))


def parse_box(raw: Sequence[Any]) -> Box:
    """Parse ``[x1, y1, x2, y2]`` or ``[x1, y1, x2, y2, type]``."""

    if len(raw) not in (4, 5):
        raise ValueError(f"Expected [x1, y1, x2, y2(, type)], got {raw!r}")
    x1, y1, x2, y2 = (int(v) for v in raw[:4])
    box_type = parse_box_type(raw[4]) if len(raw) == 5 else BoxType.FACE
    return Box(x1, y1, x2, y2, box_type)


class FixedDetector(Detector):
    """Replays a fixed list of boxes from config instead of running a model."""

    def __init__(self, cfg: dict):
        self.name = str(cfg.get("name", "fixed"))
        self.clip = bool(cfg.get("clip", True))
        self.boxes = [parse_box(raw) for raw in cfg.get("boxes", [])]

    def detect(self, image: Image) -> List[Box]:
        if not self.clip:
            return list(self.boxes)
        frame_w, frame_h = image.width, image.height
        results: List[Box] = []
        # x2/y2 may equal the frame size: areas carry no +1 pixel term.
        for b in self.boxes:
            x1 = max(0, min(frame_w, b.x1))
            x2 = max(0, min(frame_w, b.x2))
            y1 = max(0, min(frame_h, b.y1))
            y2 = max(0, min(frame_h, b.y2))
            results.append(Box(x1, y1, x2, y2, b.type))
        return results
