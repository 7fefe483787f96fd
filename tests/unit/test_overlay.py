from __future__ import annotations

import pathlib
import sys

import numpy as np

REPO_ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from common.geometry import Box, BoxType
from common.overlay import TYPE_COLORS, draw_boxes


def test_draw_boxes_uses_type_color() -> None:
    frame = np.zeros((100, 100, 3), dtype=np.uint8)
    out = draw_boxes(frame, [Box(10, 10, 50, 50, BoxType.WEAPON)])
    assert out is frame
    assert frame[30, 10].tolist() == list(TYPE_COLORS[BoxType.WEAPON])
    assert frame[30, 30].tolist() == [0, 0, 0]


def test_draw_boxes_without_labels() -> None:
    frame = np.zeros((60, 60, 3), dtype=np.uint8)
    draw_boxes(frame, [Box(20, 20, 40, 40, BoxType.MASK)], draw_labels=False)
    assert frame[5, 25].tolist() == [0, 0, 0]
    assert frame[20, 30].tolist() == list(TYPE_COLORS[BoxType.MASK])
