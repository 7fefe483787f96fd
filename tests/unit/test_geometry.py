from __future__ import annotations

import pathlib
import sys

REPO_ROOT = pathlib.Path(__file__).resolve().parents[2]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from common.geometry import Box, BoxType, envelope, iou


def test_iou_partial_overlap() -> None:
    # intersection 1, areas 4 + 4 → union 7
    assert iou(Box(0, 0, 2, 2), Box(1, 1, 3, 3)) == 1.0 / 7.0


def test_iou_disjoint_is_zero() -> None:
    assert iou(Box(0, 0, 2, 2), Box(4, 4, 6, 6)) == 0.0
    assert iou(Box(0, 0, 2, 2), Box(0, 5, 2, 7)) == 0.0


def test_iou_touching_edges_is_zero() -> None:
    assert iou(Box(0, 0, 2, 2), Box(2, 0, 4, 2)) == 0.0


def test_iou_self_and_symmetry() -> None:
    a = Box(3, 4, 17, 20)
    b = Box(10, 1, 25, 12, BoxType.MASK)
    assert iou(a, a) == 1.0
    assert iou(a, b) == iou(b, a)
    assert 0.0 < iou(a, b) < 1.0


def test_iou_area_has_no_pixel_correction() -> None:
    # (0,0,4,4) vs (1,1,5,5): 9 / (16 + 16 - 9)
    assert iou(Box(0, 0, 4, 4), Box(1, 1, 5, 5)) == 9.0 / 23.0
    assert Box(0, 0, 4, 4).area == 16


def test_iou_inverted_box_does_not_raise() -> None:
    assert iou(Box(4, 4, 0, 0), Box(0, 0, 4, 4)) == 0.0
    assert iou(Box(4, 4, 0, 0), Box(4, 4, 0, 0)) == 0.0


def test_iou_zero_area_union_is_zero() -> None:
    point = Box(1, 1, 1, 1)
    assert iou(point, point) == 0.0
    assert iou(point, Box(0, 0, 2, 2)) == 0.0


def test_is_degenerate() -> None:
    assert not Box(0, 0, 1, 1).is_degenerate
    assert Box(0, 0, 0, 5).is_degenerate
    assert Box(5, 0, 1, 5).is_degenerate


def test_envelope_keeps_first_type() -> None:
    merged = envelope(Box(0, 0, 4, 4, BoxType.FACE), Box(2, -1, 6, 3, BoxType.MASK))
    assert merged == Box(0, -1, 6, 4, BoxType.FACE)
