"""Two-detector dedup + fusion pipeline for a single still image."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from common.config import FusionConfig
from common.frames import Frame, clean_frame, union_frames
from common.geometry import Box
from common.image import Image, to_bgr
from common.interfaces import Detector
from common.loader import build_from_config

LOGGER = logging.getLogger(__name__)


class FusionPipeline:
    def __init__(
        self,
        primary: Detector,
        secondary: Detector,
        cfg: Optional[FusionConfig] = None,
    ):
        self.primary = primary
        self.secondary = secondary
        self.cfg = cfg or FusionConfig()

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "FusionPipeline":
        detectors = cfg["detectors"]
        primary = build_from_config(detectors["primary"])
        secondary = build_from_config(detectors["secondary"])
        LOGGER.info(
            "Loaded detectors: primary=%s secondary=%s",
            detectors["primary"]["impl"],
            detectors["secondary"]["impl"],
        )
        return cls(primary, secondary, FusionConfig.from_dict(cfg))

    def _detect(self, detector: Detector, image: Image) -> Frame:
        boxes: List[Box] = []
        for box in detector.detect(image):
            if box.is_degenerate:
                LOGGER.warning(
                    "Dropping degenerate box %s from detector %s",
                    box.xyxy,
                    getattr(detector, "name", type(detector).__name__),
                )
                continue
            boxes.append(box)
        frame = Frame(image, boxes)
        if self.cfg.dedup_enabled:
            before = len(frame.boxes)
            frame = clean_frame(frame, self.cfg.dedup_iou_threshold)
            LOGGER.debug(
                "dedup %s: %d -> %d boxes",
                getattr(detector, "name", type(detector).__name__),
                before,
                len(frame.boxes),
            )
        return frame

    def process(self, image: Image) -> Frame:
        image_bgr = to_bgr(image)
        f1 = self._detect(self.primary, image_bgr)
        f2 = self._detect(self.secondary, image_bgr)

        fused = union_frames(f1, f2, self.cfg.fuse_iou_threshold)
        # each secondary box is either appended or absorbed
        n_appended = len(fused.boxes) - len(f1.boxes)
        LOGGER.info(
            "fused %dx%d: primary=%d secondary=%d merged=%d appended=%d total=%d",
            image_bgr.width,
            image_bgr.height,
            len(f1.boxes),
            len(f2.boxes),
            len(f2.boxes) - n_appended,
            n_appended,
            len(fused.boxes),
        )
        return fused
