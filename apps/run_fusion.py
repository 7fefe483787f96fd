#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import pathlib
import sys

import cv2

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from common.config import load_config
from common.image import ColorLayout, Image
from common.overlay import draw_boxes
from fusion.pipeline import FusionPipeline

LOGGER = logging.getLogger("fusion.app")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Dedup and fuse two detectors' boxes on one image.")
    ap.add_argument("-c", "--config", required=True)
    ap.add_argument("-i", "--image", required=True)
    ap.add_argument("-o", "--out", help="write an annotated copy of the image here")
    ap.add_argument("--log-level", default="INFO")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config(args.config)
    pipeline = FusionPipeline.from_config(cfg)

    pixels = cv2.imread(args.image, cv2.IMREAD_COLOR)
    if pixels is None:
        raise SystemExit(f"Could not read image: {args.image}")

    frame = pipeline.process(Image(pixels, ColorLayout.BGR))
    for idx, box in enumerate(frame.boxes):
        LOGGER.info("box %d: %s %s", idx, box.type.name, box.xyxy)

    if args.out:
        out = draw_boxes(frame.image.pixels.copy(), frame.boxes)
        pathlib.Path(args.out).parent.mkdir(parents=True, exist_ok=True)
        if not cv2.imwrite(args.out, out):
            raise SystemExit(f"Could not write image: {args.out}")
        LOGGER.info("Wrote %s", args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
