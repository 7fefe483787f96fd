"""YAML configuration for the fusion pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

import yaml


def load_config(path: str) -> Dict[str, Any]:
    with open(path) as fh:
        cfg = yaml.safe_load(fh)
    return cfg or {}


def _flag(section: Mapping[str, Any], key: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ValueError(f"{key} must be true or false, got {value!r}")
    return value


def _threshold(section: Mapping[str, Any], key: str, default: float) -> float:
    value = float(section.get(key, default))
    if not 0.0 <= value <= 1.0:
        raise ValueError(f"{key} must be within [0, 1], got {value}")
    return value


@dataclass
class FusionConfig:
    dedup_enabled: bool = True
    dedup_iou_threshold: float = 0.5
    fuse_iou_threshold: float = 0.3

    @classmethod
    def from_dict(cls, cfg: Mapping[str, Any]) -> "FusionConfig":
        dedup = cfg.get("dedup", {}) or {}
        fuse = cfg.get("fuse", {}) or {}
        return cls(
            dedup_enabled=_flag(dedup, "enabled", True),
            dedup_iou_threshold=_threshold(dedup, "iou_threshold", 0.5),
            fuse_iou_threshold=_threshold(fuse, "iou_threshold", 0.3),
        )
