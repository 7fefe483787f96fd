from __future__ import annotations

from typing import List

from common.geometry import Box
from common.image import Image


class Detector:
    """Quiddity interface: detect objects in a BGR image."""

    name: str = "generic"

    def detect(self, image: Image) -> List[Box]:
        """Return boxes in detector order; order is significant downstream."""

        raise NotImplementedError
