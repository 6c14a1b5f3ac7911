"""
Data models for rendered pages.
"""
from dataclasses import dataclass
from typing import Tuple

from PyQt5.QtGui import QImage


@dataclass
class RenderedPage:
    """A page rasterised at a given scale."""
    page_number: int  # 1-based
    image: QImage
    page_size: Tuple[float, float]  # intrinsic size in points
    scale: float

    @property
    def width(self) -> int:
        return self.image.width()

    @property
    def height(self) -> int:
        return self.image.height()
