from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

RGBA = Tuple[int, int, int, int]


class AnnotationType(Enum):
    HIGHLIGHT = "highlight"
    FREEHAND = "freehand"
    TEXT = "text"


@dataclass(frozen=True)
class HighlightRegion:
    """Rectangle in page-raster pixel coordinates."""
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Highlight region must have non-negative size, got "
                f"{self.width}x{self.height}"
            )

    @classmethod
    def from_drag(cls, start: Tuple[float, float],
                  end: Tuple[float, float]) -> "HighlightRegion":
        """
        Build the region spanned by a drag, whatever its direction.

        Args:
            start: (x, y) where the drag began
            end: (x, y) where the pointer is now

        Returns:
            Region with its top-left at the minimum corner
        """
        x0, y0 = start
        x1, y1 = end
        return cls(
            x=min(x0, x1),
            y=min(y0, y1),
            width=abs(x1 - x0),
            height=abs(y1 - y0),
        )

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0


@dataclass
class Annotation:
    """Represents a single annotation on a PDF page."""
    page_number: int  # 1-based page number
    annotation_type: AnnotationType
    color: RGBA  # RGBA tuple (0-255)

    # For highlights
    region: Optional[HighlightRegion] = None

    # For freehand strokes
    points: Optional[List[Tuple[float, float]]] = None
    stroke_width: float = 1.0

    # For text insertions; position is the baseline origin
    text: Optional[str] = None
    position: Optional[Tuple[float, float]] = None
    font_family: str = "Arial"
    font_size: int = 16
