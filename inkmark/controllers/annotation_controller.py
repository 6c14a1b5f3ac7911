"""
Controller for creating annotations from tool gestures.
"""
from typing import List, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from inkmark.config import AppConfig
from inkmark.core.annotations import (
    Annotation,
    AnnotationManager,
    AnnotationType,
    HighlightRegion,
)


class AnnotationController(QObject):
    """Turns finished gestures into annotations styled from the configuration."""

    # Signals
    annotations_changed = pyqtSignal(int)  # Emitted with the affected page number

    def __init__(self, annotation_manager: AnnotationManager, config: AppConfig,
                 parent=None):
        super().__init__(parent)
        self.annotation_manager = annotation_manager
        self.config = config

    def add_highlight(self, page_number: int,
                      region: HighlightRegion) -> Optional[Annotation]:
        """
        Commit a highlight rectangle.

        Empty regions (a click without a drag) are ignored.

        Returns:
            The created annotation, or None if nothing was added
        """
        if region.is_empty():
            return None

        annotation = self.annotation_manager.add_region(
            page_number, region, self.config.highlight_color
        )
        self.annotations_changed.emit(page_number)
        return annotation

    def add_stroke(self, page_number: int,
                   points: List[Tuple[float, float]]) -> Optional[Annotation]:
        """
        Commit a freehand stroke.

        Args:
            page_number: Page the stroke was drawn on
            points: Pointer positions in page-raster pixels

        Returns:
            The created annotation, or None for strokes under two points
        """
        if len(points) < 2:
            return None

        annotation = self.make_stroke(page_number, points)
        self.annotation_manager.add_annotation(annotation)
        self.annotations_changed.emit(page_number)
        return annotation

    def add_text(self, page_number: int, position: Tuple[float, float],
                 text: str) -> Optional[Annotation]:
        """
        Commit a text insertion.

        Returns:
            The created annotation, or None if the text is empty
        """
        if not text:
            return None

        annotation = Annotation(
            page_number=page_number,
            annotation_type=AnnotationType.TEXT,
            color=self.config.text_color,
            text=text,
            position=position,
            font_family=self.config.text_font_family,
            font_size=self.config.text_font_size,
        )
        self.annotation_manager.add_annotation(annotation)
        self.annotations_changed.emit(page_number)
        return annotation

    def make_stroke(self, page_number: int,
                    points: List[Tuple[float, float]]) -> Annotation:
        """Build an uncommitted stroke, also used for live previews."""
        return Annotation(
            page_number=page_number,
            annotation_type=AnnotationType.FREEHAND,
            color=self.config.pen_color,
            points=list(points),
            stroke_width=self.config.pen_width,
        )

    def make_highlight(self, page_number: int, region: HighlightRegion) -> Annotation:
        """Build an uncommitted highlight, also used for live previews."""
        return Annotation(
            page_number=page_number,
            annotation_type=AnnotationType.HIGHLIGHT,
            color=self.config.highlight_color,
            region=region,
        )

    def get_annotations_for_page(self, page_number: int) -> List[Annotation]:
        return self.annotation_manager.get_annotations_for_page(page_number)

    def snapshot(self) -> dict:
        """
        Copy the annotations of every annotated page.

        Returns:
            Mapping of page number to its annotations, safe to hand to a
            worker thread
        """
        return {
            page: list(self.annotation_manager.get_annotations_for_page(page))
            for page in self.annotation_manager.annotated_pages()
        }

    def clear(self) -> None:
        """Remove all annotations."""
        self.annotation_manager.clear_all()
