"""
In-memory store for the annotations of the current document.
"""
from typing import List

from .models import RGBA, Annotation, AnnotationType, HighlightRegion


class AnnotationManager:
    """Keeps every annotation of the session in creation order."""

    def __init__(self):
        self.annotations: List[Annotation] = []

    def add_annotation(self, annotation: Annotation) -> None:
        """
        Append an annotation.

        Args:
            annotation: Annotation to add

        Raises:
            ValueError: If the annotation's page number is not positive
        """
        if annotation.page_number < 1:
            raise ValueError(f"Invalid page number {annotation.page_number}")
        self.annotations.append(annotation)

    def add_region(self, page_number: int, region: HighlightRegion,
                   color: RGBA) -> Annotation:
        """
        Append a highlight region to a page.

        Args:
            page_number: 1-based page number
            region: Region in page-raster pixels
            color: RGBA fill color

        Returns:
            The created annotation
        """
        annotation = Annotation(
            page_number=page_number,
            annotation_type=AnnotationType.HIGHLIGHT,
            color=color,
            region=region,
        )
        self.add_annotation(annotation)
        return annotation

    def list_regions(self, page_number: int) -> List[HighlightRegion]:
        """Get the highlight regions of a page in creation order."""
        return [
            ann.region
            for ann in self.get_annotations_for_page(page_number)
            if ann.annotation_type == AnnotationType.HIGHLIGHT
        ]

    def get_annotations_for_page(self, page_number: int) -> List[Annotation]:
        """
        Get all annotations for a specific page.

        Args:
            page_number: 1-based page number

        Returns:
            Annotations on the page in creation order
        """
        return [ann for ann in self.annotations if ann.page_number == page_number]

    def annotated_pages(self) -> List[int]:
        """Get the sorted page numbers that carry at least one annotation."""
        return sorted({ann.page_number for ann in self.annotations})

    def get_annotation_count(self) -> int:
        """Get total number of annotations."""
        return len(self.annotations)

    def clear_all(self) -> None:
        """Remove every annotation."""
        self.annotations.clear()
