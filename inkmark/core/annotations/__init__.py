"""
Annotation model for PDF pages.
"""
from .models import Annotation, AnnotationType, HighlightRegion
from .manager import AnnotationManager

__all__ = [
    'Annotation',
    'AnnotationType',
    'HighlightRegion',
    'AnnotationManager',
]
