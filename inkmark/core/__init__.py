"""
Core business logic for Inkmark PDF.
"""
from .annotations import Annotation, AnnotationManager, AnnotationType, HighlightRegion
from .errors import DocumentLoadError, ExportError, InkmarkError, PageIndexError
from .tool_mode import ToolMode

__all__ = [
    "Annotation",
    "AnnotationManager",
    "AnnotationType",
    "HighlightRegion",
    "InkmarkError",
    "DocumentLoadError",
    "PageIndexError",
    "ExportError",
    "ToolMode",
]
