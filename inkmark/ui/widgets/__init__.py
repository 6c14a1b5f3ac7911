"""
Custom widgets for PDF viewing and annotation.
"""
from .annotation_surface import AnnotationSurface

__all__ = ['AnnotationSurface']
