"""
Rendered pages and their composition with annotations.
"""
from .models import RenderedPage
from .frame_composer import compose_frame, paint_annotations

__all__ = ['RenderedPage', 'compose_frame', 'paint_annotations']
