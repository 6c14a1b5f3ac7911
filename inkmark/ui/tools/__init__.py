"""
Pointer tools installed on the annotation surface.
"""
from .base import SurfaceTool
from .highlight_tool import HighlightTool
from .pen_tool import PenTool
from .text_tool import TextTool

__all__ = ['SurfaceTool', 'PenTool', 'HighlightTool', 'TextTool']
