"""
Toolbar components for PDF operations.
"""
from .navigation_bar import NavigationBar
from .tool_toolbar import ToolToolbar

__all__ = ['NavigationBar', 'ToolToolbar']
