"""
Application controllers for managing interactions between UI and core logic.
"""
from .annotation_controller import AnnotationController
from .view_controller import PageNavigator
from .render_controller import RenderController
from .tool_controller import ToolModeController
from .input_handler import UserInputHandler

__all__ = [
    'AnnotationController',
    'PageNavigator',
    'RenderController',
    'ToolModeController',
    'UserInputHandler',
]
