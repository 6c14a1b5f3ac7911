"""
Controller for the active annotation tool.
"""
import logging
from typing import Dict, Optional, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from inkmark.controllers.annotation_controller import AnnotationController
from inkmark.core.tool_mode import ToolMode
from inkmark.ui.tools import HighlightTool, PenTool, SurfaceTool, TextTool

logger = logging.getLogger(__name__)


class ToolModeController(QObject):
    """
    Keeps exactly one tool mode active and its tool installed on the surface.

    Text mode has an extra awaiting-input state between the click that picks
    a position and the answer from the text dialog.
    """

    # Signals
    mode_changed = pyqtSignal(object)  # ToolMode
    text_input_requested = pyqtSignal(int, float, float)  # page number, x, y
    text_input_cancelled = pyqtSignal()

    def __init__(self, surface, annotation_controller: AnnotationController,
                 parent=None):
        super().__init__(parent)
        self.surface = surface
        self._mode = ToolMode.NONE
        self._pending_text: Optional[Tuple[int, float, float]] = None

        text_tool = TextTool(surface, annotation_controller, self)
        text_tool.position_chosen.connect(self.begin_text_input)

        self._tools: Dict[ToolMode, SurfaceTool] = {
            ToolMode.PEN: PenTool(surface, annotation_controller, self),
            ToolMode.TEXT: text_tool,
            ToolMode.HIGHLIGHT: HighlightTool(surface, annotation_controller, self),
        }

    @property
    def mode(self) -> ToolMode:
        return self._mode

    @property
    def active_tool(self) -> Optional[SurfaceTool]:
        return self._tools.get(self._mode)

    def tool(self, mode: ToolMode) -> Optional[SurfaceTool]:
        return self._tools.get(mode)

    def select(self, mode: ToolMode) -> None:
        """
        Make a mode the active one.

        The previous tool is removed from the surface, and its gesture
        discarded, before the new tool is installed.
        """
        if mode == self._mode:
            return

        self.cancel_text_input()

        old_tool = self.active_tool
        if old_tool is not None:
            old_tool.deactivate()

        self._mode = mode

        new_tool = self.active_tool
        if new_tool is not None:
            new_tool.activate()

        logger.debug("Tool mode set to %s", mode.value)
        self.mode_changed.emit(mode)

    def cancel_gesture(self) -> None:
        """Discard the active tool's gesture and any pending text input."""
        self.cancel_text_input()
        if self.active_tool is not None:
            self.active_tool.cancel()

    def shutdown(self) -> None:
        """Remove every tool from the surface."""
        self.select(ToolMode.NONE)

    # Awaiting-text state

    @property
    def is_awaiting_text(self) -> bool:
        return self._pending_text is not None

    def begin_text_input(self, page_number: int, x: float, y: float) -> bool:
        """
        Enter the awaiting-text state for a clicked position.

        Returns:
            False if not in text mode or an input is already pending
        """
        if self._mode != ToolMode.TEXT or self.is_awaiting_text:
            return False

        self._pending_text = (page_number, x, y)
        self.text_input_requested.emit(page_number, x, y)
        return True

    def finish_text_input(self) -> Optional[Tuple[int, float, float]]:
        """
        Leave the awaiting-text state.

        Returns:
            The pending (page number, x, y), or None if nothing was pending
        """
        pending, self._pending_text = self._pending_text, None
        return pending

    def cancel_text_input(self) -> None:
        """Drop a pending text input."""
        if self._pending_text is None:
            return
        self._pending_text = None
        self.text_input_cancelled.emit()
