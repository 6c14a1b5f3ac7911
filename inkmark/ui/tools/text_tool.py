from PyQt5.QtCore import Qt, pyqtSignal

from inkmark.core.tool_mode import ToolMode

from .base import SurfaceTool


class TextTool(SurfaceTool):
    """Text insertion: a click asks for the text to place at that point."""

    mode = ToolMode.TEXT
    cursor = Qt.IBeamCursor

    # Signals
    position_chosen = pyqtSignal(int, float, float)  # page number, x, y

    def on_release(self, pos):
        self.position_chosen.emit(self.surface.page_number, pos[0], pos[1])
