from typing import Optional, Tuple

from PyQt5.QtCore import Qt

from inkmark.core.annotations import HighlightRegion
from inkmark.core.tool_mode import ToolMode

from .base import SurfaceTool


class HighlightTool(SurfaceTool):
    """Rectangle highlighting: drag to size the region, release to commit."""

    mode = ToolMode.HIGHLIGHT
    cursor = Qt.PointingHandCursor

    def __init__(self, surface, annotation_controller, parent=None):
        super().__init__(surface, annotation_controller, parent)
        self._anchor: Optional[Tuple[float, float]] = None
        self._page_number: Optional[int] = None

    @property
    def is_dragging(self) -> bool:
        return self._anchor is not None

    def on_press(self, pos):
        self._anchor = pos
        self._page_number = self.surface.page_number

    def on_move(self, pos):
        if not self.is_dragging:
            return
        region = HighlightRegion.from_drag(self._anchor, pos)
        preview = self.annotation_controller.make_highlight(self._page_number, region)
        self.surface.set_preview([preview])

    def on_release(self, pos):
        if not self.is_dragging:
            return
        region = HighlightRegion.from_drag(self._anchor, pos)
        page_number = self._page_number
        self.cancel()
        self.annotation_controller.add_highlight(page_number, region)

    def cancel(self):
        self._anchor = None
        self._page_number = None
        self.surface.clear_preview()
