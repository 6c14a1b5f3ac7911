from typing import Optional

from PyQt5.QtCore import Qt

from inkmark.core.annotations import Annotation
from inkmark.core.tool_mode import ToolMode

from .base import SurfaceTool


class PenTool(SurfaceTool):
    """Freehand drawing: press starts a stroke, release commits it."""

    mode = ToolMode.PEN
    cursor = Qt.CrossCursor

    def __init__(self, surface, annotation_controller, parent=None):
        super().__init__(surface, annotation_controller, parent)
        # Preview stroke of the gesture in progress; moves extend its points
        self._stroke: Optional[Annotation] = None

    @property
    def is_drawing(self) -> bool:
        return self._stroke is not None

    def on_press(self, pos):
        self._stroke = self.annotation_controller.make_stroke(
            self.surface.page_number, [pos]
        )
        self.surface.set_preview([self._stroke])

    def on_move(self, pos):
        if not self.is_drawing:
            return
        self._stroke.points.append(pos)
        self.surface.update()

    def on_release(self, pos):
        if not self.is_drawing:
            return
        stroke = self._stroke
        if pos != stroke.points[-1]:
            stroke.points.append(pos)

        self.cancel()
        self.annotation_controller.add_stroke(stroke.page_number, stroke.points)

    def cancel(self):
        self._stroke = None
        self.surface.clear_preview()
