"""
Base class for annotation tools.

A tool is an event filter installed on the annotation surface while its mode
is active. Installing and removing the filter is the only way a tool gains or
loses access to pointer events.
"""
from typing import TYPE_CHECKING, Tuple

from PyQt5.QtCore import QEvent, QObject, Qt

from inkmark.core.tool_mode import ToolMode

if TYPE_CHECKING:
    from inkmark.controllers.annotation_controller import AnnotationController
    from inkmark.ui.widgets.annotation_surface import AnnotationSurface


class SurfaceTool(QObject):
    """Interprets pointer events on the annotation surface."""

    mode = ToolMode.NONE
    cursor = Qt.ArrowCursor

    def __init__(self, surface: "AnnotationSurface",
                 annotation_controller: "AnnotationController", parent=None):
        super().__init__(parent)
        self.surface = surface
        self.annotation_controller = annotation_controller
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        """Start receiving the surface's pointer events."""
        if self._active:
            return
        self.surface.installEventFilter(self)
        self.surface.setCursor(self.cursor)
        self._active = True

    def deactivate(self) -> None:
        """Abandon any gesture in progress and stop receiving events."""
        if not self._active:
            return
        self.cancel()
        self.surface.removeEventFilter(self)
        self.surface.unsetCursor()
        self._active = False

    def cancel(self) -> None:
        """Discard the gesture in progress, if any."""

    def eventFilter(self, obj, event):  # type: ignore[override]
        if obj is not self.surface or not self.surface.accepts_input():
            return False

        event_type = event.type()
        if event_type == QEvent.MouseButtonPress:
            if event.button() != Qt.LeftButton:
                return False
            self.on_press(self._clamp(event.pos()))
            return True
        if event_type == QEvent.MouseMove:
            if not (event.buttons() & Qt.LeftButton):
                return False
            self.on_move(self._clamp(event.pos()))
            return True
        if event_type == QEvent.MouseButtonRelease:
            if event.button() != Qt.LeftButton:
                return False
            self.on_release(self._clamp(event.pos()))
            return True

        return False

    def on_press(self, pos: Tuple[float, float]) -> None:
        pass

    def on_move(self, pos: Tuple[float, float]) -> None:
        pass

    def on_release(self, pos: Tuple[float, float]) -> None:
        pass

    def _clamp(self, pos) -> Tuple[float, float]:
        """Convert a widget position to page-raster pixels inside the page."""
        x = max(0, min(self.surface.width(), pos.x()))
        y = max(0, min(self.surface.height(), pos.y()))
        return float(x), float(y)
