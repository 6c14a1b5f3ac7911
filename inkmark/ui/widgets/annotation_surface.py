"""
Drawing surface showing one rendered page with its annotations.
"""
from typing import List, Optional

from PyQt5.QtCore import QSize, pyqtProperty
from PyQt5.QtGui import QColor, QImage, QPainter
from PyQt5.QtWidgets import QSizePolicy, QWidget

from inkmark.core.annotations import Annotation
from inkmark.core.page import RenderedPage, compose_frame, paint_annotations


class AnnotationSurface(QWidget):
    """
    Page-sized widget that paints the composed frame.

    The frame (page render plus committed annotations) is rebuilt whenever the
    page or its annotations change. Live previews from the active tool are
    painted over the frame without touching it.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("AnnotationSurface")
        self.setSizePolicy(QSizePolicy.Fixed, QSizePolicy.Fixed)
        self.setMouseTracking(False)

        self._rendered: Optional[RenderedPage] = None
        self._annotations: List[Annotation] = []
        self._preview: List[Annotation] = []
        self._frame: Optional[QImage] = None
        self._expected_page: Optional[int] = None
        self._border_color = QColor(0, 0, 0)

    @property
    def page_number(self) -> Optional[int]:
        """Page currently shown, or None before the first render."""
        return self._rendered.page_number if self._rendered else None

    def expect_page(self, page_number: int) -> None:
        """Mark the page that is about to be shown."""
        self._expected_page = page_number

    def accepts_input(self) -> bool:
        """
        Check whether tools may draw on the surface.

        False without a page, or while the page shown is not the page the
        surface is waiting for.
        """
        if self._rendered is None:
            return False
        return self._expected_page is None or self._expected_page == self.page_number

    def getBorderColor(self) -> QColor:
        return QColor(self._border_color)

    def setBorderColor(self, color: QColor) -> None:
        self._border_color = QColor(color)
        self.update()

    # Settable from the stylesheet as qproperty-borderColor
    borderColor = pyqtProperty(QColor, fget=getBorderColor, fset=setBorderColor)

    def set_page(self, rendered: RenderedPage, annotations: List[Annotation]) -> None:
        """
        Show a newly rendered page.

        The widget is resized to the render before the frame is composed.
        """
        self._rendered = rendered
        self._preview = []
        self.setFixedSize(rendered.image.size())
        self.set_annotations(annotations)

    def set_annotations(self, annotations: List[Annotation]) -> None:
        """Replace the committed annotations and recompose the frame."""
        self._annotations = list(annotations)
        if self._rendered is not None:
            self._frame = compose_frame(self._rendered.image, self._annotations)
        self.update()

    def set_preview(self, annotations: List[Annotation]) -> None:
        """Show uncommitted annotations on top of the frame."""
        self._preview = list(annotations)
        self.update()

    def clear_preview(self) -> None:
        if self._preview:
            self._preview = []
            self.update()

    def clear(self) -> None:
        """Show nothing."""
        self._rendered = None
        self._annotations = []
        self._preview = []
        self._frame = None
        self._expected_page = None
        self.setFixedSize(0, 0)
        self.update()

    def flattened_frame(self) -> Optional[QImage]:
        """
        Get a copy of the current frame for export.

        Returns:
            Page render with committed annotations, or None without a page
        """
        return self._frame.copy() if self._frame is not None else None

    def sizeHint(self) -> QSize:  # type: ignore[override]
        if self._frame is not None:
            return self._frame.size()
        return QSize(0, 0)

    def paintEvent(self, event):  # type: ignore[override]
        if self._frame is None:
            return

        painter = QPainter(self)
        try:
            painter.drawImage(0, 0, self._frame)
            if self._preview:
                painter.setRenderHint(QPainter.Antialiasing)
                paint_annotations(painter, self._preview)

            # Border stays out of the frame, so it is never exported
            painter.setRenderHint(QPainter.Antialiasing, False)
            painter.setPen(self._border_color)
            painter.drawRect(self.rect().adjusted(0, 0, -1, -1))
        finally:
            painter.end()
