"""
Composition of a rendered page and its annotations into a single raster.
"""
from typing import Iterable

from PyQt5.QtCore import QPointF, QRectF, Qt
from PyQt5.QtGui import QColor, QFont, QImage, QPainter, QPainterPath, QPen

from inkmark.core.annotations.models import Annotation, AnnotationType


def compose_frame(base_image: QImage, annotations: Iterable[Annotation]) -> QImage:
    """
    Paint annotations over a copy of a rendered page.

    The base image is left untouched. Annotations are painted in iteration
    order, so overlapping highlights blend by creation order.

    Args:
        base_image: Rendered page
        annotations: Annotations to burn into the frame

    Returns:
        New ARGB32 image the size of the base image
    """
    frame = base_image.convertToFormat(QImage.Format_ARGB32)

    painter = QPainter(frame)
    try:
        painter.setRenderHint(QPainter.Antialiasing)
        paint_annotations(painter, annotations)
    finally:
        painter.end()

    return frame


def paint_annotations(painter: QPainter, annotations: Iterable[Annotation]) -> None:
    """Paint each annotation with the given painter."""
    for ann in annotations:
        if ann.annotation_type == AnnotationType.HIGHLIGHT:
            _paint_highlight(painter, ann)
        elif ann.annotation_type == AnnotationType.FREEHAND:
            _paint_freehand(painter, ann)
        elif ann.annotation_type == AnnotationType.TEXT:
            _paint_text(painter, ann)


def _paint_highlight(painter: QPainter, ann: Annotation):
    if ann.region is None:
        return

    region = ann.region
    painter.fillRect(
        QRectF(region.x, region.y, region.width, region.height), QColor(*ann.color)
    )


def _paint_freehand(painter: QPainter, ann: Annotation):
    if not ann.points or len(ann.points) < 2:
        return

    pen = QPen(QColor(*ann.color), ann.stroke_width)
    pen.setCapStyle(Qt.RoundCap)
    pen.setJoinStyle(Qt.RoundJoin)
    painter.setPen(pen)
    painter.setBrush(Qt.NoBrush)

    path = QPainterPath()
    first = ann.points[0]
    path.moveTo(first[0], first[1])

    for point in ann.points[1:]:
        path.lineTo(point[0], point[1])

    painter.drawPath(path)


def _paint_text(painter: QPainter, ann: Annotation):
    if not ann.text or ann.position is None:
        return

    font = QFont(ann.font_family)
    font.setPixelSize(ann.font_size)
    painter.setFont(font)
    painter.setPen(QColor(*ann.color))
    painter.drawText(QPointF(ann.position[0], ann.position[1]), ann.text)
