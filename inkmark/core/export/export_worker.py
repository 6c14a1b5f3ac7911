import logging
from typing import Dict, List, Optional

from PyQt5.QtCore import QThread, pyqtSignal
from PyQt5.QtGui import QImage

from inkmark.core.annotations import Annotation
from inkmark.core.document.pdf_exporter import PDFExporter
from inkmark.core.document.pdf_reader import render_page_image
from inkmark.core.errors import InkmarkError
from inkmark.core.page.frame_composer import compose_frame

logger = logging.getLogger(__name__)


class ExportWorker(QThread):
    """Worker thread for flattening annotations into a PDF without freezing the UI."""

    # Signals
    finished = pyqtSignal(bool, str)  # success, message
    progress = pyqtSignal(str)  # status message
    page_progress = pyqtSignal(int, int)  # current, total pages

    def __init__(self, document_bytes: bytes, output_path: str,
                 annotations_by_page: Dict[int, List[Annotation]],
                 scale: float, current_page: Optional[int] = None,
                 current_frame: Optional[QImage] = None, parent=None):
        """
        Args:
            document_bytes: Original PDF bytes
            output_path: Destination file
            annotations_by_page: Annotation snapshot keyed by 1-based page
            scale: Render scale used for re-derived pages
            current_page: Page shown on the surface, exported even without
                annotations
            current_frame: Surface pixels for current_page
        """
        super().__init__(parent)
        self.document_bytes = document_bytes
        self.output_path = output_path
        self.annotations_by_page = annotations_by_page
        self.scale = scale
        self.current_page = current_page
        self.current_frame = current_frame
        self.exporter = PDFExporter()

    def run(self):
        """Execute the export in a background thread."""
        try:
            self.progress.emit("Flattening annotations...")
            frames = self._collect_frames()

            self.progress.emit("Writing document...")
            if len(frames) == 1 and self.current_page in frames:
                pdf_bytes = self.exporter.export_current_page(
                    self.document_bytes, self.current_page, frames[self.current_page]
                )
            else:
                pdf_bytes = self.exporter.export_pages(self.document_bytes, frames)

            self.exporter.save(pdf_bytes, self.output_path)

        except InkmarkError as e:
            logger.exception("Export to %s failed", self.output_path)
            self.finished.emit(False, f"Failed to save PDF: {e}")
            return
        except Exception as e:
            logger.exception("Unexpected error exporting to %s", self.output_path)
            self.finished.emit(False, f"Error during export: {e}")
            return

        self.finished.emit(True, f"Saved annotated PDF to {self.output_path}")

    def _collect_frames(self) -> Dict[int, QImage]:
        """Build the flattened raster of every page that must be exported."""
        frames: Dict[int, QImage] = {}
        if self.current_page is not None and self.current_frame is not None:
            frames[self.current_page] = self.current_frame

        pending = [p for p in sorted(self.annotations_by_page) if p not in frames]
        total = len(pending)

        for i, page_number in enumerate(pending):
            self.page_progress.emit(i, total)
            rendered = render_page_image(self.document_bytes, page_number, self.scale)
            frames[page_number] = compose_frame(
                rendered.image, self.annotations_by_page[page_number]
            )

        self.page_progress.emit(total, total)
        return frames
