"""
Background worker for page rendering.
"""
import logging

from PyQt5.QtCore import QThread, pyqtSignal

from inkmark.core.document.pdf_reader import render_page_image
from inkmark.core.errors import InkmarkError

logger = logging.getLogger(__name__)


class RenderWorker(QThread):
    """Worker thread that rasterises one page without freezing the UI."""

    # Signals
    rendered = pyqtSignal(int, object)  # generation, RenderedPage
    failed = pyqtSignal(int, int, str)  # generation, page number, error message

    def __init__(self, document_bytes: bytes, page_number: int, scale: float,
                 generation: int, parent=None):
        super().__init__(parent)
        self.document_bytes = document_bytes
        self.page_number = page_number
        self.scale = scale
        self.generation = generation

    def run(self):
        """Render the page in the background thread."""
        try:
            result = render_page_image(self.document_bytes, self.page_number, self.scale)
        except InkmarkError as e:
            logger.error("Failed to render page %d: %s", self.page_number, e)
            self.failed.emit(self.generation, self.page_number, str(e))
            return
        except Exception as e:
            logger.exception("Unexpected error rendering page %d", self.page_number)
            self.failed.emit(self.generation, self.page_number, str(e))
            return

        self.rendered.emit(self.generation, result)
