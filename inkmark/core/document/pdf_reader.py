"""
PDF document loading and page rendering.
"""
import logging
from pathlib import Path
from typing import Optional, Tuple

import fitz  # PyMuPDF
from PyQt5.QtGui import QImage

from inkmark.core.errors import DocumentLoadError, PageIndexError
from inkmark.core.page.models import RenderedPage

logger = logging.getLogger(__name__)


def open_document(document_bytes: bytes) -> fitz.Document:
    """
    Parse a fresh document object from raw bytes.

    The caller owns the returned document and must close it.

    Raises:
        DocumentLoadError: If the bytes are empty, not a PDF, password protected
            or without pages
    """
    if not document_bytes:
        raise DocumentLoadError("Document is empty")

    try:
        doc = fitz.open(stream=bytes(document_bytes), filetype="pdf")
    except (RuntimeError, ValueError) as e:
        raise DocumentLoadError(f"Could not parse PDF: {e}") from e

    if doc.needs_pass:
        doc.close()
        raise DocumentLoadError("Document is password protected")

    if doc.page_count == 0:
        doc.close()
        raise DocumentLoadError("Document has no pages")

    return doc


def load_page(doc: fitz.Document, page_number: int) -> fitz.Page:
    """
    Load a page by its 1-based number.

    Raises:
        PageIndexError: If page_number is outside [1, page_count]
        DocumentLoadError: If MuPDF cannot load the page
    """
    if not 1 <= page_number <= doc.page_count:
        raise PageIndexError(page_number, doc.page_count)

    try:
        return doc.load_page(page_number - 1)
    except (RuntimeError, ValueError) as e:
        raise DocumentLoadError(f"Could not load page {page_number}: {e}") from e


def render_page_image(document_bytes: bytes, page_number: int, scale: float) -> RenderedPage:
    """
    Rasterise one page of a document.

    Deterministic for a given (document_bytes, page_number, scale).

    Args:
        document_bytes: Raw PDF bytes
        page_number: 1-based page number
        scale: Zoom factor applied to the intrinsic page size

    Returns:
        The rendered page

    Raises:
        DocumentLoadError: If the bytes are not a valid document
        PageIndexError: If the page does not exist
    """
    doc = open_document(document_bytes)
    try:
        page = load_page(doc, page_number)
        try:
            pix = page.get_pixmap(matrix=fitz.Matrix(scale, scale), alpha=False)
        except (RuntimeError, ValueError) as e:
            raise DocumentLoadError(f"Could not render page {page_number}: {e}") from e

        # Copy so the image owns its pixels once the pixmap is released
        image = QImage(
            pix.samples, pix.width, pix.height, pix.stride, QImage.Format_RGB888
        ).copy()

        return RenderedPage(
            page_number=page_number,
            image=image,
            page_size=(page.rect.width, page.rect.height),
            scale=scale,
        )
    finally:
        doc.close()


class PDFDocumentReader:
    """Holds the loaded document bytes for the session and renders pages."""

    def __init__(self):
        self.document_bytes: Optional[bytes] = None
        self.total_pages: int = 0
        self.current_file_path: Optional[str] = None

    def load_pdf(self, file_path: str) -> int:
        """
        Load a PDF document from disk.

        Args:
            file_path: Path to the PDF file

        Returns:
            Number of pages

        Raises:
            DocumentLoadError: If the file cannot be read or parsed
        """
        try:
            data = Path(file_path).read_bytes()
        except OSError as e:
            raise DocumentLoadError(f"Could not read {file_path}: {e}") from e

        total = self.load_bytes(data)
        self.current_file_path = file_path
        return total

    def load_bytes(self, data: bytes) -> int:
        """
        Load a PDF document from memory.

        The previous document stays loaded if the new bytes are invalid.

        Returns:
            Number of pages
        """
        doc = open_document(data)
        try:
            total = doc.page_count
        finally:
            doc.close()

        self.document_bytes = bytes(data)
        self.total_pages = total
        self.current_file_path = None
        logger.info("Loaded document with %d page(s)", total)
        return total

    def close_document(self) -> None:
        """Forget the current document."""
        self.document_bytes = None
        self.total_pages = 0
        self.current_file_path = None

    def render_page(self, page_number: int, scale: float) -> RenderedPage:
        """
        Render a page of the loaded document.

        Raises:
            DocumentLoadError: If no document is loaded
            PageIndexError: If the page does not exist
        """
        if self.document_bytes is None:
            raise DocumentLoadError("No document loaded")
        return render_page_image(self.document_bytes, page_number, scale)

    def get_page_size(self, page_number: int) -> Tuple[float, float]:
        """
        Get the intrinsic size of a page in points.

        Raises:
            DocumentLoadError: If no document is loaded
            PageIndexError: If the page does not exist
        """
        if self.document_bytes is None:
            raise DocumentLoadError("No document loaded")

        doc = open_document(self.document_bytes)
        try:
            rect = load_page(doc, page_number).rect
            return rect.width, rect.height
        finally:
            doc.close()

    def is_loaded(self) -> bool:
        """Check if a document is currently loaded."""
        return self.document_bytes is not None

    def get_file_path(self) -> Optional[str]:
        """Get the path of the currently loaded file."""
        return self.current_file_path

    def get_page_count(self) -> int:
        """Get the total number of pages."""
        return self.total_pages
