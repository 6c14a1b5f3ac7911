import logging
import os
import tempfile
from typing import Dict

from PyQt5.QtCore import QBuffer, QByteArray, QIODevice
from PyQt5.QtGui import QImage

from inkmark.core.document.pdf_reader import load_page, open_document
from inkmark.core.errors import ExportError, InkmarkError

logger = logging.getLogger(__name__)


class PDFExporter:
    """Burns flattened page rasters into a copy of a PDF document."""

    def export_current_page(self, document_bytes: bytes, page_number: int,
                            surface_image: QImage) -> bytes:
        """
        Flatten one page of the document.

        Args:
            document_bytes: Original PDF bytes (left untouched)
            page_number: 1-based page that receives the image
            surface_image: Page raster including its annotations

        Returns:
            Bytes of the new document

        Raises:
            ExportError: If parsing, encoding, embedding or serialising fails
        """
        return self.export_pages(document_bytes, {page_number: surface_image})

    def export_pages(self, document_bytes: bytes, frames: Dict[int, QImage]) -> bytes:
        """
        Flatten several pages of the document.

        Each image is drawn over the full extent of its page. Pages without a
        frame are copied unchanged.

        Args:
            document_bytes: Original PDF bytes (left untouched)
            frames: Mapping of 1-based page number to page raster

        Returns:
            Bytes of the new document

        Raises:
            ExportError: If parsing, encoding, embedding or serialising fails
        """
        try:
            doc = open_document(document_bytes)
        except InkmarkError as e:
            raise ExportError(f"Cannot open source document: {e}") from e

        try:
            for page_number in sorted(frames):
                page = load_page(doc, page_number)
                png_bytes = self.image_to_png(frames[page_number])

                page.insert_image(
                    page.rect,
                    stream=png_bytes,
                    keep_proportion=False,
                    overlay=True,
                )
                logger.debug(
                    "Embedded %dx%d frame on page %d",
                    frames[page_number].width(),
                    frames[page_number].height(),
                    page_number,
                )

            return doc.tobytes(garbage=4, deflate=True)

        except ExportError:
            raise
        except (InkmarkError, RuntimeError, ValueError) as e:
            raise ExportError(f"Failed to flatten annotations into PDF: {e}") from e
        finally:
            doc.close()

    @staticmethod
    def image_to_png(image: QImage) -> bytes:
        """
        Encode an image as PNG.

        Raises:
            ExportError: If the image is empty or cannot be encoded
        """
        if image.isNull():
            raise ExportError("Cannot encode an empty image")

        # Frames are opaque; dropping alpha keeps PyMuPDF from adding an SMask
        opaque = image.convertToFormat(QImage.Format_RGB888)

        data = QByteArray()
        buffer = QBuffer(data)
        buffer.open(QIODevice.WriteOnly)
        try:
            if not opaque.save(buffer, "PNG"):
                raise ExportError("PNG encoding failed")
        finally:
            buffer.close()

        return bytes(data)

    @staticmethod
    def save(pdf_bytes: bytes, output_path: str) -> None:
        """
        Write the document to disk.

        The bytes go to a temporary file in the destination directory that
        replaces output_path only once fully written.

        Raises:
            ExportError: If the file cannot be written
        """
        output_dir = os.path.dirname(os.path.abspath(output_path))
        temp_path = None

        try:
            temp_fd, temp_path = tempfile.mkstemp(suffix=".pdf", dir=output_dir)
            with os.fdopen(temp_fd, "wb") as f:
                f.write(pdf_bytes)
            os.replace(temp_path, output_path)
        except OSError as e:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
            raise ExportError(f"Could not write {output_path}: {e}") from e

        logger.info("Saved %d bytes to %s", len(pdf_bytes), output_path)
