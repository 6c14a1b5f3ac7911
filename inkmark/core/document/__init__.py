"""
PDF document handling and manipulation.
"""
from .pdf_reader import PDFDocumentReader, open_document, render_page_image
from .pdf_exporter import PDFExporter

__all__ = ['PDFDocumentReader', 'PDFExporter', 'open_document', 'render_page_image']
