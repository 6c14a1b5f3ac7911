"""
Exception types raised by the document, rendering and export layers.
"""


class InkmarkError(Exception):
    """Base class for all application errors."""


class DocumentLoadError(InkmarkError):
    """The supplied bytes could not be parsed as a PDF document."""


class PageIndexError(InkmarkError, IndexError):
    """A page number outside [1, page_count] was requested."""

    def __init__(self, page_number: int, page_count: int):
        super().__init__(
            f"Page {page_number} is out of range (document has {page_count} pages)"
        )
        self.page_number = page_number
        self.page_count = page_count


class ExportError(InkmarkError):
    """Flattening, serialising or saving the annotated document failed."""
