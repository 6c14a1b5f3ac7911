"""
Controller for page navigation.
"""
from PyQt5.QtCore import QObject, pyqtSignal


class PageNavigator(QObject):
    """Tracks the current page and clamps navigation to the document."""

    # Signals
    page_changed = pyqtSignal(int)  # Emitted with the new 1-based page number

    def __init__(self, parent=None):
        super().__init__(parent)
        self.current_page: int = 0
        self.total_pages: int = 0

    def set_document_info(self, total_pages: int) -> None:
        """
        Reset navigation for a newly loaded document.

        Args:
            total_pages: Total number of pages in the document
        """
        self.total_pages = max(0, total_pages)
        self.current_page = 1 if self.total_pages else 0
        self.page_changed.emit(self.current_page)

    def clear(self) -> None:
        """Forget the document."""
        self.set_document_info(0)

    def next_page(self) -> bool:
        """
        Go to the next page.

        Returns:
            True if the page changed, False at the last page
        """
        return self.jump_to_page(self.current_page + 1)

    def previous_page(self) -> bool:
        """
        Go to the previous page.

        Returns:
            True if the page changed, False at the first page
        """
        return self.jump_to_page(self.current_page - 1)

    def jump_to_page(self, page_num: int) -> bool:
        """
        Jump to a specific page, clamped to the document.

        Args:
            page_num: 1-based page number

        Returns:
            True if the page changed
        """
        if self.total_pages == 0:
            return False

        target = max(1, min(self.total_pages, page_num))
        if target == self.current_page:
            return False

        self.current_page = target
        self.page_changed.emit(target)
        return True

    def can_go_next(self) -> bool:
        return self.current_page < self.total_pages

    def can_go_previous(self) -> bool:
        return self.current_page > 1

    def page_label(self) -> str:
        """Text for the page position readout."""
        return f"Page {self.current_page} of {self.total_pages}"
