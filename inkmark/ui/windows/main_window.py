"""
Main application window for Inkmark PDF.
"""
import logging
import os
from typing import Optional

from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import (
    QFileDialog,
    QInputDialog,
    QMainWindow,
    QMessageBox,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from inkmark.config import AppConfig
from inkmark.controllers import (
    AnnotationController,
    PageNavigator,
    RenderController,
    ToolModeController,
    UserInputHandler,
)
from inkmark.core.annotations import AnnotationManager
from inkmark.core.document import PDFDocumentReader
from inkmark.core.errors import DocumentLoadError
from inkmark.core.export import ExportWorker
from inkmark.core.page import RenderedPage
from inkmark.core.tool_mode import ToolMode
from inkmark.styles import ThemeManager
from inkmark.ui.toolbars import NavigationBar, ToolToolbar
from inkmark.ui.widgets import AnnotationSurface
from inkmark.utils import default_output_path, get_resource_path, resource_exists

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Single-page PDF annotator window."""

    # Signals
    document_loaded = pyqtSignal(int)  # page count
    export_finished = pyqtSignal(bool, str)  # success, message

    def __init__(self, config: AppConfig, file_path: Optional[str] = None):
        super().__init__()
        self.config = config

        # Initialize core components
        self._init_core_components()

        # Setup UI
        self._setup_window()
        self._setup_ui()

        # Initialize controllers (need the surface)
        self._init_controllers()
        self._setup_connections()

        ThemeManager.apply_theme(self, self.config.dark_mode)
        self._update_navigation()
        self.toolbar.set_document_actions_enabled(False)

        # Load the requested file, falling back to the bundled sample
        if file_path:
            self.load_pdf(file_path)
        elif resource_exists(self.config.default_document):
            self.load_pdf(get_resource_path(self.config.default_document))

    def _init_core_components(self):
        """Initialize core business logic components."""
        self.pdf_reader = PDFDocumentReader()
        self.annotation_manager = AnnotationManager()

        # Export worker (created when needed)
        self.export_worker: Optional[ExportWorker] = None

        # Open text dialog while awaiting text input
        self._text_dialog: Optional[QInputDialog] = None

    def _setup_window(self):
        """Setup main window properties."""
        self.setWindowTitle("Inkmark PDF")
        self.setMinimumSize(800, 600)

    def _setup_ui(self):
        """Setup the user interface."""
        self.toolbar = ToolToolbar(self)
        self.navigation_bar = NavigationBar(self)

        self.surface = AnnotationSurface()
        self.scroll_area = QScrollArea()
        self.scroll_area.setAlignment(Qt.AlignCenter)
        self.scroll_area.setWidget(self.surface)

        main_layout = QVBoxLayout()
        main_layout.setSpacing(0)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.addWidget(self.toolbar)
        main_layout.addWidget(self.scroll_area, 1)
        main_layout.addWidget(self.navigation_bar)

        container = QWidget()
        container.setLayout(main_layout)
        self.setCentralWidget(container)

        self.statusBar().showMessage("No PDF loaded")

    def _init_controllers(self):
        """Initialize application controllers."""
        self.input_handler = UserInputHandler(self)
        self.navigator = PageNavigator(self)
        self.render_controller = RenderController(self.config.render_scale, self)
        self.annotation_controller = AnnotationController(
            self.annotation_manager, self.config, self
        )
        self.tool_controller = ToolModeController(
            self.surface, self.annotation_controller, self
        )

    def _setup_connections(self):
        """Setup signal/slot connections."""
        # Toolbars
        self.toolbar.open_requested.connect(self.open_pdf)
        self.toolbar.save_requested.connect(self.save_pdf)
        self.toolbar.mode_requested.connect(self.tool_controller.select)
        self.navigation_bar.previous_requested.connect(self.navigator.previous_page)
        self.navigation_bar.next_requested.connect(self.navigator.next_page)

        # Controllers
        self.navigator.page_changed.connect(self._on_page_changed)
        self.render_controller.page_rendered.connect(self._on_page_rendered)
        self.render_controller.render_failed.connect(self._on_render_failed)
        self.annotation_controller.annotations_changed.connect(
            self._on_annotations_changed
        )
        self.tool_controller.mode_changed.connect(self.toolbar.set_active_mode)
        self.tool_controller.text_input_requested.connect(self._on_text_input_requested)
        self.tool_controller.text_input_cancelled.connect(self._close_text_dialog)

    # Document Management Methods

    def load_pdf(self, file_path: str) -> bool:
        """Load a PDF file from disk."""
        try:
            total_pages = self.pdf_reader.load_pdf(file_path)
        except DocumentLoadError as e:
            logger.error("Failed to load %s: %s", file_path, e)
            QMessageBox.critical(self, "Error", f"Error loading PDF: {e}")
            return False

        self._on_document_loaded(total_pages, os.path.basename(file_path))
        return True

    def load_document_bytes(self, data: bytes, name: str = "document.pdf") -> bool:
        """Load a PDF document that is already in memory."""
        try:
            total_pages = self.pdf_reader.load_bytes(data)
        except DocumentLoadError as e:
            logger.error("Failed to load %s: %s", name, e)
            QMessageBox.critical(self, "Error", f"Error loading PDF: {e}")
            return False

        self._on_document_loaded(total_pages, name)
        return True

    def _on_document_loaded(self, total_pages: int, name: str):
        self.tool_controller.select(ToolMode.NONE)
        self.annotation_controller.clear()
        self.render_controller.invalidate()
        self.surface.clear()

        self.setWindowTitle(f"Inkmark PDF - {name}")
        self.toolbar.set_document_actions_enabled(True)
        self.statusBar().showMessage(f"Loaded {name}")

        # Triggers the first render through page_changed
        self.navigator.set_document_info(total_pages)
        self.document_loaded.emit(total_pages)

    def open_pdf(self):
        """Open a PDF file dialog."""
        file_path, _ = QFileDialog.getOpenFileName(
            self, "Open PDF", "", "PDF Files (*.pdf)"
        )
        if file_path:
            self.load_pdf(file_path)

    def save_pdf(self) -> bool:
        """Ask where to save and export the annotated document."""
        if not self.pdf_reader.is_loaded():
            QMessageBox.warning(self, "No PDF", "No PDF document is currently loaded.")
            return False

        if self.export_worker is not None:
            self.statusBar().showMessage("An export is already running")
            return False

        suggested = default_output_path(
            self.pdf_reader.get_file_path(), self.config.output_filename
        )
        output_path, _ = QFileDialog.getSaveFileName(
            self, "Save Annotated PDF", suggested, "PDF Files (*.pdf)"
        )
        if not output_path:
            return False

        self.start_export(output_path)
        return True

    def start_export(self, output_path: str) -> ExportWorker:
        """
        Export the session to a file on a background thread.

        The page on screen is taken from the surface as it currently appears;
        every other annotated page is re-rendered from its annotations.
        """
        self.export_worker = ExportWorker(
            self.pdf_reader.document_bytes,
            output_path,
            self.annotation_controller.snapshot(),
            self.config.render_scale,
            current_page=self.surface.page_number,
            current_frame=self.surface.flattened_frame(),
        )

        self.export_worker.progress.connect(self.statusBar().showMessage)
        self.export_worker.finished.connect(self._on_export_finished)
        self.export_worker.start()
        return self.export_worker

    def _on_export_finished(self, success: bool, message: str):
        if self.export_worker is not None:
            self.export_worker.wait()
            self.export_worker.deleteLater()
        self.export_worker = None

        self.statusBar().showMessage(message)
        if not success:
            QMessageBox.critical(self, "Save Failed", message)

        self.export_finished.emit(success, message)

    # Page Methods

    def _on_page_changed(self, page_number: int):
        """Handle page change from the navigator."""
        self.tool_controller.cancel_gesture()
        self.surface.expect_page(page_number)
        self._update_navigation()

        if page_number and self.pdf_reader.is_loaded():
            self.render_controller.request_render(
                self.pdf_reader.document_bytes, page_number
            )

    def _on_page_rendered(self, rendered: RenderedPage):
        annotations = self.annotation_controller.get_annotations_for_page(
            rendered.page_number
        )
        self.surface.set_page(rendered, annotations)

    def _on_render_failed(self, page_number: int, message: str):
        self.statusBar().showMessage(f"Could not render page {page_number}: {message}")

    def _on_annotations_changed(self, page_number: int):
        """Recompose the surface when the shown page's annotations change."""
        if page_number == self.surface.page_number:
            self.surface.set_annotations(
                self.annotation_controller.get_annotations_for_page(page_number)
            )

    def _update_navigation(self):
        self.navigation_bar.update_state(
            self.navigator.page_label(),
            self.navigator.can_go_previous(),
            self.navigator.can_go_next(),
        )

    # Text Input

    def _on_text_input_requested(self, page_number: int, x: float, y: float):
        """Ask for the text without blocking the event loop."""
        dialog = QInputDialog(self)
        dialog.setWindowTitle("Add Text")
        dialog.setLabelText("Enter the text to add:")
        dialog.setInputMode(QInputDialog.TextInput)
        dialog.textValueSelected.connect(self._on_text_entered)
        dialog.rejected.connect(self.tool_controller.cancel_text_input)
        dialog.finished.connect(dialog.deleteLater)

        self._text_dialog = dialog
        dialog.open()

    def _on_text_entered(self, text: str):
        self._text_dialog = None
        pending = self.tool_controller.finish_text_input()
        if pending is None:
            return

        page_number, x, y = pending
        self.annotation_controller.add_text(page_number, (x, y), text)

    def _close_text_dialog(self):
        dialog, self._text_dialog = self._text_dialog, None
        if dialog is not None and dialog.isVisible():
            dialog.reject()

    # Event Handlers

    def keyPressEvent(self, event):  # type: ignore[override]
        """Handle keyboard shortcuts."""
        if not self.input_handler.handle_key_press(event):
            super().keyPressEvent(event)

    def closeEvent(self, event):  # type: ignore[override]
        """Release tools and wait for background work before closing."""
        self.tool_controller.shutdown()
        self.render_controller.shutdown()
        if self.export_worker is not None:
            self.export_worker.wait()
        event.accept()
