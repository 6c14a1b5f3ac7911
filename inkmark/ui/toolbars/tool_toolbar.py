from PyQt5.QtCore import pyqtSignal
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QPushButton

from inkmark.core.tool_mode import ToolMode


class ToolToolbar(QFrame):
    """Top bar with the document actions and one button per tool mode."""

    open_requested = pyqtSignal()
    mode_requested = pyqtSignal(object)  # ToolMode
    save_requested = pyqtSignal()

    MODE_BUTTONS = [
        (ToolMode.PEN, "Edit (Pen)"),
        (ToolMode.TEXT, "Add Text"),
        (ToolMode.HIGHLIGHT, "Highlight"),
    ]

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("ToolToolbar")
        self.mode_buttons = {}
        self.setup_ui()

    def setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 8, 10, 8)
        layout.setSpacing(10)
        layout.addStretch()

        self.open_button = QPushButton("Open", self)
        self.open_button.setToolTip("Open PDF (Ctrl+O)")
        self.open_button.clicked.connect(self.open_requested.emit)
        layout.addWidget(self.open_button)

        for mode, text in self.MODE_BUTTONS:
            button = QPushButton(text, self)
            button.setObjectName("ModeButton")
            button.setCheckable(True)
            # Clicking reports the request; the checked state follows the controller
            button.clicked.connect(lambda _checked, m=mode: self._on_mode_clicked(m))
            layout.addWidget(button)
            self.mode_buttons[mode] = button

        self.save_button = QPushButton("Save PDF", self)
        self.save_button.setObjectName("SaveButton")
        self.save_button.setToolTip("Save PDF (Ctrl+S)")
        self.save_button.clicked.connect(self.save_requested.emit)
        layout.addWidget(self.save_button)

        layout.addStretch()

    def _on_mode_clicked(self, mode: ToolMode):
        # Undo Qt's own toggle until the controller confirms the mode
        self.mode_buttons[mode].setChecked(not self.mode_buttons[mode].isChecked())
        self.mode_requested.emit(mode)

    def set_active_mode(self, mode: ToolMode):
        """Check the button of the active mode only."""
        for button_mode, button in self.mode_buttons.items():
            button.setChecked(button_mode == mode)

    def set_document_actions_enabled(self, enabled: bool):
        """Enable tools and saving only when a document is loaded."""
        for button in self.mode_buttons.values():
            button.setEnabled(enabled)
        self.save_button.setEnabled(enabled)
