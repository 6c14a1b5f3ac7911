from PyQt5.QtCore import Qt
from PyQt5.QtGui import QKeySequence

from inkmark.core.tool_mode import ToolMode


class UserInputHandler:
    """
    Handles keyboard shortcuts for the main window.
    """
    def __init__(self, main_window):
        """
        Initializes the handler with a reference to the main window.

        Args:
            main_window (MainWindow): A reference to the main application window.
        """
        self.main_window = main_window

    def handle_key_press(self, event) -> bool:
        """
        Handles key press events for the main window.

        Returns:
            True if the event was consumed
        """
        window = self.main_window

        if event.matches(QKeySequence.Open):
            window.open_pdf()
        elif event.matches(QKeySequence.Save):
            window.save_pdf()
        elif event.key() in (Qt.Key_Right, Qt.Key_PageDown):
            window.navigator.next_page()
        elif event.key() in (Qt.Key_Left, Qt.Key_PageUp):
            window.navigator.previous_page()
        elif event.key() == Qt.Key_Escape:
            window.tool_controller.select(ToolMode.NONE)
        else:
            event.ignore()
            return False

        event.accept()
        return True
