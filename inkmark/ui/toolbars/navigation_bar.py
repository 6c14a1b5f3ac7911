from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton


class NavigationBar(QFrame):
    """Bottom bar with previous/next buttons and the page readout."""

    previous_requested = pyqtSignal()
    next_requested = pyqtSignal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName("NavigationBar")
        self.setup_ui()

    def setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(10, 8, 10, 8)
        layout.setSpacing(10)
        layout.addStretch()

        self.previous_button = QPushButton("Previous Page", self)
        self.previous_button.setObjectName("NavButton")
        self.previous_button.clicked.connect(self.previous_requested.emit)
        layout.addWidget(self.previous_button)

        self.page_label = QLabel("Page 0 of 0", self)
        self.page_label.setAlignment(Qt.AlignCenter)
        self.page_label.setMinimumWidth(110)
        layout.addWidget(self.page_label)

        self.next_button = QPushButton("Next Page", self)
        self.next_button.setObjectName("NavButton")
        self.next_button.clicked.connect(self.next_requested.emit)
        layout.addWidget(self.next_button)

        layout.addStretch()
        self.update_state("Page 0 of 0", False, False)

    def update_state(self, label: str, can_go_previous: bool, can_go_next: bool):
        """Refresh the readout and disable the buttons at the boundaries."""
        self.page_label.setText(label)
        self.previous_button.setEnabled(can_go_previous)
        self.next_button.setEnabled(can_go_next)
