"""
Theme management and styling for the application.
"""
from PyQt5.QtWidgets import QWidget

from .models import ThemeColors


class ThemeManager:
    """Manages application themes and styling."""

    LIGHT_THEME = ThemeColors(
        bg_primary="#f5f5f5",
        bg_secondary="#ffffff",
        bg_canvas="#e6e6e6",
        text_primary="#2e2e2e",
        text_on_accent="#ffffff",
        text_muted="#8899AA",
        button_idle="#cccccc",
        accent_primary="#007bff",
        accent_hover="#0069d9",
        success="#28a745",
        success_hover="#218838",
        disabled="#cccccc",
        border_primary="#cccccc",
        surface_border="#000000",
    )

    DARK_THEME = ThemeColors(
        bg_primary="#2e2e2e",
        bg_secondary="#3e3e3e",
        bg_canvas="#242424",
        text_primary="#f0f0f0",
        text_on_accent="#ffffff",
        text_muted="#8899AA",
        button_idle="#4e4e4e",
        accent_primary="#007bff",
        accent_hover="#3a8eef",
        success="#28a745",
        success_hover="#34c058",
        disabled="#5a5a5a",
        border_primary="#555555",
        surface_border="#8899AA",
    )

    @classmethod
    def theme_for(cls, dark_mode: bool) -> ThemeColors:
        return cls.DARK_THEME if dark_mode else cls.LIGHT_THEME

    @classmethod
    def apply_theme(cls, widget: QWidget, dark_mode: bool) -> None:
        """
        Apply theme to a widget and its children.

        Args:
            widget: Widget to style
            dark_mode: Whether to use dark theme
        """
        widget.setStyleSheet(cls.generate_stylesheet(cls.theme_for(dark_mode)))

    @classmethod
    def generate_stylesheet(cls, theme: ThemeColors) -> str:
        """
        Generate a complete stylesheet from theme colors.

        Args:
            theme: Theme colors to use

        Returns:
            Complete CSS stylesheet string
        """
        return f"""
            /* --- GENERAL STYLES --- */
            QMainWindow, QWidget, QLabel, QFrame {{
                background-color: {theme.bg_primary};
                color: {theme.text_primary};
                border: none;
            }}

            QScrollArea, QScrollArea > QWidget > QWidget {{
                background-color: {theme.bg_canvas};
            }}

            #AnnotationSurface {{
                qproperty-borderColor: {theme.surface_border};
            }}

            /* --- BUTTONS --- */
            QPushButton {{
                background-color: {theme.button_idle};
                color: {theme.text_on_accent};
                border: none;
                border-radius: 5px;
                padding: 10px 20px;
            }}
            QPushButton:hover {{
                background-color: {theme.accent_hover};
            }}
            QPushButton:checked {{
                background-color: {theme.accent_primary};
            }}

            QPushButton#SaveButton {{
                background-color: {theme.success};
            }}
            QPushButton#SaveButton:hover {{
                background-color: {theme.success_hover};
            }}

            QPushButton#NavButton {{
                background-color: {theme.accent_primary};
                border-radius: 4px;
                padding: 8px 16px;
            }}
            QPushButton:disabled, QPushButton#NavButton:disabled,
            QPushButton#SaveButton:disabled {{
                background-color: {theme.disabled};
                color: {theme.text_muted};
            }}

            /* --- STATUS BAR --- */
            QStatusBar {{
                background-color: {theme.bg_secondary};
                color: {theme.text_muted};
                border-top: 1px solid {theme.border_primary};
            }}
        """
