from dataclasses import dataclass


@dataclass
class ThemeColors:
    """Color definitions for a theme."""
    # Background colors
    bg_primary: str
    bg_secondary: str
    bg_canvas: str

    # Text colors
    text_primary: str
    text_on_accent: str
    text_muted: str

    # Buttons
    button_idle: str
    accent_primary: str
    accent_hover: str
    success: str
    success_hover: str
    disabled: str

    # Borders
    border_primary: str
    surface_border: str
