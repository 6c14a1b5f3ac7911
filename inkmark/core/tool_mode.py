from enum import Enum


class ToolMode(Enum):
    """Annotation input method gating how surface events are interpreted."""
    NONE = "none"
    PEN = "pen"
    TEXT = "text"
    HIGHLIGHT = "highlight"
