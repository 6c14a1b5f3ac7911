"""
Resource loading utilities for handling bundled and development resources.
"""
import os
import sys
from pathlib import Path
from typing import Optional


def get_resource_path(relative_path: str) -> str:
    """
    Get the absolute path to a resource file.

    This function handles both development (running from source) and
    production (bundled with PyInstaller) environments.

    Args:
        relative_path: Relative path to the resource from project root

    Returns:
        Absolute path to the resource
    """
    if os.path.isabs(relative_path):
        return relative_path

    # Check if running as PyInstaller bundle
    if hasattr(sys, '_MEIPASS'):
        base_path = Path(sys._MEIPASS)
    else:
        base_path = Path(os.path.abspath('.'))

    return str(base_path / relative_path)


def resource_exists(relative_path: str) -> bool:
    """
    Check if a resource file exists.

    Args:
        relative_path: Relative path to check

    Returns:
        True if resource exists
    """
    return os.path.exists(get_resource_path(relative_path))


def default_output_path(source_path: Optional[str], filename: str) -> str:
    """
    Suggest where the exported document should be written.

    Args:
        source_path: Path of the loaded document, if it came from disk
        filename: Output file name

    Returns:
        filename inside the source document's directory, or inside the
        current directory when there is no source path
    """
    if source_path:
        directory = os.path.dirname(os.path.abspath(source_path))
    else:
        directory = os.path.abspath('.')
    return os.path.join(directory, filename)
