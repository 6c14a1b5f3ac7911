"""
Inkmark PDF - annotate a PDF page and export a flattened copy.
"""

__version__ = "0.1.0"
