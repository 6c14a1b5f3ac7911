"""
Qt user interface for Inkmark PDF.
"""
