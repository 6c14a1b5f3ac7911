"""
Utility functions and helpers.
"""
from .logger import setup_logging
from .resource_loader import default_output_path, get_resource_path, resource_exists

__all__ = [
    'setup_logging',
    'get_resource_path',
    'resource_exists',
    'default_output_path',
]
