# pyimgproc/utils/__init__.py
"""
Utilities module for common functionality.

This module provides the logging helpers and the small image-mode helpers
shared by the loader, transforms and encoders.
"""

from .logger import get_library_logger, create_console_logger
from .image_utils import normalize_mode, to_rgb

__all__ = [
    # Logger utilities
    "get_library_logger",
    "create_console_logger",

    # Image utilities
    "normalize_mode",
    "to_rgb",
]
