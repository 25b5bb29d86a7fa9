# cws_publish/utils/__init__.py
"""Utility functions for cws-publish"""

from .file_utils import (
    detect_content_type,
    sniff_file,
    is_binary_data,
    is_directory,
    copy_file_contents,
    format_size,
)

__all__ = [
    "detect_content_type",
    "sniff_file",
    "is_binary_data",
    "is_directory",
    "copy_file_contents",
    "format_size",
]
