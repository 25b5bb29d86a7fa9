"""CLI utility functions"""

from .output import (
    console,
    print_error,
    format_upload_result,
    format_resolve_result,
)

__all__ = [
    'console',
    'print_error',
    'format_upload_result',
    'format_resolve_result',
]
