# cws_publish/cli/commands/__init__.py
"""CLI commands"""

from . import upload
from . import store_configs

__all__ = [
    "upload",
    "store_configs",
]
