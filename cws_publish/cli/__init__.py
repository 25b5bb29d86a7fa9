"""Command line interface for cws-publish"""

from .main import cli, main

__all__ = ["cli", "main"]
