# cws_publish/utils/file_utils.py
"""File operation utilities"""

import os
import shutil
from pathlib import Path
from typing import BinaryIO, List, Tuple, Union

from ..constants import SNIFF_LENGTH

# Exact-prefix signatures, checked in order
MAGIC_SIGNATURES: List[Tuple[bytes, str]] = [
    (b"%PDF-", "application/pdf"),
    (b"%!PS-Adobe-", "application/postscript"),
    (b"\xfe\xff", "text/plain; charset=utf-16be"),
    (b"\xff\xfe", "text/plain; charset=utf-16le"),
    (b"\xef\xbb\xbf", "text/plain; charset=utf-8"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"BM", "image/bmp"),
    (b"\x00\x00\x01\x00", "image/x-icon"),
    (b"\x00\x00\x02\x00", "image/x-icon"),
    (b"OggS\x00", "application/ogg"),
    (b"\x1aE\xdf\xa3", "video/webm"),
    (b"ID3", "audio/mpeg"),
    (b"wOFF", "font/woff"),
    (b"wOF2", "font/woff2"),
    (b"\x1f\x8b\x08", "application/x-gzip"),
    (b"PK\x03\x04", "application/zip"),
    (b"Rar!\x1a\x07\x00", "application/x-rar-compressed"),
    (b"Rar!\x1a\x07\x01\x00", "application/x-rar-compressed"),
    (b"\x00asm", "application/wasm"),
]

# Case-insensitive markup prefixes, checked after leading whitespace
MARKUP_SIGNATURES: List[Tuple[bytes, str]] = [
    (b"<?xml", "text/xml; charset=utf-8"),
    (b"<!doctype html", "text/html; charset=utf-8"),
    (b"<html", "text/html; charset=utf-8"),
    (b"<head", "text/html; charset=utf-8"),
    (b"<body", "text/html; charset=utf-8"),
    (b"<script", "text/html; charset=utf-8"),
]

# Control bytes that never appear in text
BINARY_BYTES = frozenset(
    list(range(0x00, 0x09)) + [0x0B] + list(range(0x0E, 0x1B)) + list(range(0x1C, 0x20))
)


def is_binary_data(sample: bytes) -> bool:
    """
    Check if a sample of bytes looks binary

    Args:
        sample: Leading bytes of a file

    Returns:
        True if any non-text control byte is present
    """
    return any(b in BINARY_BYTES for b in sample)


def detect_content_type(data: bytes) -> str:
    """
    Sniff the MIME type of content from its leading bytes

    Only the first SNIFF_LENGTH bytes are considered. Unknown binary content
    is reported as application/octet-stream, unknown text as text/plain.

    Args:
        data: File content or its first bytes

    Returns:
        MIME type string
    """
    data = data[:SNIFF_LENGTH]

    for signature, mime_type in MAGIC_SIGNATURES:
        if data.startswith(signature):
            return mime_type

    if data[8:12] == b"WEBP" and data.startswith(b"RIFF"):
        return "image/webp"

    stripped = data.lstrip(b"\t\n\x0c\r ").lower()
    for signature, mime_type in MARKUP_SIGNATURES:
        if stripped.startswith(signature):
            return mime_type

    if is_binary_data(data):
        return "application/octet-stream"
    return "text/plain; charset=utf-8"


def sniff_file(handle: BinaryIO) -> str:
    """
    Detect the content type of an open file

    Reads at most SNIFF_LENGTH bytes and rewinds the handle to the start.

    Args:
        handle: File opened in binary mode

    Returns:
        MIME type string
    """
    head = handle.read(SNIFF_LENGTH)
    handle.seek(0)
    return detect_content_type(head)


def is_directory(path: Union[str, Path]) -> bool:
    """Check that a path exists and is a directory"""
    return Path(path).is_dir()


def copy_file_contents(src: Path, dst: Path) -> int:
    """
    Copy file contents verbatim

    The destination is created if missing and truncated otherwise. Data is
    flushed to disk before returning. When src and dst are the same file it
    is left untouched.

    Args:
        src: Source file
        dst: Destination file

    Returns:
        Number of bytes copied
    """
    dst = Path(dst)
    if dst.exists() and os.path.samefile(src, dst):
        return dst.stat().st_size

    with open(src, 'rb') as fin, open(dst, 'wb') as fout:
        shutil.copyfileobj(fin, fout)
        fout.flush()
        os.fsync(fout.fileno())
        return fout.tell()


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"
