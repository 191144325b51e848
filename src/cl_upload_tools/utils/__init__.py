"""Utility helpers - MIME detection, filename sanitizing, timestamps."""

from .media_types import detect_mime_type
from .sanitize import PathInfo, path_info, sanitize_filename
from .timestamp import microtime_digits, to_microseconds

__all__ = [
    "PathInfo",
    "detect_mime_type",
    "microtime_digits",
    "path_info",
    "sanitize_filename",
    "to_microseconds",
]
