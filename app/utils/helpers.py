"""
Helper utility functions for the URL content summarizer application.
"""

import re
from pathlib import PurePosixPath

_WHITESPACE_RE = re.compile(r"\s+")


def truncate_text(text: str, max_length: int, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    The first ``max_length`` characters are kept and ``suffix`` is appended,
    so a truncated result is ``max_length + len(suffix)`` characters long.

    Args:
        text: Text to truncate
        max_length: Number of characters to keep
        suffix: Suffix to add if truncated

    Returns:
        Truncated text
    """
    if len(text) <= max_length:
        return text
    return text[:max_length] + suffix


def collapse_whitespace(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim the ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def get_file_extension(filepath: str) -> str:
    """
    Get the extension of a file or URL path.

    Args:
        filepath: Path to the file

    Returns:
        Lower-cased file extension (without the dot)
    """
    return PurePosixPath(filepath).suffix.lstrip('.').lower()
