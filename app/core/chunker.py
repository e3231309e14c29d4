"""
Module for splitting long text into bounded chunks for summarization.
"""

from typing import List

from app.config import config

SENTENCE_BREAKS = (". ", "? ", "! ", ".\n", "?\n", "!\n")

# Fraction of each window searched backwards for a sentence break.
BREAK_SEARCH_RATIO = 0.2


def chunk_text(text: str, max_chars: int = config.MAX_CHUNK_CHARS) -> List[str]:
    """
    Split text into ordered chunks of at most ``max_chars`` characters.

    Chunks prefer to end right after a sentence break found in the last 20% of
    each window and fall back to a hard cut when there is none. Joining the
    returned chunks gives back ``text`` exactly.

    Args:
        text: Text to split
        max_chars: Maximum number of characters per chunk

    Returns:
        List of chunks in original order
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")
    if max_chars <= 0:
        raise ValueError("max_chars must be positive")

    if len(text) <= max_chars:
        return [text]

    chunks = []
    start = 0
    length = len(text)

    while start < length:
        end = min(start + max_chars, length)

        if end < length:
            search_start = max(start, end - int(max_chars * BREAK_SEARCH_RATIO))
            for i in range(end, search_start - 1, -1):
                if text[max(i - 2, 0):i] in SENTENCE_BREAKS:
                    if i > start:
                        end = i
                    break

        chunks.append(text[start:end])
        start = end

    return chunks
