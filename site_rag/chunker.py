# File: site_rag/chunker.py
"""site_rag.chunker: splitting page text into fixed-size word segments."""

from __future__ import annotations

from typing import List, Optional

__all__ = ["chunk_text", "DEFAULT_CHUNK_SIZE"]

DEFAULT_CHUNK_SIZE = 1000


def chunk_text(text: Optional[str], size: int = DEFAULT_CHUNK_SIZE) -> List[str]:
    """Split *text* into segments of *size* words joined by single spaces.

    The last segment holds the remainder. Empty text or a non-positive
    *size* yields an empty list.
    """
    if not text or size <= 0:
        return []
    words = text.split()
    return [" ".join(words[i:i + size]) for i in range(0, len(words), size)]
