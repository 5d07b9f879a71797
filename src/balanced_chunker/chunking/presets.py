"""Chunking entry points bound to a named delimiter preset."""

from __future__ import annotations

from .delimiters import (
    ENGLISH_PROSE_DELIMITERS,
    ENGLISH_WRAPPED_LINES_DELIMITERS,
    MARKDOWN_DELIMITERS,
)
from .recursive import chunk
from .types import LengthFunction, TextChunk


def chunk_english_prose(
    text: str,
    max_chunk_size: int = 512,
    length_func: LengthFunction | None = None,
) -> list[TextChunk]:
    """Chunk prose where every newline is a meaningful break."""
    return chunk(text, max_chunk_size, ENGLISH_PROSE_DELIMITERS, length_func)


def chunk_english_with_wrapped_lines(
    text: str,
    max_chunk_size: int = 512,
    length_func: LengthFunction | None = None,
) -> list[TextChunk]:
    """Chunk prose hard-wrapped at a fixed width.

    Single newlines are treated as wrapping, so only blank lines count as
    paragraph breaks.
    """
    return chunk(text, max_chunk_size, ENGLISH_WRAPPED_LINES_DELIMITERS, length_func)


def chunk_markdown(
    text: str,
    max_chunk_size: int = 512,
    length_func: LengthFunction | None = None,
) -> list[TextChunk]:
    """Chunk markdown, preferring sentence punctuation over clause and word breaks."""
    return chunk(text, max_chunk_size, MARKDOWN_DELIMITERS, length_func)
