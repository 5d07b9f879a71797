"""Delimiter-aware recursive text chunking.

This package splits long text into contiguous chunks that each fit a size
budget, preferring to break at paragraph, line, sentence, clause and word
boundaries in that order. Size is measured by a pluggable length function,
so the budget can be expressed in characters or in tokens.

Building blocks:
    - chunk / iter_chunks: The recursive chunker
    - find_closest_to_middle: Best balanced occurrence of one delimiter
    - find_approximate_midpoint: Size-based fallback split point
    - index_of / indexes_of: Exact substring search over a span
    - PRESETS: Named delimiter lists (default, prose, wrapped lines, markdown)

Everything here is pure Python with no I/O, so it can run anywhere the
text is.
"""

from __future__ import annotations

from .delimiters import (
    DEFAULT_DELIMITERS,
    ENGLISH_PROSE_DELIMITERS,
    ENGLISH_WRAPPED_LINES_DELIMITERS,
    MARKDOWN_DELIMITERS,
    PRESETS,
    get_preset,
)
from .midpoint import (
    MIN_SIDE_FRACTION,
    find_approximate_midpoint,
    find_closest_to_middle,
)
from .presets import (
    chunk_english_prose,
    chunk_english_with_wrapped_lines,
    chunk_markdown,
)
from .recursive import chunk, iter_chunks
from .spans import index_of, indexes_of
from .types import LengthFunction, TextChunk, character_length

__all__ = [
    "DEFAULT_DELIMITERS",
    "ENGLISH_PROSE_DELIMITERS",
    "ENGLISH_WRAPPED_LINES_DELIMITERS",
    "MARKDOWN_DELIMITERS",
    "MIN_SIDE_FRACTION",
    "PRESETS",
    "LengthFunction",
    "TextChunk",
    "character_length",
    "chunk",
    "chunk_english_prose",
    "chunk_english_with_wrapped_lines",
    "chunk_markdown",
    "find_approximate_midpoint",
    "find_closest_to_middle",
    "get_preset",
    "index_of",
    "indexes_of",
    "iter_chunks",
]
