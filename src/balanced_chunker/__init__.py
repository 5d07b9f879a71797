"""Size-bounded text chunking that breaks at natural language boundaries.

balanced-chunker splits long text into contiguous chunks that each fit a
size budget, for consumers with a fixed input size such as embedding and
retrieval pipelines. Splits prefer paragraph, line, sentence, clause and
word boundaries, in that order, and keep both halves of every split
reasonably balanced.

Key components:
    - chunk: Split text using a priority-ordered delimiter list
    - TextChunk: A chunk's text plus its offset in the original input
    - PRESETS: Named delimiter lists for prose, wrapped prose and markdown
    - ChunkerSettings / load_settings: Environment-driven configuration
    - configure_logging: structlog-based log rendering
    - cli: Command-line interface

Example:
    >>> from balanced_chunker import chunk
    >>> for piece in chunk(open("book.txt").read(), max_chunk_size=400):
    ...     print(piece.start_pos, len(piece.text))
"""

__version__ = "0.1.0"

from .chunking import (
    DEFAULT_DELIMITERS,
    ENGLISH_PROSE_DELIMITERS,
    ENGLISH_WRAPPED_LINES_DELIMITERS,
    MARKDOWN_DELIMITERS,
    PRESETS,
    LengthFunction,
    TextChunk,
    character_length,
    chunk,
    chunk_english_prose,
    chunk_english_with_wrapped_lines,
    chunk_markdown,
    find_approximate_midpoint,
    find_closest_to_middle,
    get_preset,
    index_of,
    indexes_of,
    iter_chunks,
)
from .config import ChunkerSettings, load_settings
from .logging import configure_logging

__all__ = [
    "__version__",
    "chunk",
    "iter_chunks",
    "chunk_english_prose",
    "chunk_english_with_wrapped_lines",
    "chunk_markdown",
    "find_closest_to_middle",
    "find_approximate_midpoint",
    "index_of",
    "indexes_of",
    "TextChunk",
    "LengthFunction",
    "character_length",
    "DEFAULT_DELIMITERS",
    "ENGLISH_PROSE_DELIMITERS",
    "ENGLISH_WRAPPED_LINES_DELIMITERS",
    "MARKDOWN_DELIMITERS",
    "PRESETS",
    "get_preset",
    "ChunkerSettings",
    "load_settings",
    "configure_logging",
]
