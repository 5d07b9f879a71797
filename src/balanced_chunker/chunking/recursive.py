"""Recursive, delimiter-aware text chunking.

A span that is over budget is split in two at the most specific delimiter
that gives a balanced split, falling back through the delimiter list and
finally to a plain size-based midpoint. Both halves are then chunked again
from the top of the delimiter list.

The recursion runs on an explicit stack of ``(start, end)`` windows into the
original string, so neither deep inputs nor long texts cost interpreter
stack frames or substring copies.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from .delimiters import DEFAULT_DELIMITERS
from .midpoint import (
    approximate_midpoint_in_span,
    closest_to_middle_in_span,
    measure_span,
)
from .types import LengthFunction, TextChunk, character_length

logger = logging.getLogger(__name__)

# (start, end, delimiter tier, cached size or None)
_Frame = tuple[int, int, int, int | None]


def _split_point(
    text: str,
    start: int,
    end: int,
    delimiter: str | None,
    length_func: LengthFunction,
    size: int,
) -> int | None:
    """Pick a split offset inside ``text[start:end]``, or None to try the next tier."""
    span_length = end - start

    if delimiter is None:
        split = approximate_midpoint_in_span(text, start, end, length_func, size)
        # both halves must shrink or the loop never ends
        return min(max(split, 1), span_length - 1)

    split = closest_to_middle_in_span(text, start, end, delimiter, length_func, size)
    if split is None or split >= span_length:
        return None
    return split


def _walk(
    text: str,
    max_chunk_size: int,
    delimiters: tuple[str, ...],
    length_func: LengthFunction,
) -> Iterator[TextChunk]:
    stack: list[_Frame] = [(0, len(text), 0, None)]

    while stack:
        start, end, tier, size = stack.pop()
        if size is None:
            size = measure_span(text, start, end, length_func)

        if size <= max_chunk_size:
            yield TextChunk(text[start:end], start)
            continue

        if end - start < 2:
            logger.warning(
                "Span at %d measures %d, over the budget of %d, "
                "but is too short to split",
                start,
                size,
                max_chunk_size,
            )
            yield TextChunk(text[start:end], start)
            continue

        delimiter = delimiters[tier] if tier < len(delimiters) else None
        split = _split_point(text, start, end, delimiter, length_func, size)
        if split is None:
            # same span, next weaker delimiter; the size is still valid
            stack.append((start, end, tier + 1, size))
            continue

        left_end = start + split
        right_start = left_end
        while right_start < end and text[right_start].isspace():
            right_start += 1

        # LIFO: push right first so the left half is emitted first
        stack.append((right_start, end, 0, None))
        stack.append((start, left_end, 0, None))


def iter_chunks(
    text: str,
    max_chunk_size: int = 512,
    delimiters: Sequence[str] | None = None,
    length_func: LengthFunction | None = None,
) -> Iterator[TextChunk]:
    """Lazily yield the chunks of ``text`` in document order.

    Arguments are validated immediately; see :func:`chunk` for their meaning.

    Raises:
        ValueError: If ``max_chunk_size`` is less than one.
    """
    if max_chunk_size < 1:
        raise ValueError("max_chunk_size cannot be less than one")

    if delimiters is None:
        delimiters = DEFAULT_DELIMITERS
    tiers = tuple(d for d in delimiters if d)

    logger.debug(
        "Chunking %d characters with max_chunk_size=%d over %d delimiter tiers",
        len(text),
        max_chunk_size,
        len(tiers),
    )
    return _walk(text, max_chunk_size, tiers, length_func or character_length)


def chunk(
    text: str,
    max_chunk_size: int = 512,
    delimiters: Sequence[str] | None = None,
    length_func: LengthFunction | None = None,
) -> list[TextChunk]:
    """Split text into chunks no larger than ``max_chunk_size``.

    Over-budget text is split at the occurrence of the first delimiter that
    leaves at least 30% of the size on each side and is closest to an even
    split. If no occurrence qualifies the next delimiter is tried, and once
    the list is exhausted the text is split near its size midpoint. The
    delimiter stays at the end of the left piece; whitespace at the start
    of the right piece is dropped. Each piece is then chunked again,
    starting over from the first delimiter.

    Args:
        text: The text to split. May be empty.
        max_chunk_size: Maximum size of each chunk as measured by
            ``length_func``. Default: 512.
        delimiters: Delimiters in priority order, most specific first.
            Default: :data:`DEFAULT_DELIMITERS`. Empty strings are ignored.
        length_func: Size metric, e.g. a tokenizer's token count.
            Default: :func:`character_length`.

    Returns:
        Chunks in document order. Offsets refer to the original ``text``.
        Empty input gives a single empty chunk.

    Raises:
        ValueError: If ``max_chunk_size`` is less than one.

    Example:
        >>> text = "First sentence here. Second one follows."
        >>> [(c.start_pos, c.text) for c in chunk(text, max_chunk_size=25)]
        [(0, 'First sentence here.'), (21, 'Second one follows.')]
    """
    chunks = list(iter_chunks(text, max_chunk_size, delimiters, length_func))
    logger.debug("Produced %d chunks", len(chunks))
    return chunks
