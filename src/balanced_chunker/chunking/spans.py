"""Exact substring search over a span of a larger string.

The chunker walks ``(start, end)`` windows of the original input instead of
slicing copies, so these helpers take an optional ``end`` bound and always
report absolute indices.
"""

from __future__ import annotations


def index_of(
    text: str,
    needle: str,
    start_index: int = 0,
    end: int | None = None,
) -> int:
    """Return the first index of ``needle`` in ``text[start_index:end]``.

    Args:
        text: The string to search.
        needle: The substring to look for (ordinal comparison).
        start_index: Where to start searching.
        end: Exclusive end of the searched span. Defaults to ``len(text)``.

    Returns:
        The absolute index of the match, or ``-1`` if there is none.

    Raises:
        IndexError: If ``start_index`` is negative or more than one past the
            end of the span.
    """
    if end is None:
        end = len(text)
    if start_index < 0 or start_index > end + 1:
        raise IndexError(f"start_index {start_index} out of range")
    return text.find(needle, start_index, end)


def indexes_of(
    text: str,
    needle: str,
    start: int = 0,
    end: int | None = None,
) -> list[int]:
    """Return every start index of ``needle`` within ``text[start:end]``.

    The scan advances one character past each match, so overlapping
    occurrences are all reported.

    Example:
        >>> indexes_of("ooo.ooo.ooo", ".")
        [3, 7]
        >>> indexes_of("aaa", "aa")
        [0, 1]
    """
    if end is None:
        end = len(text)

    found: list[int] = []
    index = index_of(text, needle, start, end)
    while index != -1:
        found.append(index)
        index = index_of(text, needle, index + 1, end)
    return found
