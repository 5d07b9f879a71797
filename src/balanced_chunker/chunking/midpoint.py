"""Split-point search for the recursive chunker.

Two strategies are provided:

    - find_closest_to_middle: exact scan over the occurrences of a delimiter,
      keeping the one that best balances the two sides
    - find_approximate_midpoint: binary search over character positions for
      when no delimiter gives a balanced split

Balance is measured with the caller's length function, so "middle" means the
middle by tokens (or whatever is being counted), not by characters.
"""

from __future__ import annotations

from .spans import indexes_of
from .types import LengthFunction, character_length

MIN_SIDE_FRACTION = 0.3
MAX_SIDE_FRACTION = 0.7


def _is_balanced(fraction: float) -> bool:
    return MIN_SIDE_FRACTION < fraction < MAX_SIDE_FRACTION


def measure_span(text: str, start: int, end: int, length_func: LengthFunction) -> int:
    """Size of ``text[start:end]``; slices only when a length function needs it."""
    if length_func is character_length:
        return end - start
    return length_func(text[start:end])


def closest_to_middle_in_span(
    text: str,
    start: int,
    end: int,
    delimiter: str,
    length_func: LengthFunction,
    total: int,
) -> int | None:
    """Span-based core of :func:`find_closest_to_middle`.

    ``total`` is the already-measured size of ``text[start:end]``. The result
    is an offset relative to ``start``.
    """
    if total <= 0:
        return None

    candidates: list[tuple[int, float]] = []
    for index in indexes_of(text, delimiter, start, end):
        fraction = measure_span(text, start, index, length_func) / total
        if _is_balanced(fraction):
            candidates.append((index - start, fraction))

    if not candidates:
        return None

    # sorted() is stable, so ties keep scan order
    best_index, _ = sorted(candidates, key=lambda c: abs(c[1] - 0.5))[0]
    return best_index + len(delimiter)


def approximate_midpoint_in_span(
    text: str,
    start: int,
    end: int,
    length_func: LengthFunction,
    total: int,
) -> int:
    """Span-based core of :func:`find_approximate_midpoint`."""
    span_length = end - start
    if length_func is character_length or total <= 0:
        return span_length // 2

    lo = 0
    hi = span_length
    while lo < hi:
        mid = (lo + hi) // 2
        fraction = length_func(text[start : start + mid]) / total

        if MIN_SIDE_FRACTION <= fraction < MAX_SIDE_FRACTION:
            return mid
        if fraction < MIN_SIDE_FRACTION:
            lo = mid + 1
        else:
            hi = mid - 1

    # A tokenizing length function need not grow monotonically with the
    # input: with tokens for each letter plus "fight" and "ing",
    # len("fighting") < len("figh") + len("ting"). The search can then miss
    # the band entirely and we settle for the last window's midpoint.
    # hi can end at -1 when the empty prefix already measures too large.
    return max(lo + hi, 0) // 2


def find_closest_to_middle(
    text: str,
    delimiter: str,
    length_func: LengthFunction | None = None,
) -> int | None:
    """Find the occurrence of ``delimiter`` that best balances ``text``.

    Every occurrence (overlapping ones included) is scored by the share of
    the total size that lies to its left. Occurrences leaving less than 30%
    on either side are ignored; of the rest, the one closest to an even split
    wins, with ties going to the earliest occurrence.

    Args:
        text: The text to split.
        delimiter: The delimiter to split on (exact match).
        length_func: Size metric. Defaults to character count.

    Returns:
        The index just past the chosen delimiter, so the delimiter stays with
        the left side, or ``None`` if no occurrence is balanced enough.

    Example:
        >>> find_closest_to_middle("one. two. three. four.", ".")
        9
        >>> find_closest_to_middle("no terminator until the end.", ".") is None
        True
    """
    length_func = length_func or character_length
    total = measure_span(text, 0, len(text), length_func)
    return closest_to_middle_in_span(
        text, 0, len(text), delimiter, length_func, total
    )


def find_approximate_midpoint(
    text: str,
    length_func: LengthFunction | None = None,
) -> int:
    """Find a position that roughly halves ``text`` by size.

    Without a length function this is simply ``len(text) // 2``. With one,
    a binary search looks for a position whose left side holds between 30%
    (inclusive) and 70% (exclusive) of the total size. If the length
    function is not monotonic the search may not converge on such a point;
    the midpoint of the final search window is returned instead.

    Returns:
        An index in ``[0, len(text)]``.
    """
    length_func = length_func or character_length
    total = measure_span(text, 0, len(text), length_func)
    return approximate_midpoint_in_span(text, 0, len(text), length_func, total)
