"""Value types shared by the chunking modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

LengthFunction = Callable[[str], int]
"""Measures the size of a piece of text (characters, tokens, ...)."""


def character_length(text: str) -> int:
    """Default length function: the number of characters in ``text``."""
    return len(text)


@dataclass(frozen=True, slots=True)
class TextChunk:
    """A contiguous piece of the original text.

    Attributes:
        text: The chunk contents, an exact substring of the input.
        start_pos: Zero-based offset of ``text`` in the original input.
    """

    text: str
    start_pos: int

    @property
    def end_pos(self) -> int:
        return self.start_pos + len(self.text)
