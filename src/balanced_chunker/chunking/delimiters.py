"""Named delimiter lists.

Each list is ordered from the largest structural boundary to the smallest;
the chunker tries them in that order.
"""

from __future__ import annotations

DEFAULT_DELIMITERS: tuple[str, ...] = (
    "\n\n",
    "\r\n",
    "\n",
    ".",
    "!",
    "?",
    ",",
    " ",
)

ENGLISH_PROSE_DELIMITERS: tuple[str, ...] = (
    "\n\n",
    "\r\n",
    "\n",
    ".",
    "!",
    ",",
    " ",
)

# Single newlines inside a paragraph are just line wrapping.
ENGLISH_WRAPPED_LINES_DELIMITERS: tuple[str, ...] = (
    "\n\n",
    "\r\n",
    ".",
    "!",
    ",",
    " ",
)

# Separator order borrowed from semantic-kernel's markdown text chunker.
MARKDOWN_DELIMITERS: tuple[str, ...] = (
    ".",
    "?!",
    ";",
    ":",
    ",",
    ")]}",
    " ",
    "-",
    "\n\r",
)

PRESETS: dict[str, tuple[str, ...]] = {
    "default": DEFAULT_DELIMITERS,
    "english-prose": ENGLISH_PROSE_DELIMITERS,
    "english-wrapped": ENGLISH_WRAPPED_LINES_DELIMITERS,
    "markdown": MARKDOWN_DELIMITERS,
}


def get_preset(name: str) -> tuple[str, ...]:
    """Return the delimiter list registered under ``name``.

    Raises:
        ValueError: If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        known = ", ".join(sorted(PRESETS))
        raise ValueError(f"Unknown preset '{name}'. Known presets: {known}") from None
