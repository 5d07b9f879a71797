"""Command-line interface for balanced-chunker.

Commands:
    - split: Chunk a text file (or stdin) and print the chunks
    - presets: List the named delimiter presets

Usage:
    $ balanced-chunker split notes.md --preset markdown --max-chunk-size 400
    $ cat book.txt | balanced-chunker split --json
    $ balanced-chunker split log.txt --delimiter '\\n' --delimiter ' '
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError

from .chunking import PRESETS, chunk
from .config import load_settings
from .logging import configure_logging

app = typer.Typer(help="Split text into size-bounded chunks at natural boundaries.")

logger = logging.getLogger(__name__)


def _handle_error(exc: Exception) -> None:
    """Print an error message and exit with code 1.

    Raises:
        typer.Exit: Always raised with exit code 1 after printing the error.
    """
    if isinstance(exc, typer.Exit):
        raise exc
    typer.echo(f"Error: {exc}", err=True)
    raise typer.Exit(code=1) from exc


def _decode_delimiter(raw: str) -> str:
    # Shells make it awkward to pass a literal newline, so accept "\n" etc.
    return raw.encode("latin-1", "backslashreplace").decode("unicode_escape")


def _read_input(path: Path | None) -> str:
    if path is None:
        return sys.stdin.read()
    if not path.exists():
        raise FileNotFoundError(f"Input path does not exist: {path}")
    return path.read_text(encoding="utf-8")


@app.command("split")
def split(
    path: Path | None = typer.Argument(
        None, help="Text file to chunk. Reads stdin when omitted."
    ),
    max_chunk_size: int | None = typer.Option(
        None, "--max-chunk-size", "-n", help="Maximum characters per chunk"
    ),
    preset: str | None = typer.Option(
        None, help=f"Delimiter preset ({', '.join(PRESETS)})"
    ),
    delimiter: list[str] | None = typer.Option(
        None,
        "--delimiter",
        "-d",
        help="Delimiter to split on, most specific first. Repeatable; "
        "overrides --preset. Backslash escapes are decoded.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),
    env_file: Path | None = typer.Option(
        None, "--env-file", help="Read CHUNKER_* settings from this .env file"
    ),
    log_level: str | None = typer.Option(None, help="Logging level"),
) -> None:
    """Chunk a document and print one chunk per line.

    Each line holds the chunk's start offset and its repr(). With --json the
    chunks are printed as a JSON array of {"text", "start_pos"} objects.

    Example:
        $ balanced-chunker split README.md -n 300 --preset markdown
    """
    try:
        delimiters = [_decode_delimiter(d) for d in delimiter] if delimiter else None
        settings = load_settings(
            env_file=env_file,
            max_chunk_size=max_chunk_size,
            preset=preset,
            delimiters=delimiters,
            log_level=log_level,
        )
        configure_logging(settings.log_level, json_format=settings.log_json)

        text = _read_input(path)
        chunks = chunk(
            text,
            max_chunk_size=settings.max_chunk_size,
            delimiters=settings.resolved_delimiters(),
        )
        logger.info("Split %d characters into %d chunks", len(text), len(chunks))

        if as_json:
            payload = [{"text": c.text, "start_pos": c.start_pos} for c in chunks]
            typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
            return

        for c in chunks:
            typer.echo(f"{c.start_pos}\t{c.text!r}")
    except (OSError, ValidationError, ValueError) as exc:
        _handle_error(exc)


@app.command("presets")
def presets() -> None:
    """List the delimiter presets in priority order."""
    for name, delimiters in PRESETS.items():
        rendered = " ".join(repr(d) for d in delimiters)
        typer.echo(f"{name}: {rendered}")


if __name__ == "__main__":
    app()
