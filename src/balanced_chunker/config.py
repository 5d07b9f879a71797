"""Settings for the chunker's command line and other host-side callers.

Settings come from, in increasing order of precedence: field defaults,
``CHUNKER_*`` environment variables (a ``.env`` file is loaded first if one
is found), and explicit keyword overrides.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from .chunking.delimiters import PRESETS, get_preset

ENV_PREFIX = "CHUNKER_"


class ChunkerSettings(BaseModel):
    """Resolved chunking and logging options."""

    max_chunk_size: int = Field(default=512, ge=1)
    preset: str = "default"
    delimiters: list[str] | None = None
    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("preset")
    @classmethod
    def _known_preset(cls, value: str) -> str:
        if value not in PRESETS:
            known = ", ".join(sorted(PRESETS))
            raise ValueError(f"unknown preset '{value}' (known: {known})")
        return value

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"unknown log level '{value}'")
        return value

    def resolved_delimiters(self) -> list[str]:
        """Explicit delimiters if set, otherwise the preset's list."""
        if self.delimiters is not None:
            return list(self.delimiters)
        return list(get_preset(self.preset))


def _find_project_root(start: Path) -> Path:
    """Walk up from ``start`` to the first directory holding pyproject.toml.

    Falls back to ``start`` when there is none.
    """
    for path in [start, *start.parents]:
        if (path / "pyproject.toml").exists():
            return path
    return start


def _settings_from_env() -> dict[str, Any]:
    values: dict[str, Any] = {}
    for field in ("max_chunk_size", "preset", "log_level", "log_json"):
        raw = os.environ.get(ENV_PREFIX + field.upper())
        if raw is not None and raw != "":
            values[field] = raw

    raw_delimiters = os.environ.get(ENV_PREFIX + "DELIMITERS")
    if raw_delimiters:
        # JSON so that whitespace delimiters survive the round trip
        values["delimiters"] = json.loads(raw_delimiters)
    return values


def load_settings(
    *,
    env_file: Path | None = None,
    **overrides: Any,
) -> ChunkerSettings:
    """Build settings from the environment plus explicit overrides.

    Recognised environment variables:
        - CHUNKER_MAX_CHUNK_SIZE: Maximum chunk size (default: 512)
        - CHUNKER_PRESET: Delimiter preset name (default: "default")
        - CHUNKER_DELIMITERS: JSON list of delimiters, overrides the preset
        - CHUNKER_LOG_LEVEL: Logging level name (default: "WARNING")
        - CHUNKER_LOG_JSON: Render logs as JSON (default: false)

    Args:
        env_file: Optional path to a specific .env file. If not provided,
            looks for .env in the project root (directory containing
            pyproject.toml) or current working directory. Variables already
            set in the environment win over the file.
        **overrides: Field values that take precedence over the environment.
            ``None`` values are ignored so CLI options can be passed through
            unchanged.

    Returns:
        The validated settings.

    Raises:
        pydantic.ValidationError: If any value is invalid.
        json.JSONDecodeError: If CHUNKER_DELIMITERS is not valid JSON.

    Example:
        >>> settings = load_settings(max_chunk_size=200, preset="markdown")
        >>> settings.resolved_delimiters()[0]
        '.'
    """
    dotenv_path = env_file
    if dotenv_path is None:
        dotenv_path = _find_project_root(Path.cwd()) / ".env"
    load_dotenv(dotenv_path, override=False)

    values = _settings_from_env()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return ChunkerSettings(**values)
