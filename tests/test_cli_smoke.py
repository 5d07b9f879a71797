from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

import balanced_chunker.config as config
from balanced_chunker.cli import app

runner = CliRunner()

SMOKE_TEXT = (
    "This is the string that we want to split. We want to try to split it "
    "into sentences if possible, but this sentence is long."
)


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch):
    for field in config.ChunkerSettings.model_fields:
        monkeypatch.delenv(config.ENV_PREFIX + field.upper(), raising=False)
    yield
    # load_dotenv writes straight into os.environ
    for key in [k for k in os.environ if k.startswith(config.ENV_PREFIX)]:
        del os.environ[key]


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def env_file(tmp_path: Path) -> Path:
    # an empty file keeps a stray project .env out of the picture
    path = tmp_path / ".env"
    path.write_text("")
    return path


def test_cli_help_lists_subcommands():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "split" in result.stdout
    assert "presets" in result.stdout


def test_presets_lists_all_names():
    result = runner.invoke(app, ["presets"])
    assert result.exit_code == 0
    for name in ("default", "english-prose", "english-wrapped", "markdown"):
        assert f"{name}:" in result.stdout


def test_split_file(tmp_path: Path, env_file: Path):
    source = tmp_path / "doc.txt"
    source.write_text(SMOKE_TEXT)

    result = runner.invoke(
        app,
        ["split", str(source), "-n", "60", "--env-file", str(env_file)],
    )

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines == [
        "0\t'This is the string that we want to split.'",
        "42\t'We want to try to split it into sentences if possible,'",
        "97\t'but this sentence is long.'",
    ]


def test_split_stdin_json(env_file: Path):
    result = runner.invoke(
        app,
        ["split", "--json", "--max-chunk-size", "60", "--env-file", str(env_file)],
        input=SMOKE_TEXT,
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [c["start_pos"] for c in payload] == [0, 42, 97]
    assert payload[0]["text"] == "This is the string that we want to split."


def test_split_with_escaped_delimiters(env_file: Path):
    text = "This is line 1\nthis is line two\n\nthis is line three"
    result = runner.invoke(
        app,
        [
            "split",
            "--json",
            "-n",
            "20",
            "-d",
            "\\n\\n",
            "-d",
            "\\n",
            "-d",
            " ",
            "--env-file",
            str(env_file),
        ],
        input=text,
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert [(c["text"], c["start_pos"]) for c in payload] == [
        ("This is line 1\n", 0),
        ("this is line two\n\n", 15),
        ("this is line three", 33),
    ]


def test_split_missing_file_returns_error(env_file: Path):
    result = runner.invoke(
        app, ["split", "missing-doc.txt", "--env-file", str(env_file)]
    )
    assert result.exit_code == 1
    assert "Input path does not exist" in result.output


def test_split_unknown_preset_returns_error(env_file: Path):
    result = runner.invoke(
        app,
        ["split", "--preset", "legal", "--env-file", str(env_file)],
        input="text",
    )
    assert result.exit_code == 1
    assert "unknown preset" in result.output


def test_split_reads_settings_from_env_file(tmp_path: Path):
    env_file = tmp_path / ".env"
    env_file.write_text("CHUNKER_MAX_CHUNK_SIZE=60\n")

    result = runner.invoke(
        app, ["split", "--json", "--env-file", str(env_file)], input=SMOKE_TEXT
    )

    assert result.exit_code == 0
    assert len(json.loads(result.stdout)) == 3
