from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from embedkit.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    for key in (
        "EMBEDKIT_BACKEND", "EMBEDKIT_API_KEY", "OPENAI_API_KEY", "EMBEDKIT_MODEL", "EMBEDKIT_HEADERS",
        "EMBEDKIT_BASE_URL", "EMBEDKIT_ENCODING_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)


def test_embed_json_with_mock_backend() -> None:
    result = runner.invoke(
        app,
        ["embed", "first", "second", "first", "--backend", "mock", "--dimensions", "16", "--json"],
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["model"] == "text-embedding-3-small"
    assert [entry["index"] for entry in payload["embeddings"]] == [0, 1, 2]
    assert all(len(entry["vector"]) == 16 for entry in payload["embeddings"])
    assert payload["embeddings"][0]["vector"] == payload["embeddings"][2]["vector"]
    assert payload["usage"]["input_tokens"] == 3


def test_embed_table_output() -> None:
    result = runner.invoke(app, ["embed", "The quick brown fox", "--model", "mock-model", "-d", "8"])
    assert result.exit_code == 0, result.output
    assert "mock-model" in result.stdout
    assert "Embeddings" in result.stdout


def test_embed_without_texts_fails() -> None:
    result = runner.invoke(app, ["embed", "--backend", "mock"])
    assert result.exit_code == 1
    assert "embedding input is required" in result.stdout


def test_embed_openai_without_key_fails() -> None:
    result = runner.invoke(app, ["embed", "x", "--backend", "openai"])
    assert result.exit_code == 1


def test_dry_run_includes_dimensions() -> None:
    result = runner.invoke(app, ["dry-run", "The quick brown fox", "--dimensions", "256"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout) == {
        "dimensions": 256,
        "input": ["The quick brown fox"],
        "model": "text-embedding-3-small",
    }


def test_dry_run_omits_dimensions_by_default() -> None:
    result = runner.invoke(app, ["dry-run", "The quick brown fox"])
    assert result.exit_code == 0, result.output
    assert '"dimensions"' not in result.stdout
    assert "backend default" in result.stdout


def test_root_without_command_shows_help() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0
    assert "embed" in result.stdout


def test_verbose_flag_installs_logging() -> None:
    result = runner.invoke(app, ["embed", "x", "--backend", "mock", "--verbose", "--json"])
    assert result.exit_code == 0, result.output
