"""Settings resolution for embedkit entrypoints."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import os
from pathlib import Path
from typing import Mapping

DEFAULT_MODEL = "text-embedding-3-small"
BACKENDS = ("openai", "mock")


@dataclass(frozen=True)
class EmbedderSettings:
    backend: str
    model: str = DEFAULT_MODEL
    api_key: str | None = None
    base_url: str | None = None
    timeout_s: float = 60.0
    encoding_format: str | None = None
    headers: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "backend": self.backend,
            "model": self.model,
            "api_key_present": bool(self.api_key),
            "base_url": self.base_url,
            "timeout_s": self.timeout_s,
            "encoding_format": self.encoding_format,
            "headers": sorted(self.headers),
        }


def read_dotenv(path: str | Path = ".env") -> dict[str, str]:
    env_path = Path(path)
    if not env_path.exists():
        return {}
    try:
        text = env_path.read_text(encoding="utf-8")
    except OSError:
        return {}

    values: dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith("#") or "=" not in stripped:
            continue
        key, value = (part.strip() for part in stripped.split("=", 1))
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]
        if value:
            values[key] = value
    return values


def load_settings(
    env: Mapping[str, str] | None = None,
    dotenv_path: str | Path | None = ".env",
    *,
    backend: str | None = None,
    model: str | None = None,
) -> EmbedderSettings:
    """Resolve settings from explicit overrides, the environment, then ``.env``.

    Without an explicit backend, ``openai`` is used when an API key is found
    and ``mock`` otherwise.
    """
    merged: dict[str, str] = read_dotenv(dotenv_path) if dotenv_path else {}
    merged.update(os.environ if env is None else env)

    api_key = merged.get("EMBEDKIT_API_KEY") or merged.get("OPENAI_API_KEY")
    resolved_backend = (backend or merged.get("EMBEDKIT_BACKEND") or ("openai" if api_key else "mock")).lower()
    if resolved_backend not in BACKENDS:
        raise ValueError(f"Unsupported embeddings backend: {resolved_backend}")

    timeout_raw = merged.get("EMBEDKIT_TIMEOUT_S")
    try:
        timeout_s = float(timeout_raw) if timeout_raw else 60.0
    except ValueError as exc:
        raise ValueError(f"EMBEDKIT_TIMEOUT_S must be a number, got {timeout_raw!r}") from exc

    return EmbedderSettings(
        backend=resolved_backend,
        model=model or merged.get("EMBEDKIT_MODEL") or DEFAULT_MODEL,
        api_key=api_key,
        base_url=merged.get("EMBEDKIT_BASE_URL"),
        timeout_s=timeout_s,
        encoding_format=merged.get("EMBEDKIT_ENCODING_FORMAT"),
        headers=_parse_headers(merged.get("EMBEDKIT_HEADERS")),
    )


def _parse_headers(raw: str | None) -> dict[str, str]:
    if not raw:
        return {}
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ValueError("EMBEDKIT_HEADERS must be a JSON object.") from exc
    if not isinstance(parsed, dict):
        raise ValueError("EMBEDKIT_HEADERS must be a JSON object.")
    return {str(key): str(value) for key, value in parsed.items()}
