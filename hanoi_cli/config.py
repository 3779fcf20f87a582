from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .commands import DEFAULT_DELIMITER, DEFAULT_QUIT_TOKEN
from .pegs import PEG_LABELS

DEFAULTS: dict[str, Any] = {
    "n_disks": 3,
    "delimiter": DEFAULT_DELIMITER,
    "quit_token": DEFAULT_QUIT_TOKEN,
    "snapshot": None,
}


@dataclass(frozen=True, slots=True)
class Settings:
    n_disks: int
    delimiter: str
    quit_token: str
    snapshot: Path | None


def load_config(path: str | Path) -> dict[str, Any]:
    data = json.loads(Path(path).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"config {path} must contain a JSON object")
    return _expand_env_vars(data)


def _expand_env_vars(value: Any) -> Any:
    if isinstance(value, str):
        return os.path.expandvars(value)
    if isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    if isinstance(value, dict):
        return {str(k): _expand_env_vars(v) for k, v in value.items()}
    return value


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = {**base}
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def _coerce_n_disks(value: Any) -> int:
    # Env-expanded values arrive as strings.
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"n_disks must be an integer, got {value!r}")
    if value < 1:
        raise ValueError(f"n_disks must be >= 1, got {value}")
    return value


def resolve_settings(
    config: dict[str, Any] | None = None,
    overrides: dict[str, Any] | None = None,
) -> Settings:
    """Layer defaults, a loaded config and explicit overrides (None is ignored)."""

    merged = merge_dicts(DEFAULTS, config or {})
    unknown = sorted(set(merged) - set(DEFAULTS))
    if unknown:
        raise ValueError(f"unknown config keys: {', '.join(unknown)}")
    explicit = {k: v for k, v in (overrides or {}).items() if v is not None}
    merged = merge_dicts(merged, explicit)

    delimiter = merged["delimiter"]
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise ValueError(f"delimiter must be a single character, got {delimiter!r}")
    quit_token = merged["quit_token"]
    if not isinstance(quit_token, str) or not quit_token.strip():
        raise ValueError("quit_token must be a non-empty string")
    if quit_token.strip().upper() in set(PEG_LABELS) or delimiter in quit_token:
        raise ValueError(f"quit_token {quit_token!r} collides with move syntax")

    snapshot = merged["snapshot"]
    if snapshot is not None and not isinstance(snapshot, (str, Path)):
        raise ValueError(f"snapshot must be a file path, got {snapshot!r}")
    return Settings(
        n_disks=_coerce_n_disks(merged["n_disks"]),
        delimiter=delimiter,
        quit_token=quit_token.strip(),
        snapshot=Path(snapshot) if snapshot else None,
    )
