"""Configuration loading."""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.9-3.10
    import tomli as tomllib  # type: ignore[no-redef]


class ConfigError(RuntimeError):
    """Raised when config file parsing fails."""


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def expand_path(path_str: str) -> Path:
    """Expand user/env vars and return absolute path."""
    return Path(os.path.expandvars(path_str)).expanduser().resolve()


def default_data_dir() -> Path:
    """Resolve XDG-style data directory with env override."""
    raw = os.getenv("BP_DATA_DIR", "~/.local/share/bp")
    return expand_path(raw)


def default_config_path() -> Path:
    """Get default config file path."""
    raw = os.getenv("BP_CONFIG_FILE", "~/.config/bp/config.toml")
    return expand_path(raw)


def _default_config() -> Dict[str, Any]:
    data_dir = default_data_dir()
    return {
        "storage": {
            "backend": "json",
            "path": str(data_dir / "readings.json"),
        },
        "submission": {
            "delay_seconds": 1.0,
        },
        "dashboard": {
            "recent_count": 5,
            "average_window": 7,
        },
        "defaults": {
            "category": "all",
            "date_range": "all",
        },
        "export": {
            "default_directory": "./bp-export",
        },
    }


def _read_config(path: Path) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    text = path.read_text()
    try:
        if suffix in {".toml", ""}:
            loaded = tomllib.loads(text)
        else:
            loaded = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Invalid JSON in config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain an object/table at the root")
    return loaded


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from disk, merged with defaults."""
    cfg_path = path or default_config_path()
    cfg = _default_config()

    if cfg_path.exists():
        cfg = _deep_merge(cfg, _read_config(cfg_path))

    return cfg


def resolve_store_path(config: Dict[str, Any]) -> Path:
    """Resolve the JSON reading store path from env/config."""
    raw = os.getenv("BP_STORE_FILE") or config.get("storage", {}).get("path")
    if not raw:
        raw = str(default_data_dir() / "readings.json")
    return expand_path(raw)


def resolve_output_dir(config: Dict[str, Any], explicit: Optional[Path] = None) -> Path:
    """Resolve output directory with CLI override first."""
    if explicit is not None:
        return explicit.expanduser().resolve()
    raw = os.getenv("BP_OUTPUT_DIR") or config.get("export", {}).get(
        "default_directory",
        "./bp-export",
    )
    return expand_path(raw)


def submission_delay(config: Dict[str, Any]) -> float:
    """Simulated submission latency in seconds."""
    try:
        delay = float(config.get("submission", {}).get("delay_seconds", 1.0))
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"submission.delay_seconds must be a number: {exc}") from exc
    return max(delay, 0.0)
