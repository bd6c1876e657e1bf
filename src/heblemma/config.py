"""Configuration loading utilities for heblemma."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    """Application configuration resolved from profile + environment variables."""

    env: str
    log_level: str
    api_host: str
    api_port: int
    dictionary_path: str | None
    use_gpu: bool


def load_config(env_name: str | None = None, config_dir: Path | None = None) -> AppConfig:
    """Load configuration from `configs/<env>.toml` and environment overrides."""
    env = env_name or os.getenv("HEBLEMMA_ENV", "dev")
    resolved_dir = config_dir or _default_config_dir()
    profile_path = resolved_dir / f"{env}.toml"

    defaults: dict[str, str | int | bool | None] = {
        "log_level": "INFO",
        "api_host": "127.0.0.1",
        "api_port": 5001,
        "dictionary_path": None,
        "use_gpu": False,
    }
    defaults.update(_load_profile(profile_path))

    log_level = os.getenv("HEBLEMMA_LOG_LEVEL", str(defaults["log_level"]))
    api_host = os.getenv("HEBLEMMA_API_HOST", str(defaults["api_host"]))
    api_port = _parse_int("HEBLEMMA_API_PORT", os.getenv("HEBLEMMA_API_PORT"), defaults["api_port"])
    dictionary_path = os.getenv("HEBLEMMA_DICTIONARY_PATH") or defaults["dictionary_path"]
    use_gpu = _parse_bool("HEBLEMMA_USE_GPU", os.getenv("HEBLEMMA_USE_GPU"), defaults["use_gpu"])

    return AppConfig(
        env=env,
        log_level=log_level.upper(),
        api_host=api_host,
        api_port=api_port,
        dictionary_path=str(dictionary_path) if dictionary_path else None,
        use_gpu=use_gpu,
    )


def _default_config_dir() -> Path:
    return Path(__file__).resolve().parents[2] / "configs"


def _load_profile(path: Path) -> dict[str, str | int | bool]:
    if not path.exists():
        return {}

    with path.open("rb") as handle:
        payload = tomllib.load(handle)

    resolved: dict[str, str | int | bool] = {}
    for key, raw in payload.items():
        if key == "api_port":
            resolved[key] = _coerce_int(key, raw)
        elif key == "use_gpu":
            resolved[key] = _coerce_bool(key, raw)
        elif key in {"log_level", "api_host", "dictionary_path"}:
            resolved[key] = _coerce_str(key, raw)
    return resolved


def _parse_int(name: str, raw: str | None, default: object) -> int:
    if raw is None:
        return _coerce_int(name, default)
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


def _parse_bool(name: str, raw: str | None, default: object) -> bool:
    if raw is None:
        return _coerce_bool(name, default)
    return _coerce_bool(name, raw)


def _coerce_int(name: str, value: object) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{name} must be an integer, got type bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as exc:
            raise ValueError(f"{name} must be an integer, got {value!r}") from exc
    raise ValueError(f"{name} must be an integer, got type {type(value).__name__}")


def _coerce_bool(name: str, value: object) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().casefold()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off", ""}:
            return False
        raise ValueError(f"{name} must be a boolean, got {value!r}")
    raise ValueError(f"{name} must be a boolean, got type {type(value).__name__}")


def _coerce_str(name: str, value: object) -> str:
    if isinstance(value, str):
        return value
    raise ValueError(f"{name} must be a string, got type {type(value).__name__}")
