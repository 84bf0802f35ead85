from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_ENV_VAR = "ISEEFORTUNE_CONFIG"
DEFAULT_LOG_RETENTION_BYTES = 10 * 1024 * 1024


def _project_root() -> Path:
    return Path(__file__).resolve().parents[2]


def default_vectors_path() -> Path:
    return _project_root() / "vectors" / "vectors.json"


def default_config_path() -> Path:
    return _project_root() / "config" / "verifier.yaml"


class LoggingSettings(BaseModel):
    level: str = "WARNING"
    json_logs: bool = False
    log_dir: Optional[Path] = None
    retention_bytes: int = Field(default=DEFAULT_LOG_RETENTION_BYTES, ge=1024)

    @model_validator(mode="before")
    @classmethod
    def _alias_json(cls, data: Any) -> Any:
        if isinstance(data, dict) and "json" in data and "json_logs" not in data:
            data = dict(data)
            data["json_logs"] = data.pop("json")
        return data

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level


class Settings(BaseSettings):
    """Runtime settings: where to log and where the vector file lives.

    Precedence, highest first: constructor arguments, ISEEFORTUNE_*
    environment variables, the YAML file, defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="ISEEFORTUNE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    vectors_path: Path = Field(default_factory=default_vectors_path)

    @model_validator(mode="before")
    @classmethod
    def _apply_yaml_overrides(cls, data: Any) -> Any:
        overrides = _load_yaml_overrides()
        if not overrides:
            return data
        if isinstance(data, dict):
            return _deep_merge(overrides, data)
        return overrides


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged: Dict[str, Any] = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _load_yaml_overrides() -> Dict[str, Any]:
    candidates: list[Path] = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(Path(env_path).expanduser().resolve())
    candidates.append(default_config_path())

    for path in candidates:
        if not path.exists():
            continue
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError):
            continue
        section = data.get("verifier") if isinstance(data, dict) else None
        if isinstance(section, dict):
            return section
    return {}


def load_settings(**overrides: Any) -> Settings:
    return Settings(**overrides)


__all__ = [
    "CONFIG_ENV_VAR",
    "LoggingSettings",
    "Settings",
    "default_vectors_path",
    "default_config_path",
    "load_settings",
]
