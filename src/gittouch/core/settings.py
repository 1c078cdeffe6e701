# core/settings.py — конфигурация: YAML-файл + переопределения из окружения
from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from gittouch.core.errors import ConfigError

ENV_PREFIX = "GIT_TOUCH_"
CONFIG_ENV = "GIT_TOUCH_CONFIG"
DEFAULT_PATH_MAX = 4096  # PATH_MAX в Linux, вместе с завершающим NUL


class Settings(BaseModel):
    log_level: Literal["DEBUG", "INFO", "WARN", "ERROR", "CRITICAL"] = "WARN"
    log_file: str | None = None
    path_var: str = "PATH"
    path_max: int = Field(DEFAULT_PATH_MAX, gt=0)
    verify_executable: bool = False
    inherit_env: bool = False

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            return "WARN" if v == "WARNING" else v
        return v

    @field_validator("path_var")
    @classmethod
    def _non_empty_var(cls, v: str) -> str:
        if not v:
            raise ValueError("path_var must not be empty")
        return v


def default_config_path(environ: Mapping[str, str]) -> Path:
    explicit = environ.get(CONFIG_ENV)
    if explicit:
        return Path(explicit)
    base = environ.get("XDG_CONFIG_HOME") or str(Path(environ.get("HOME", "~")).expanduser() / ".config")
    return Path(base) / "git-touch" / "config.yaml"


def load_cfg_from(path: Path) -> dict[str, Any]:
    """
    Читает YAML конфигурацию. Отсутствующий файл — пустая конфигурация;
    битый или не-словарь — ConfigError.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Couldn't read configuration {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {path} must be a mapping")
    return data


def env_overrides(environ: Mapping[str, str]) -> dict[str, str]:
    out: dict[str, str] = {}
    for name in Settings.model_fields:
        key = ENV_PREFIX + name.upper()
        if key in environ:
            out[name] = environ[key]
    return out


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Окружение читается один раз; значения из него перекрывают файл."""
    environ = os.environ if environ is None else environ
    data = load_cfg_from(default_config_path(environ))
    data.update(env_overrides(environ))
    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
