from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .errors import ConfigError

CONFIG_NAMES = ("corekit.yaml", "corekit.yml")


def parse_log_level(value: object) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level {value!r}")
    return level


class LoggingSettings(BaseModel):
    level: str = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def _known_level(cls, value: str) -> str:
        return parse_log_level(value)


class ComparerSettings(BaseModel):
    default: str = "natural"
    disabled: List[str] = Field(default_factory=list)

    @field_validator("disabled", mode="before")
    @classmethod
    def _strip_disabled(cls, values: Optional[List[str] | str]) -> List[str]:
        if isinstance(values, str):
            values = [values]
        if values is not None and not isinstance(values, (list, tuple)):
            raise ValueError("disabled must be a list of comparer names")
        return [str(v).strip() for v in (values or []) if v and str(v).strip()]

    @model_validator(mode="after")
    def _default_enabled(self) -> "ComparerSettings":
        if not self.default.strip():
            raise ValueError("default comparer must not be empty")
        if self.default in self.disabled:
            raise ValueError(f"default comparer {self.default!r} is disabled")
        return self


class SortSettings(BaseModel):
    reverse: bool = False
    unique: bool = False


class Settings(BaseModel):
    logging: LoggingSettings = LoggingSettings()
    comparers: ComparerSettings = ComparerSettings()
    sort: SortSettings = SortSettings()

    @field_validator("logging", "comparers", "sort", mode="before")
    @classmethod
    def _blank_section(cls, value: object) -> object:
        return {} if value is None else value

    @classmethod
    def load(cls, path: Path) -> "Settings":
        try:
            with path.open("r", encoding="utf-8") as fh:
                raw = yaml.safe_load(fh)
        except OSError as exc:
            raise ConfigError(f"Cannot read {path}: {exc}") from exc
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
        try:
            return cls.model_validate(raw or {})
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration in {path}:\n{exc}") from exc


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for name in CONFIG_NAMES:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    return None


def load_settings(explicit_path: Optional[Path] = None) -> Settings:
    path = find_config(explicit_path)
    if path is None:
        return Settings()
    return Settings.load(path)
