from __future__ import annotations

from datetime import timedelta
from pathlib import Path
import tomllib

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from versiongate.core.paths.global_paths import GLOBAL_CONFIG_FILE

DEFAULT_CACHE_TTL_HOURS = 24.0


class ConfigError(Exception):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Invalid config file {path}: {message}")


class UpdateCheckConfig(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    enable_update_checks: bool = True
    cache_ttl_hours: float = Field(default=DEFAULT_CACHE_TTL_HOURS, gt=0)

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(hours=self.cache_ttl_hours)


def load_config(path: Path | None = None) -> UpdateCheckConfig:
    config_file = path if path is not None else GLOBAL_CONFIG_FILE.path

    try:
        content = config_file.read_text(encoding="utf-8")
    except FileNotFoundError:
        return UpdateCheckConfig()
    except OSError as exc:
        raise ConfigError(config_file, str(exc)) from exc

    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(config_file, str(exc)) from exc

    try:
        return UpdateCheckConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(config_file, str(exc)) from exc
