from __future__ import annotations

from collections.abc import Callable
import os
from pathlib import Path


class GlobalPath:
    def __init__(self, resolver: Callable[[], Path]) -> None:
        self._resolver = resolver

    @property
    def path(self) -> Path:
        return self._resolver()


_DEFAULT_VERSIONGATE_HOME = Path.home() / ".versiongate"


def _get_versiongate_home() -> Path:
    if versiongate_home := os.getenv("VERSIONGATE_HOME"):
        return Path(versiongate_home).expanduser().resolve()
    return _DEFAULT_VERSIONGATE_HOME


VERSIONGATE_HOME = GlobalPath(_get_versiongate_home)
GLOBAL_CONFIG_FILE = GlobalPath(lambda: VERSIONGATE_HOME.path / "config.toml")
LOG_FILE = GlobalPath(lambda: VERSIONGATE_HOME.path / "versiongate.log")
