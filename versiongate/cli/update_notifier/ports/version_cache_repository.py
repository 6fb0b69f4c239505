from __future__ import annotations

from enum import StrEnum, auto
from pathlib import Path
from typing import Protocol

from versiongate.core.version import Version


class VersionCacheCause(StrEnum):
    @staticmethod
    def _generate_next_value_(
        name: str, start: int, count: int, last_values: list[str]
    ) -> str:
        return name.lower()

    UNAVAILABLE = auto()
    MALFORMED = auto()
    EXPIRED = auto()


class VersionCacheError(Exception):
    """The cached version cannot be trusted.

    Every cause means the same thing to callers: do a fresh remote check.
    """

    def __init__(self, path: Path, *, cause: VersionCacheCause) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Cached version at {path} is {cause}")


class VersionCacheRepository(Protocol):
    def get(self) -> Version | None: ...
    def cache_if_newer(self, known: Version, candidate: Version) -> bool: ...
