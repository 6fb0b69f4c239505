from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
import logging
from pathlib import Path

from versiongate.cli.update_notifier.ports.version_cache_repository import (
    VersionCacheCause,
    VersionCacheError,
    VersionCacheRepository,
)
from versiongate.core.paths.global_paths import VERSIONGATE_HOME
from versiongate.core.version import Version, VersionParseError, parse_version

logger = logging.getLogger(__name__)

VERSION_CACHE_TTL = timedelta(hours=24)
VERSION_CACHE_FILE_NAME = "latest_version.txt"
# changing it invalidates every existing cache file
CACHE_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
CACHE_FIELD_SEPARATOR = ","


def _utc_now() -> datetime:
    return datetime.now(UTC)


def cache_if_newer(
    known: Version,
    candidate: Version,
    path: Path,
    *,
    ttl: timedelta = VERSION_CACHE_TTL,
    get_current_time: Callable[[], datetime] = _utc_now,
) -> bool:
    """Store ``candidate`` in ``path`` when it is newer than ``known``.

    Returns whether the cache file was written. Write failures are logged and
    never raised.
    """
    if not candidate.newer_than(known):
        return False

    # the record could not be split back into its two fields
    if CACHE_FIELD_SEPARATOR in candidate.original:
        logger.warning(
            "Not caching version %r, it contains %r",
            candidate.original,
            CACHE_FIELD_SEPARATOR,
        )
        return False

    expiry = (get_current_time() + ttl).astimezone(UTC)
    record = (
        f"{candidate.original}{CACHE_FIELD_SEPARATOR}"
        f"{expiry.strftime(CACHE_TIMESTAMP_FORMAT)}"
    )

    try:
        # encoded before opening so a bad tag never truncates the previous record
        payload = record.encode("utf-8")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except (OSError, UnicodeError):
        logger.warning(
            "Failed to cache version %s to %s", candidate, path, exc_info=True
        )
        return False

    return True


def read_valid_cache(
    path: Path, *, get_current_time: Callable[[], datetime] = _utc_now
) -> Version:
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise VersionCacheError(path, cause=VersionCacheCause.UNAVAILABLE) from exc
    except UnicodeDecodeError as exc:
        raise VersionCacheError(path, cause=VersionCacheCause.MALFORMED) from exc

    fields = content.strip().split(CACHE_FIELD_SEPARATOR)
    if len(fields) != 2:
        raise VersionCacheError(path, cause=VersionCacheCause.MALFORMED)
    raw_version, raw_expiry = fields

    try:
        version = parse_version(raw_version)
        expiry = datetime.strptime(raw_expiry, CACHE_TIMESTAMP_FORMAT).replace(
            tzinfo=UTC
        )
    except (VersionParseError, ValueError) as exc:
        raise VersionCacheError(path, cause=VersionCacheCause.MALFORMED) from exc

    if expiry <= get_current_time():
        raise VersionCacheError(path, cause=VersionCacheCause.EXPIRED)

    return version


class FileSystemVersionCacheRepository(VersionCacheRepository):
    def __init__(
        self,
        base_path: Path | str | None = None,
        *,
        ttl: timedelta = VERSION_CACHE_TTL,
        get_current_time: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._base_path = (
            Path(base_path) if base_path is not None else VERSIONGATE_HOME.path
        )
        self._cache_file = self._base_path / VERSION_CACHE_FILE_NAME
        self._ttl = ttl
        self._get_current_time = get_current_time

    @property
    def cache_file(self) -> Path:
        return self._cache_file

    def get(self) -> Version | None:
        try:
            return read_valid_cache(
                self._cache_file, get_current_time=self._get_current_time
            )
        except VersionCacheError as error:
            logger.debug("Ignoring version cache: %s", error)
            return None

    def cache_if_newer(self, known: Version, candidate: Version) -> bool:
        return cache_if_newer(
            known,
            candidate,
            self._cache_file,
            ttl=self._ttl,
            get_current_time=self._get_current_time,
        )
