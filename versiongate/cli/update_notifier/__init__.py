from __future__ import annotations

from versiongate.cli.update_notifier.adapters.filesystem_version_cache_repository import (
    CACHE_TIMESTAMP_FORMAT,
    VERSION_CACHE_TTL,
    FileSystemVersionCacheRepository,
    cache_if_newer,
    read_valid_cache,
)
from versiongate.cli.update_notifier.ports.update_gateway import (
    GATEWAY_ERROR_MESSAGES,
    Update,
    UpdateGateway,
    UpdateGatewayCause,
    UpdateGatewayError,
)
from versiongate.cli.update_notifier.ports.version_cache_repository import (
    VersionCacheCause,
    VersionCacheError,
    VersionCacheRepository,
)
from versiongate.cli.update_notifier.update import (
    UpdateAvailability,
    UpdateError,
    check_for_update,
    format_update_notice,
    get_update_if_available,
)

__all__ = [
    "CACHE_TIMESTAMP_FORMAT",
    "GATEWAY_ERROR_MESSAGES",
    "VERSION_CACHE_TTL",
    "FileSystemVersionCacheRepository",
    "Update",
    "UpdateAvailability",
    "UpdateError",
    "UpdateGateway",
    "UpdateGatewayCause",
    "UpdateGatewayError",
    "VersionCacheCause",
    "VersionCacheError",
    "VersionCacheRepository",
    "cache_if_newer",
    "check_for_update",
    "format_update_notice",
    "get_update_if_available",
    "read_valid_cache",
]
