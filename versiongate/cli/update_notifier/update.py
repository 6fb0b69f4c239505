from __future__ import annotations

from dataclasses import dataclass
import logging

from versiongate import __version__
from versiongate.cli.update_notifier.adapters.filesystem_version_cache_repository import (
    FileSystemVersionCacheRepository,
)
from versiongate.cli.update_notifier.ports.update_gateway import (
    GATEWAY_ERROR_MESSAGES,
    UpdateGateway,
    UpdateGatewayError,
)
from versiongate.cli.update_notifier.ports.version_cache_repository import (
    VersionCacheRepository,
)
from versiongate.core.config import ConfigError, UpdateCheckConfig, load_config
from versiongate.core.version import Version, VersionParseError, parse_version

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateAvailability:
    latest_version: str
    should_notify: bool


class UpdateError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _parse_version(raw: str, source: str) -> Version | None:
    try:
        return parse_version(raw)
    except VersionParseError as error:
        logger.warning(
            "Skipping update check, %s version is unusable: %s", source, error
        )
        return None


def _describe_gateway_error(error: UpdateGatewayError) -> str:
    return error.user_message or GATEWAY_ERROR_MESSAGES[error.cause]


async def get_update_if_available(
    update_gateway: UpdateGateway,
    current_version: str,
    version_cache_repository: VersionCacheRepository,
) -> UpdateAvailability | None:
    if not (current := _parse_version(current_version, "current")):
        return None

    if cached := version_cache_repository.get():
        if cached.newer_than(current):
            return UpdateAvailability(
                latest_version=cached.original, should_notify=False
            )
        return None

    try:
        update = await update_gateway.fetch_update()
    except UpdateGatewayError as error:
        raise UpdateError(_describe_gateway_error(error)) from error

    if not update:
        return None

    if not (latest := _parse_version(update.latest_version, "latest")):
        return None

    if not latest.newer_than(current):
        return None

    version_cache_repository.cache_if_newer(current, latest)
    return UpdateAvailability(latest_version=latest.original, should_notify=True)


def format_update_notice(
    availability: UpdateAvailability, current_version: str
) -> str:
    return (
        f"A newer version {availability.latest_version} is available "
        f"(current: {current_version})."
    )


async def check_for_update(
    update_gateway: UpdateGateway,
    current_version: str = __version__,
    *,
    config: UpdateCheckConfig | None = None,
    version_cache_repository: VersionCacheRepository | None = None,
) -> UpdateAvailability | None:
    """Run the update check the way the CLI does at startup.

    Honours ``enable_update_checks`` and the configured cache freshness window.
    An unreadable config file falls back to the defaults. Diagnostics go to the
    ``versiongate`` logger; hosts that want them on disk call
    ``versiongate.core.utils.configure_file_logging`` once before this.
    """
    if config is None:
        try:
            config = load_config()
        except ConfigError as error:
            logger.warning("Using default update check settings: %s", error)
            config = UpdateCheckConfig()

    if not config.enable_update_checks:
        return None

    repository = version_cache_repository or FileSystemVersionCacheRepository(
        ttl=config.cache_ttl
    )
    return await get_update_if_available(update_gateway, current_version, repository)
