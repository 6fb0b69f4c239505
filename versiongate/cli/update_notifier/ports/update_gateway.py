from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol


@dataclass(frozen=True, slots=True)
class Update:
    latest_version: str


class UpdateGatewayCause(StrEnum):
    """Why the version source could not answer.

    Adapters map their transport failures (timeouts, HTTP statuses) onto
    ``UNREACHABLE`` and unusable payloads onto ``INVALID_RESPONSE``.
    """

    UNREACHABLE = "unreachable"
    INVALID_RESPONSE = "invalid_response"
    UNKNOWN = "unknown"


GATEWAY_ERROR_MESSAGES: dict[UpdateGatewayCause, str] = {
    UpdateGatewayCause.UNREACHABLE: "Could not reach the version source to look for a newer version.",
    UpdateGatewayCause.INVALID_RESPONSE: "The version source returned a response that could not be read.",
    UpdateGatewayCause.UNKNOWN: "Unable to determine whether a newer version is available.",
}


class UpdateGatewayError(Exception):
    def __init__(
        self, *, cause: UpdateGatewayCause, message: str | None = None
    ) -> None:
        self.cause = cause
        self.user_message = message
        super().__init__(message or GATEWAY_ERROR_MESSAGES[cause])


class UpdateGateway(Protocol):
    """Source of the latest published version, usually a remote release feed."""

    async def fetch_update(self) -> Update | None: ...
