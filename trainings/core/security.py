"""Bearer-token check delegated to the external auth service."""

from __future__ import annotations

import logging
import uuid

import httpx

from trainings.core.errors import UnauthorizedError

VALIDATE_PATH = "/auth/v1/validate"

NO_BEARER = "no_bearer"
AUTH_UNAVAILABLE = "auth_unavailable"
INVALID_TOKEN = "invalid_token"
BAD_AUTH_RESPONSE = "bad_auth_response"


def has_bearer(authorization: str | None) -> bool:
    return bool(authorization) and len(authorization) >= 7 and authorization[:7].lower() == "bearer "


class AuthClient:
    """Resolves the caller's user id by forwarding its Authorization header.

    ``transport`` is only set by tests (httpx.MockTransport).
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 2.0,
        transport: httpx.AsyncBaseTransport | None = None,
        logger: logging.Logger | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self.logger = logger or logging.getLogger(__name__)

    async def validate(self, authorization: str | None) -> uuid.UUID:
        if not has_bearer(authorization):
            raise UnauthorizedError(NO_BEARER)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(
                    self.base_url + VALIDATE_PATH,
                    headers={"Authorization": authorization},
                )
        except httpx.HTTPError as exc:
            self.logger.warning("auth service unreachable: %s", exc, extra={"auth_base_url": self.base_url})
            raise UnauthorizedError(AUTH_UNAVAILABLE) from exc

        if response.status_code != httpx.codes.OK:
            self.logger.info("token rejected", extra={"auth_status": response.status_code})
            raise UnauthorizedError(INVALID_TOKEN)

        try:
            user_id = uuid.UUID(str(response.json()["user_id"]))
        except (ValueError, KeyError, TypeError) as exc:
            self.logger.warning("unexpected auth response", extra={"auth_status": response.status_code})
            raise UnauthorizedError(BAD_AUTH_RESPONSE) from exc
        return user_id
