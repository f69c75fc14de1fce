"""Hosted OAuth flow: authorize URL, code exchange and token revocation."""

from __future__ import annotations

import asyncio
import re
from logging import getLogger
from typing import TYPE_CHECKING, Literal
from urllib.parse import quote, urlencode

from pydantic import AnyHttpUrl, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from inboxpy.adapters.http_resilience import ResilientClient
from inboxpy.domain.errors import ValidationError

from .client import NylasAPIError, perform_request
from .schema import NylasBaseModel, TokenResponse

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from inboxpy.config.http_resilience import ResilienceConfig
    from inboxpy.config.nylas import NylasConfig

log = getLogger(__name__)

AUTHORIZE_PATH = "/oauth/authorize"
TOKEN_PATH = "/oauth/token"
REVOKE_PATH = "/oauth/revoke"

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class AuthorizeParams(NylasBaseModel):
    model_config = ConfigDict(extra="forbid")

    scopes: str = Field(min_length=1)
    redirect_uri: AnyHttpUrl
    response_type: Literal["code", "token"]
    state: str | None = Field(default=None, min_length=1, max_length=255)
    provider: Literal["iCloud", "gmail", "office365", "exchange", "IMAP"] | None = None
    login_hint: str | None = None
    redirect_on_error: bool | None = Field(default=None, strict=True)
    disable_provider_selection: bool | None = Field(default=None, strict=True)

    @field_validator("login_hint")
    @classmethod
    def _check_email(cls, value: str | None) -> str | None:
        if value is not None and not _EMAIL_PATTERN.match(value):
            raise ValueError("login_hint must be an email address")
        return value


def _query_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class HostedAuthentication:
    """Nylas hosted authentication endpoints."""

    def __init__(
        self,
        *,
        config: NylasConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resolved_resilience()
        self._client_factory = client_factory or ResilientClient

    def authenticate_user(self, params: Mapping[str, object]) -> str:
        """Return the hosted login URL the user should be redirected to."""

        try:
            validated = AuthorizeParams.model_validate(dict(params))
        except PydanticValidationError as exc:
            raise ValidationError(f"Invalid authorization parameters: {exc}") from exc

        query: dict[str, str] = {"api_token": self._config.api_token}
        for key, value in validated.model_dump(exclude_none=True).items():
            query[key] = _query_value(value)

        base = self._config.server.rstrip("/") + AUTHORIZE_PATH
        return f"{base}?{urlencode(query, quote_via=quote)}"

    def send_authorization_code(self, code: str) -> TokenResponse:
        if not isinstance(code, str) or not code.strip():
            raise ValidationError("Authorization code must be a non-empty string")
        return asyncio.run(self._send_authorization_code_async(code))

    def revoke_access_tokens(self) -> dict[str, object]:
        return asyncio.run(self._revoke_access_tokens_async())

    async def _send_authorization_code_async(self, code: str) -> TokenResponse:
        form = {
            "code": code,
            "grant_type": "authorization_code",
            "api_token": self._config.api_token,
        }
        async with self._client_factory(self._resilience) as client:
            payload = await perform_request(client, "POST", TOKEN_PATH, data=form)
        try:
            token = TokenResponse.model_validate(payload)
        except PydanticValidationError as exc:
            raise NylasAPIError("Unexpected Nylas token response payload") from exc
        log.info("Exchanged authorization code for account %s", token.account_id)
        return token

    async def _revoke_access_tokens_async(self) -> dict[str, object]:
        headers = self._config.authorization_header()
        async with self._client_factory(self._resilience) as client:
            payload = await perform_request(client, "POST", REVOKE_PATH, headers=headers)
        if not isinstance(payload, dict):
            raise NylasAPIError("Unexpected Nylas revoke response payload")
        log.info("Revoked Nylas access tokens")
        return payload
