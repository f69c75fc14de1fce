"""HTTP client for the Nylas messages, labels and folders endpoints."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, Unpack
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from inboxpy.adapters.http_resilience import ResilientClient
from inboxpy.domain.errors import TransportError
from inboxpy.domain.types import AccountModel

from .schema import CategoryPayload, ErrorResponse, MessagePayload
from .translator import message_categories, translate_categories

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from types import TracebackType

    from inboxpy.adapters.http_resilience import RequestOptions
    from inboxpy.config.http_resilience import ResilienceConfig
    from inboxpy.config.nylas import NylasConfig
    from inboxpy.domain.types import Category, RequestDescriptor

log = getLogger(__name__)

LABELS_PATH = "/labels"
FOLDERS_PATH = "/folders"
MESSAGE_PATH = "/messages/{message_id}"

_CATEGORY_LIST = TypeAdapter(list[CategoryPayload])


class NylasAPIError(TransportError):
    """Raised when a Nylas request fails or returns an unusable response."""


def message_path(message_id: str) -> str:
    """Return the endpoint for one message, escaping the id as a single segment."""

    return MESSAGE_PATH.format(message_id=quote(message_id, safe=""))


def error_message(response: httpx.Response) -> str:
    """Extract the API error message from a failed response."""

    prefix = f"HTTP {response.status_code}"
    try:
        error = ErrorResponse.model_validate(response.json())
    except (ValueError, PydanticValidationError):
        reason = response.reason_phrase or "request failed"
        return f"{prefix}: {reason}"
    if error.type:
        return f"{prefix} {error.type}: {error.message}"
    return f"{prefix}: {error.message}"


async def perform_request(
    client: ResilientClient,
    method: str,
    path: str,
    **kwargs: Unpack[RequestOptions],
) -> object:
    """Send one request and return the decoded JSON body.

    Connectivity errors, non-success statuses and invalid JSON all raise
    ``NylasAPIError``.
    """

    try:
        response = await client.request(method, path, **kwargs)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        raise NylasAPIError(f"{method} {path} failed: {exc}") from exc

    if response.is_error:
        message = error_message(response)
        log.error(f"Nylas API error on {method} {path}: {message}")
        raise NylasAPIError(message, status_code=response.status_code)

    try:
        return response.json()
    except ValueError as exc:
        raise NylasAPIError(
            f"Unexpected Nylas response payload for {method} {path}",
            status_code=response.status_code,
        ) from exc


class NylasClient:
    """Async Nylas client implementing the mutation orchestrator's ports.

    Use as an async context manager; one HTTP connection pool is shared by
    every request issued inside the block.
    """

    def __init__(
        self,
        *,
        config: NylasConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._resilience = config.resolved_resilience()
        self._client_factory = client_factory or ResilientClient
        self._client: ResilientClient | None = None
        self._headers: dict[str, str] = {}

    async def __aenter__(self) -> NylasClient:
        self._headers = self._config.authorization_header()
        self._client = self._client_factory(self._resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def fetch_catalog(self, model: AccountModel) -> tuple[Category, ...]:
        path = LABELS_PATH if model is AccountModel.LABEL else FOLDERS_PATH
        payload = await self._request("GET", path)
        try:
            categories = _CATEGORY_LIST.validate_python(payload)
        except PydanticValidationError as exc:
            raise NylasAPIError(f"Unexpected Nylas response payload for GET {path}") from exc
        return translate_categories(categories)

    async def fetch_categories(self, message_id: str, model: AccountModel) -> tuple[Category, ...]:
        path = message_path(message_id)
        payload = await self._request("GET", path)
        try:
            message = MessagePayload.model_validate(payload)
        except PydanticValidationError as exc:
            raise NylasAPIError(f"Unexpected Nylas response payload for GET {path}") from exc
        return message_categories(message, model)

    async def send(self, request: RequestDescriptor) -> Mapping[str, object]:
        path = message_path(request.target_id)
        payload = await self._request("PUT", path, json=dict(request.fields))
        if not isinstance(payload, dict):
            raise NylasAPIError(f"Unexpected Nylas response payload for PUT {path}")
        return payload

    async def _request(self, method: str, path: str, **kwargs: Unpack[RequestOptions]) -> object:
        if self._client is None:
            raise RuntimeError("NylasClient must be used as an async context manager")
        return await perform_request(self._client, method, path, headers=self._headers, **kwargs)
