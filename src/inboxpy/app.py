"""Application entry points for message updates and hosted authentication."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from logging import getLogger
from typing import TYPE_CHECKING

from inboxpy.adapters.nylas import HostedAuthentication, NylasClient
from inboxpy.config import get_nylas_auth_config, get_nylas_config
from inboxpy.domain.batch import as_target_ids
from inboxpy.domain.smart_update import SmartUpdater
from inboxpy.domain.types import failed

if TYPE_CHECKING:
    from collections.abc import Mapping

    from inboxpy.adapters.http_resilience import ResilientClient
    from inboxpy.adapters.nylas import TokenResponse
    from inboxpy.config import NylasConfig, ResilienceConfig
    from inboxpy.domain.types import BatchResult

type MessageIds = str | Sequence[str]
type ClientFactory = Callable[[ResilienceConfig], ResilientClient]
type Operation = Callable[[SmartUpdater], Awaitable[BatchResult]]

log = getLogger(__name__)


def run_update(
    name: str,
    operation: Operation,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    """Run one orchestrator operation against the configured Nylas account."""

    effective_config = config or get_nylas_config()

    async def runner() -> BatchResult:
        async with NylasClient(config=effective_config, client_factory=client_factory) as client:
            updater = SmartUpdater(
                catalog=client,
                state=client,
                transport=client,
                model=effective_config.account_model,
                max_concurrency=effective_config.batch.max_concurrency,
                request_timeout=effective_config.batch.request_timeout_seconds,
            )
            return await operation(updater)

    result = asyncio.run(runner())
    failures = failed(result)
    log.info(
        f"Finished {name}: messages={len(result)}, succeeded={len(result) - len(failures)}, "
        f"failed={len(failures)}"
    )
    return result


def star_messages(
    message_ids: MessageIds,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    ids = as_target_ids(message_ids)
    return run_update(
        "star", lambda updater: updater.star(ids), config=config, client_factory=client_factory
    )


def unstar_messages(
    message_ids: MessageIds,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    ids = as_target_ids(message_ids)
    return run_update(
        "unstar", lambda updater: updater.unstar(ids), config=config, client_factory=client_factory
    )


def mark_messages_read(
    message_ids: MessageIds,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    ids = as_target_ids(message_ids)
    return run_update(
        "mark-read",
        lambda updater: updater.mark_as_read(ids),
        config=config,
        client_factory=client_factory,
    )


def mark_messages_unread(
    message_ids: MessageIds,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    ids = as_target_ids(message_ids)
    return run_update(
        "mark-unread",
        lambda updater: updater.mark_as_unread(ids),
        config=config,
        client_factory=client_factory,
    )


def archive_message(
    message_id: str,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    return run_update(
        "archive",
        lambda updater: updater.archive(message_id),
        config=config,
        client_factory=client_factory,
    )


def unarchive_message(
    message_id: str,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    return run_update(
        "unarchive",
        lambda updater: updater.unarchive(message_id),
        config=config,
        client_factory=client_factory,
    )


def trash_message(
    message_id: str,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    return run_update(
        "trash",
        lambda updater: updater.trash(message_id),
        config=config,
        client_factory=client_factory,
    )


def move_message(
    message_id: str,
    *,
    source: str,
    destination: str,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    return run_update(
        "move",
        lambda updater: updater.move(message_id, source, destination),
        config=config,
        client_factory=client_factory,
    )


def add_labels(
    message_id: str,
    names: Sequence[str],
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    return run_update(
        "add-labels",
        lambda updater: updater.add_labels(message_id, names),
        config=config,
        client_factory=client_factory,
    )


def remove_labels(
    message_id: str,
    names: Sequence[str],
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> BatchResult:
    return run_update(
        "remove-labels",
        lambda updater: updater.remove_labels(message_id, names),
        config=config,
        client_factory=client_factory,
    )


def build_authorize_url(
    params: Mapping[str, object],
    *,
    config: NylasConfig | None = None,
) -> str:
    auth = HostedAuthentication(config=config or get_nylas_auth_config())
    return auth.authenticate_user(params)


def exchange_authorization_code(
    code: str,
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> TokenResponse:
    auth = HostedAuthentication(
        config=config or get_nylas_auth_config(), client_factory=client_factory
    )
    return auth.send_authorization_code(code)


def revoke_access_tokens(
    *,
    config: NylasConfig | None = None,
    client_factory: ClientFactory | None = None,
) -> dict[str, object]:
    auth = HostedAuthentication(config=config or get_nylas_config(), client_factory=client_factory)
    return auth.revoke_access_tokens()
