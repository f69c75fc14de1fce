"""Concurrent dispatch of independent mutation requests."""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from inboxpy.domain.errors import TransportError, ValidationError
from inboxpy.domain.types import Failure, Outcome, Success

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inboxpy.domain.ports import MutationTransport
    from inboxpy.domain.types import RequestDescriptor

log = getLogger(__name__)

DEFAULT_MAX_CONCURRENCY = 8


async def execute(
    requests: Sequence[RequestDescriptor],
    transport: MutationTransport,
    *,
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
    request_timeout: float | None = None,
) -> tuple[Outcome, ...]:
    """Send every request and return their outcomes in input order.

    At most ``max_concurrency`` requests are in flight; the rest wait in
    submission order. A failing request only produces a ``Failure`` for its own
    slot. ``request_timeout`` applies to each request separately.
    """

    if max_concurrency < 1:
        raise ValidationError(f"max_concurrency must be at least 1, got {max_concurrency}")
    if not requests:
        return ()

    slots = asyncio.Semaphore(max_concurrency)

    async def run(request: RequestDescriptor) -> Outcome:
        async with slots:
            return await _dispatch(request, transport, request_timeout)

    async with asyncio.TaskGroup() as group:
        tasks = [group.create_task(run(request)) for request in requests]

    outcomes = tuple(task.result() for task in tasks)
    failures = sum(1 for outcome in outcomes if not outcome.ok)
    log.debug("Batch finished: requests=%s, failures=%s", len(outcomes), failures)
    return outcomes


async def _dispatch(
    request: RequestDescriptor,
    transport: MutationTransport,
    request_timeout: float | None,
) -> Outcome:
    try:
        async with asyncio.timeout(request_timeout):
            payload = await transport.send(request)
    except TransportError as exc:
        log.warning("Mutation of message %s failed: %s", request.target_id, exc)
        return Failure(error=str(exc), status_code=exc.status_code)
    except TimeoutError:
        log.warning("Mutation of message %s timed out after %ss", request.target_id, request_timeout)
        return Failure(error=f"Request timed out after {request_timeout}s")
    except Exception as exc:
        log.exception("Unexpected error while mutating message %s", request.target_id)
        return Failure(error=f"{type(exc).__name__}: {exc}")
    return Success(payload=payload)
