"""Ports consumed by the message mutation orchestrator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from inboxpy.domain.types import AccountModel, Category, RequestDescriptor


@runtime_checkable
class CategoryCatalogFetcher(Protocol):
    """Return every label (or folder) available to the account."""

    async def fetch_catalog(self, model: AccountModel) -> Sequence[Category]: ...


@runtime_checkable
class CurrentStateFetcher(Protocol):
    """Return the categories a message currently belongs to."""

    async def fetch_categories(
        self,
        message_id: str,
        model: AccountModel,
    ) -> Sequence[Category]: ...


@runtime_checkable
class MutationTransport(Protocol):
    """Perform one mutation request.

    Implementations raise ``TransportError`` for connectivity problems,
    non-success responses and undecodable bodies.
    """

    async def send(self, request: RequestDescriptor) -> Mapping[str, object]: ...


__all__ = ["CategoryCatalogFetcher", "CurrentStateFetcher", "MutationTransport"]
