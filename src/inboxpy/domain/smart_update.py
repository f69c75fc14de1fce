"""Smart message updates: star, read state, labels and folders.

Field updates (star, read state, explicit label/folder ids) accept any number
of messages and fan out one request per message. Name-based operations work on
a single message: they look up the account's categories and, for label
accounts, the message's current labels before issuing one label update.
"""

from __future__ import annotations

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING

from .batch import DEFAULT_MAX_CONCURRENCY, aggregate, build_requests, execute, validate_target_ids
from .errors import ValidationError
from .reconciliation import reconcile, resolve_folder_id
from .types import AccountModel, MutationIntent

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping, Sequence

    from .ports import CategoryCatalogFetcher, CurrentStateFetcher, MutationTransport
    from .types import BatchResult

log = getLogger(__name__)

INBOX = "inbox"
ARCHIVE = "archive"
TRASH = "trash"


class SmartUpdater:
    """Turns message intents into batched mutation requests."""

    def __init__(
        self,
        *,
        catalog: CategoryCatalogFetcher,
        state: CurrentStateFetcher,
        transport: MutationTransport,
        model: AccountModel,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        request_timeout: float | None = None,
    ) -> None:
        if max_concurrency < 1:
            raise ValidationError(f"max_concurrency must be at least 1, got {max_concurrency}")
        self._catalog = catalog
        self._state = state
        self._transport = transport
        self._model = model
        self._max_concurrency = max_concurrency
        self._request_timeout = request_timeout

    @property
    def model(self) -> AccountModel:
        return self._model

    async def star(self, message_ids: Sequence[str]) -> BatchResult:
        return await self.update_fields(message_ids, {"starred": True})

    async def unstar(self, message_ids: Sequence[str]) -> BatchResult:
        return await self.update_fields(message_ids, {"starred": False})

    async def mark_as_read(self, message_ids: Sequence[str]) -> BatchResult:
        return await self.update_fields(message_ids, {"unread": False})

    async def mark_as_unread(self, message_ids: Sequence[str]) -> BatchResult:
        return await self.update_fields(message_ids, {"unread": True})

    async def move_to_folder(self, message_ids: Sequence[str], folder_id: str) -> BatchResult:
        self._require_model(AccountModel.FOLDER, "move_to_folder")
        if not isinstance(folder_id, str) or not folder_id.strip():
            raise ValidationError("Folder id must be a non-empty string")
        return await self.update_fields(message_ids, {self._model.category_field: folder_id})

    async def move_to_label(
        self,
        message_ids: Sequence[str],
        label_ids: Collection[str],
    ) -> BatchResult:
        """Replace the labels of every message with ``label_ids``.

        An empty collection is accepted and clears all labels.
        """

        self._require_model(AccountModel.LABEL, "move_to_label")
        if isinstance(label_ids, str):
            raise ValidationError("Label ids must be given as a collection of strings")
        for label_id in label_ids:
            if not isinstance(label_id, str) or not label_id.strip():
                raise ValidationError("Label ids must be non-empty strings")
        fields = {self._model.category_field: tuple(sorted(label_ids))}
        return await self.update_fields(message_ids, fields)

    async def update_fields(
        self,
        message_ids: Sequence[str],
        fields: Mapping[str, object],
    ) -> BatchResult:
        """Apply the same field update to every message, best effort."""

        requests = build_requests(message_ids, fields)
        log.debug("Dispatching %s update(s) of %s", len(requests), sorted(fields))
        outcomes = await execute(
            requests,
            self._transport,
            max_concurrency=self._max_concurrency,
            request_timeout=self._request_timeout,
        )
        return aggregate([request.target_id for request in requests], outcomes)

    async def add_labels(self, message_id: str, names: Collection[str]) -> BatchResult:
        self._require_model(AccountModel.LABEL, "add_labels")
        return await self.apply_intent(message_id, MutationIntent(to_add=_name_set(names)))

    async def remove_labels(self, message_id: str, names: Collection[str]) -> BatchResult:
        self._require_model(AccountModel.LABEL, "remove_labels")
        return await self.apply_intent(message_id, MutationIntent(to_remove=_name_set(names)))

    async def archive(self, message_id: str) -> BatchResult:
        if self._model is AccountModel.LABEL:
            return await self.apply_intent(message_id, MutationIntent.of(remove=(INBOX,)))
        return await self.move_to_folder_named(message_id, ARCHIVE)

    async def unarchive(self, message_id: str) -> BatchResult:
        if self._model is AccountModel.LABEL:
            return await self.apply_intent(
                message_id, MutationIntent.of(add=(INBOX,), remove=(ARCHIVE,))
            )
        return await self.move_to_folder_named(message_id, INBOX)

    async def trash(self, message_id: str) -> BatchResult:
        if self._model is AccountModel.LABEL:
            return await self.apply_intent(
                message_id, MutationIntent.of(add=(TRASH,), remove=(INBOX,))
            )
        return await self.move_to_folder_named(message_id, TRASH)

    async def move(self, message_id: str, source: str, destination: str) -> BatchResult:
        """Move a message from one label or folder to another, by name."""

        if self._model is AccountModel.LABEL:
            return await self.apply_intent(
                message_id, MutationIntent.of(add=(destination,), remove=(source,))
            )
        return await self.move_to_folder_named(message_id, destination)

    async def apply_intent(self, message_id: str, intent: MutationIntent) -> BatchResult:
        (message_id,) = validate_target_ids([message_id])
        self._require_model(AccountModel.LABEL, "apply_intent")
        catalog, current = await asyncio.gather(
            self._catalog.fetch_catalog(self._model),
            self._state.fetch_categories(message_id, self._model),
        )
        label_ids = reconcile(current, intent.to_add, intent.to_remove, catalog)
        log.info(
            "Updating labels of message %s: add=%s, remove=%s",
            message_id,
            sorted(intent.to_add),
            sorted(intent.to_remove),
        )
        return await self.move_to_label([message_id], label_ids)

    async def move_to_folder_named(self, message_id: str, folder_name: str) -> BatchResult:
        (message_id,) = validate_target_ids([message_id])
        self._require_model(AccountModel.FOLDER, "move_to_folder_named")
        catalog = await self._catalog.fetch_catalog(self._model)
        folder_id = resolve_folder_id(catalog, folder_name)
        log.info("Moving message %s to folder %s (%s)", message_id, folder_name, folder_id)
        return await self.move_to_folder([message_id], folder_id)

    def _require_model(self, expected: AccountModel, operation: str) -> None:
        if self._model is not expected:
            raise ValidationError(
                f"{operation} requires a {expected} account, this account uses {self._model}s"
            )


def _name_set(names: Collection[str]) -> frozenset[str]:
    if isinstance(names, str):
        return frozenset((names,))
    return frozenset(names)
