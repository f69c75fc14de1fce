"""Translate Nylas payloads into domain categories."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inboxpy.domain.types import AccountModel, Category

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .schema import CategoryPayload, MessagePayload


def translate_category(payload: CategoryPayload) -> Category:
    return Category(id=payload.id, name=payload.name, display_name=payload.display_name)


def translate_categories(payloads: Iterable[CategoryPayload]) -> tuple[Category, ...]:
    return tuple(translate_category(payload) for payload in payloads)


def message_categories(message: MessagePayload, model: AccountModel) -> tuple[Category, ...]:
    """Return the labels of a message, or its folder as a one-element tuple."""

    if model is AccountModel.LABEL:
        return translate_categories(message.labels)
    if message.folder is None:
        return ()
    return (translate_category(message.folder),)
