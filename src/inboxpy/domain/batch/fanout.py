"""Expand one field update into one request per message."""

from __future__ import annotations

from collections.abc import Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from inboxpy.domain.errors import ValidationError
from inboxpy.domain.types import RequestDescriptor

if TYPE_CHECKING:
    from collections.abc import Mapping


def as_target_ids(value: str | Sequence[str]) -> tuple[str, ...]:
    """Accept a single message id or a sequence of them."""

    if isinstance(value, str):
        return (value,)
    return tuple(value)


def validate_target_ids(target_ids: Sequence[str]) -> tuple[str, ...]:
    if isinstance(target_ids, str) or not isinstance(target_ids, Sequence):
        raise ValidationError("Message ids must be given as a sequence of strings")
    if not target_ids:
        raise ValidationError("At least one message id is required")
    seen: set[str] = set()
    for index, target_id in enumerate(target_ids):
        if not isinstance(target_id, str) or not target_id.strip():
            raise ValidationError(f"Message id at position {index} must be a non-empty string")
        # results are keyed by id, a repeat would collapse two entries into one
        if target_id in seen:
            raise ValidationError(f"Message id {target_id!r} is listed more than once")
        seen.add(target_id)
    return tuple(target_ids)


def build_requests(
    target_ids: Sequence[str],
    fields: Mapping[str, object],
) -> tuple[RequestDescriptor, ...]:
    """Return one descriptor per id, in input order, each with its own copy of ``fields``.

    Raises ``ValidationError`` for an empty id list or blank ids; nothing is
    built in that case.
    """

    ids = validate_target_ids(target_ids)
    return tuple(
        RequestDescriptor(target_id=target_id, fields=MappingProxyType(dict(fields)))
        for target_id in ids
    )
