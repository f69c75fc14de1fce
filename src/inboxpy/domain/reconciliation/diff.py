"""Target category computation for label-model accounts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .resolve import resolve_category_ids

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from inboxpy.domain.types import Category


def reconcile(
    current: Iterable[Category],
    to_add: Collection[str],
    to_remove: Collection[str],
    catalog: Iterable[Category],
) -> frozenset[str]:
    """Compute the label ids a message should carry after applying an intent.

    ``to_add`` is resolved against the full catalog while ``to_remove`` is only
    matched against the message's current categories, so removing a label the
    message does not have is a no-op. If a name is both added and removed and
    the message does not carry it yet, it ends up added.
    """

    add_ids = resolve_category_ids(catalog, to_add)
    kept_ids = {category.id for category in current if category.effective_name not in to_remove}
    return frozenset(kept_ids) | add_ids
