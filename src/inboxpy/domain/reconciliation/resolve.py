"""Category name to identifier resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from inboxpy.domain.errors import ResolutionError

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from inboxpy.domain.types import Category


def resolve_category_ids(catalog: Iterable[Category], names: Collection[str]) -> frozenset[str]:
    """Return ids of catalog entries whose effective name is in ``names``.

    Matching is exact and case-sensitive. ``display_name`` is only consulted
    when ``name`` is empty. Unknown names are ignored.
    """

    if not names:
        return frozenset()
    return frozenset(category.id for category in catalog if category.effective_name in names)


def resolve_folder_id(catalog: Iterable[Category], folder_name: str) -> str:
    """Return the id of the first folder whose effective name is ``folder_name``.

    User-created folders only carry a ``display_name``, so the same fallback as
    :func:`resolve_category_ids` applies.
    """

    for category in catalog:
        if category.effective_name == folder_name:
            return category.id
    raise ResolutionError(f"No folder named {folder_name!r}", name=folder_name)
