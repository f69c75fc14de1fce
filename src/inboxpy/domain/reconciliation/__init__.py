"""Name resolution and label diffing."""

from __future__ import annotations

from .diff import reconcile
from .resolve import resolve_category_ids, resolve_folder_id

__all__ = ["reconcile", "resolve_category_ids", "resolve_folder_id"]
