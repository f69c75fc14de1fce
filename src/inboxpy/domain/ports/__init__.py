"""Domain port definitions for adapters."""

from __future__ import annotations

from .mutation import CategoryCatalogFetcher, CurrentStateFetcher, MutationTransport

__all__ = ["CategoryCatalogFetcher", "CurrentStateFetcher", "MutationTransport"]
