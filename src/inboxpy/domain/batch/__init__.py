"""Fan-out, concurrent execution and aggregation of message mutations."""

from __future__ import annotations

from .aggregate import aggregate
from .executor import DEFAULT_MAX_CONCURRENCY, execute
from .fanout import as_target_ids, build_requests, validate_target_ids

__all__ = [
    "DEFAULT_MAX_CONCURRENCY",
    "aggregate",
    "as_target_ids",
    "build_requests",
    "execute",
    "validate_target_ids",
]
