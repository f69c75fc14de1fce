"""Correlate outcomes back to the message ids that produced them."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from inboxpy.domain.types import BatchResult, Outcome


def aggregate(target_ids: Sequence[str], outcomes: Sequence[Outcome]) -> BatchResult:
    return dict(zip(target_ids, outcomes, strict=True))
