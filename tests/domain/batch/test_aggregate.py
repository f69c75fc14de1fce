from __future__ import annotations

import pytest

from inboxpy.domain.batch import aggregate
from inboxpy.domain.types import Failure, Success, failed, succeeded


def test_aggregate_zips_ids_with_outcomes_in_input_order() -> None:
    outcomes = (Success({"id": "b"}), Failure("HTTP 404: not found", status_code=404), Success())

    result = aggregate(["b", "a", "c"], outcomes)

    assert list(result) == ["b", "a", "c"]
    assert result["a"] == Failure("HTTP 404: not found", status_code=404)
    assert succeeded(result) == ["b", "c"]
    assert failed(result) == ["a"]


def test_aggregate_rejects_misaligned_sequences() -> None:
    with pytest.raises(ValueError, match="zip"):
        aggregate(["a", "b"], (Success(),))
