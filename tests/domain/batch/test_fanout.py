from __future__ import annotations

import pytest

from inboxpy.domain.batch import as_target_ids, build_requests
from inboxpy.domain.errors import ValidationError


def test_build_requests_creates_one_descriptor_per_id_in_order() -> None:
    requests = build_requests(["m3", "m1", "m2"], {"starred": True})

    assert [request.target_id for request in requests] == ["m3", "m1", "m2"]
    assert all(dict(request.fields) == {"starred": True} for request in requests)


def test_build_requests_gives_each_descriptor_its_own_fields() -> None:
    fields: dict[str, object] = {"unread": False}
    first, second = build_requests(["m1", "m2"], fields)

    fields["unread"] = True

    assert first.fields is not second.fields
    assert first.fields["unread"] is False
    with pytest.raises(TypeError):
        first.fields["unread"] = True  # type: ignore[index]


@pytest.mark.parametrize(
    "target_ids",
    [
        [],
        (),
        ["m1", ""],
        ["m1", "   "],
        ["m1", None],
        ["m1", "m1"],
        "m1",
    ],
)
def test_build_requests_rejects_malformed_ids(target_ids: object) -> None:
    with pytest.raises(ValidationError):
        build_requests(target_ids, {"starred": True})  # type: ignore[arg-type]


def test_as_target_ids_wraps_scalar() -> None:
    assert as_target_ids("m1") == ("m1",)
    assert as_target_ids(["m1", "m2"]) == ("m1", "m2")
