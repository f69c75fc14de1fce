from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from inboxpy.domain.errors import ResolutionError, ValidationError
from inboxpy.domain.smart_update import SmartUpdater
from inboxpy.domain.types import AccountModel, Failure, Success
from tests.support.fakes import FakeCatalog, FakeState, RecordingTransport

if TYPE_CHECKING:
    from inboxpy.domain.types import Category


def _updater(
    *,
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
    model: AccountModel = AccountModel.LABEL,
) -> SmartUpdater:
    return SmartUpdater(
        catalog=catalog,
        state=state,
        transport=transport,
        model=model,
        max_concurrency=2,
    )


@pytest.mark.parametrize(
    ("method", "fields"),
    [
        ("star", {"starred": True}),
        ("unstar", {"starred": False}),
        ("mark_as_read", {"unread": False}),
        ("mark_as_unread", {"unread": True}),
    ],
)
def test_field_updates_fan_out_per_message(
    method: str,
    fields: dict[str, object],
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(catalog=catalog, state=state, transport=transport)

    result = asyncio.run(getattr(updater, method)(["m1", "m2", "m3"]))

    assert list(result) == ["m1", "m2", "m3"]
    assert all(isinstance(outcome, Success) for outcome in result.values())
    assert [dict(request.fields) for request in transport.sent] == [fields] * 3
    assert catalog.calls == 0
    assert state.calls == []


def test_partial_failure_is_reported_per_message(
    catalog: FakeCatalog,
    state: FakeState,
) -> None:
    transport = RecordingTransport(fail_for={"m2"})
    updater = _updater(catalog=catalog, state=state, transport=transport)

    result = asyncio.run(updater.star(["m1", "m2", "m3"]))

    assert len(result) == 3
    assert isinstance(result["m1"], Success)
    assert isinstance(result["m2"], Failure)
    assert isinstance(result["m3"], Success)


def test_empty_id_list_fails_before_any_request(
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(catalog=catalog, state=state, transport=transport)

    with pytest.raises(ValidationError):
        asyncio.run(updater.star([]))

    assert transport.calls == 0


def test_blank_id_in_batch_fails_before_any_request(
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(catalog=catalog, state=state, transport=transport)

    with pytest.raises(ValidationError):
        asyncio.run(updater.mark_as_read(["m1", ""]))

    assert transport.calls == 0


def test_move_to_label_sends_sorted_label_ids(
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(catalog=catalog, state=state, transport=transport)

    asyncio.run(updater.move_to_label(["m1"], {"lbl-work", "lbl-inbox"}))

    assert transport.sent[0].fields["label_ids"] == ("lbl-inbox", "lbl-work")


def test_move_to_label_rejects_blank_label_id(
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(catalog=catalog, state=state, transport=transport)

    with pytest.raises(ValidationError):
        asyncio.run(updater.move_to_label(["m1"], ["lbl-work", ""]))
    assert transport.calls == 0


def test_move_to_folder_requires_folder_account(
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(catalog=catalog, state=state, transport=transport)

    with pytest.raises(ValidationError, match="folder account"):
        asyncio.run(updater.move_to_folder(["m1"], "fld-archive"))
    assert transport.calls == 0


def test_move_to_label_requires_label_account(
    folder_catalog: tuple[Category, ...],
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(
        catalog=FakeCatalog(categories=folder_catalog),
        state=state,
        transport=transport,
        model=AccountModel.FOLDER,
    )

    with pytest.raises(ValidationError, match="label account"):
        asyncio.run(updater.move_to_label(["m1"], ["lbl-work"]))
    with pytest.raises(ValidationError):
        asyncio.run(updater.add_labels("m1", ["Work"]))
    assert transport.calls == 0


def test_add_labels_keeps_current_labels(
    catalog: FakeCatalog,
    label_catalog: tuple[Category, ...],
    transport: RecordingTransport,
) -> None:
    inbox, _, _, work, _ = label_catalog
    state = FakeState(by_message={"m1": (inbox, work)})
    updater = _updater(catalog=catalog, state=state, transport=transport)

    result = asyncio.run(updater.add_labels("m1", ["Travel", "Missing"]))

    assert list(result) == ["m1"]
    assert state.calls == ["m1"]
    assert transport.sent[0].fields == {"label_ids": ("lbl-inbox", "lbl-travel", "lbl-work")}


def test_remove_labels_accepts_single_name(
    catalog: FakeCatalog,
    label_catalog: tuple[Category, ...],
    transport: RecordingTransport,
) -> None:
    inbox, _, _, work, _ = label_catalog
    state = FakeState(by_message={"m1": (inbox, work)})
    updater = _updater(catalog=catalog, state=state, transport=transport)

    asyncio.run(updater.remove_labels("m1", "Work"))

    assert transport.sent[0].fields == {"label_ids": ("lbl-inbox",)}


@pytest.mark.parametrize(
    ("operation", "expected"),
    [
        ("archive", ("lbl-work",)),
        ("unarchive", ("lbl-inbox", "lbl-work")),
        ("trash", ("lbl-trash", "lbl-work")),
    ],
)
def test_label_account_shortcuts(
    operation: str,
    expected: tuple[str, ...],
    catalog: FakeCatalog,
    label_catalog: tuple[Category, ...],
    transport: RecordingTransport,
) -> None:
    inbox, archive, _, work, _ = label_catalog
    current = (archive, work) if operation == "unarchive" else (inbox, work)
    state = FakeState(by_message={"m1": current})
    updater = _updater(catalog=catalog, state=state, transport=transport)

    asyncio.run(getattr(updater, operation)("m1"))

    assert transport.sent[0].fields == {"label_ids": expected}


def test_move_between_labels(
    catalog: FakeCatalog,
    label_catalog: tuple[Category, ...],
    transport: RecordingTransport,
) -> None:
    inbox, _, _, work, _ = label_catalog
    state = FakeState(by_message={"m1": (inbox, work)})
    updater = _updater(catalog=catalog, state=state, transport=transport)

    asyncio.run(updater.move("m1", "Work", "Travel"))

    assert transport.sent[0].fields == {"label_ids": ("lbl-inbox", "lbl-travel")}


@pytest.mark.parametrize(
    ("operation", "args", "folder_id"),
    [
        ("archive", (), "fld-archive"),
        ("unarchive", (), "fld-inbox"),
        ("trash", (), "fld-trash"),
        ("move", ("inbox", "Receipts"), "fld-receipts"),
    ],
)
def test_folder_account_moves_by_name(
    operation: str,
    args: tuple[str, ...],
    folder_id: str,
    folder_catalog: tuple[Category, ...],
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    catalog = FakeCatalog(categories=folder_catalog)
    updater = _updater(
        catalog=catalog, state=state, transport=transport, model=AccountModel.FOLDER
    )

    result = asyncio.run(getattr(updater, operation)("m1", *args))

    assert list(result) == ["m1"]
    assert catalog.calls == 1
    assert state.calls == []
    assert transport.sent[0].fields == {"folder_id": folder_id}


def test_folder_resolution_miss_raises_without_mutation(
    folder_catalog: tuple[Category, ...],
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(
        catalog=FakeCatalog(categories=folder_catalog),
        state=state,
        transport=transport,
        model=AccountModel.FOLDER,
    )

    with pytest.raises(ResolutionError):
        asyncio.run(updater.move("m1", "inbox", "Newsletters"))

    assert transport.calls == 0


def test_name_based_operation_rejects_blank_message_id(
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    updater = _updater(catalog=catalog, state=state, transport=transport)

    with pytest.raises(ValidationError):
        asyncio.run(updater.archive(""))

    assert catalog.calls == 0
    assert transport.calls == 0


def test_updater_rejects_invalid_concurrency(
    catalog: FakeCatalog,
    state: FakeState,
    transport: RecordingTransport,
) -> None:
    with pytest.raises(ValidationError):
        SmartUpdater(
            catalog=catalog,
            state=state,
            transport=transport,
            model=AccountModel.LABEL,
            max_concurrency=0,
        )
