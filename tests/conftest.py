from __future__ import annotations

import pytest

from inboxpy.config import NylasConfig
from inboxpy.domain.types import AccountModel, Category
from tests.support.fakes import FakeCatalog, FakeState, RecordingTransport
from tests.support.http import FakeNylasApi


@pytest.fixture
def label_catalog() -> tuple[Category, ...]:
    return (
        Category(id="lbl-inbox", name="inbox"),
        Category(id="lbl-archive", name="archive"),
        Category(id="lbl-trash", name="trash"),
        Category(id="lbl-work", display_name="Work"),
        Category(id="lbl-travel", display_name="Travel"),
    )


@pytest.fixture
def folder_catalog() -> tuple[Category, ...]:
    return (
        Category(id="fld-inbox", name="inbox"),
        Category(id="fld-archive", name="archive"),
        Category(id="fld-trash", name="trash"),
        Category(id="fld-receipts", display_name="Receipts"),
    )


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def state() -> FakeState:
    return FakeState()


@pytest.fixture
def catalog(label_catalog: tuple[Category, ...]) -> FakeCatalog:
    return FakeCatalog(categories=label_catalog)


@pytest.fixture
def label_config() -> NylasConfig:
    return NylasConfig(api_token="api-token", access_token="access-token")


@pytest.fixture
def folder_config() -> NylasConfig:
    return NylasConfig(
        api_token="api-token",
        access_token="access-token",
        account_model=AccountModel.FOLDER,
    )


@pytest.fixture
def nylas_api() -> FakeNylasApi:
    return FakeNylasApi(
        labels=[
            {"id": "lbl-inbox", "object": "label", "name": "inbox", "display_name": "Inbox"},
            {"id": "lbl-archive", "object": "label", "name": "archive", "display_name": None},
            {"id": "lbl-trash", "object": "label", "name": "trash", "display_name": "Trash"},
            {"id": "lbl-work", "object": "label", "name": None, "display_name": "Work"},
            {"id": "lbl-travel", "object": "label", "name": "", "display_name": "Travel"},
        ],
        folders=[
            {"id": "fld-inbox", "object": "folder", "name": "inbox", "display_name": "Inbox"},
            {"id": "fld-archive", "object": "folder", "name": "archive", "display_name": ""},
            {"id": "fld-receipts", "object": "folder", "name": None, "display_name": "Receipts"},
        ],
        messages={
            "m1": {
                "id": "m1",
                "object": "message",
                "subject": "Flight itinerary",
                "unread": True,
                "starred": False,
                "labels": [
                    {"id": "lbl-inbox", "name": "inbox", "display_name": "Inbox"},
                    {"id": "lbl-work", "name": None, "display_name": "Work"},
                ],
                "folder": None,
            },
            "f1": {
                "id": "f1",
                "object": "message",
                "labels": None,
                "folder": {"id": "fld-inbox", "name": "inbox", "display_name": "Inbox"},
            },
        },
    )
