"""Value types shared by the mutation orchestrator and its adapters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import ClassVar, Literal


class AccountModel(StrEnum):
    """How an account organises messages: many labels or exactly one folder."""

    LABEL = "label"
    FOLDER = "folder"

    @property
    def category_field(self) -> str:
        return "label_ids" if self is AccountModel.LABEL else "folder_id"


@dataclass(frozen=True, slots=True)
class Category:
    """A label or folder as returned by the remote service.

    Real records populate either ``name`` (system categories such as ``inbox``)
    or ``display_name`` (user-created ones), never both.
    """

    id: str
    name: str = ""
    display_name: str = ""

    @property
    def effective_name(self) -> str:
        return self.name if self.name else self.display_name


@dataclass(frozen=True, slots=True)
class MutationIntent:
    to_add: frozenset[str] = frozenset()
    to_remove: frozenset[str] = frozenset()

    @classmethod
    def of(cls, *, add: tuple[str, ...] = (), remove: tuple[str, ...] = ()) -> MutationIntent:
        return cls(to_add=frozenset(add), to_remove=frozenset(remove))


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """One dispatch-ready mutation for one message."""

    target_id: str
    fields: Mapping[str, object]


@dataclass(frozen=True, slots=True)
class Success:
    payload: Mapping[str, object] = field(default_factory=dict)
    ok: ClassVar[Literal[True]] = True


@dataclass(frozen=True, slots=True)
class Failure:
    error: str
    status_code: int | None = None
    ok: ClassVar[Literal[False]] = False


type Outcome = Success | Failure
type BatchResult = dict[str, Outcome]


def succeeded(result: BatchResult) -> list[str]:
    return [target_id for target_id, outcome in result.items() if outcome.ok]


def failed(result: BatchResult) -> list[str]:
    return [target_id for target_id, outcome in result.items() if not outcome.ok]
