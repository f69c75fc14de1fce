"""Pydantic models describing the Nylas API payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _none_to_blank(value: object) -> object:
    return "" if value is None else value


class NylasBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class CategoryPayload(NylasBaseModel):
    id: str
    object: str | None = None
    name: str = ""
    display_name: str = ""
    account_id: str | None = None

    _normalize_names = field_validator("name", "display_name", mode="before")(_none_to_blank)


class MessagePayload(NylasBaseModel):
    id: str
    object: str | None = None
    subject: str | None = None
    unread: bool | None = None
    starred: bool | None = None
    labels: list[CategoryPayload] = Field(default_factory=list)
    folder: CategoryPayload | None = None

    @field_validator("labels", mode="before")
    @classmethod
    def _null_labels(cls, value: object) -> object:
        return [] if value is None else value


class ErrorResponse(NylasBaseModel):
    type: str | None = None
    message: str


class TokenResponse(NylasBaseModel):
    access_token: str
    account_id: str | None = None
    email_address: str | None = None
    provider: str | None = None
    token_type: str | None = None
