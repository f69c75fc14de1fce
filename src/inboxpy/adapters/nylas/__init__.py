"""Public interface for the Nylas adapter."""

from __future__ import annotations

from .auth import AuthorizeParams, HostedAuthentication
from .client import NylasAPIError, NylasClient
from .schema import CategoryPayload, MessagePayload, TokenResponse
from .translator import message_categories, translate_category

__all__ = [
    "AuthorizeParams",
    "CategoryPayload",
    "HostedAuthentication",
    "MessagePayload",
    "NylasAPIError",
    "NylasClient",
    "TokenResponse",
    "message_categories",
    "translate_category",
]
