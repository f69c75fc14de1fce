"""Errors raised while reading Nylas and batch settings from the environment."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """A Nylas setting is present but unusable, e.g. an unknown region or account model."""


class MissingConfigurationError(ConfigurationError):
    """A required ``NYLAS_*`` variable is unset or blank."""
