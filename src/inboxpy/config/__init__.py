"""Application configuration helpers."""

from __future__ import annotations

from .batch import BatchConfig, get_batch_config
from .env import require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .nylas import (
    NYLAS_SERVERS,
    NylasConfig,
    get_nylas_auth_config,
    get_nylas_config,
    parse_account_model,
)

__all__ = [
    "NYLAS_SERVERS",
    "BatchConfig",
    "ConfigurationError",
    "MissingConfigurationError",
    "NylasConfig",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "get_batch_config",
    "get_nylas_auth_config",
    "get_nylas_config",
    "parse_account_model",
    "require_env_var",
    "require_env_vars",
]
