"""Batch execution defaults for message mutations."""

from __future__ import annotations

from dataclasses import dataclass

from inboxpy.domain.batch import DEFAULT_MAX_CONCURRENCY

from .env import positive_float_env_var, positive_int_env_var

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0


@dataclass(frozen=True, slots=True)
class BatchConfig:
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    request_timeout_seconds: float | None = DEFAULT_REQUEST_TIMEOUT_SECONDS


def get_batch_config() -> BatchConfig:
    return BatchConfig(
        max_concurrency=positive_int_env_var("NYLAS_MAX_CONCURRENCY", DEFAULT_MAX_CONCURRENCY),
        request_timeout_seconds=positive_float_env_var(
            "NYLAS_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
    )
