"""Logging setup for the inboxpy command line and facade."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Configure the root logger for batch update output.

    Per-message failures are logged by ``inboxpy.domain.batch.executor`` at WARNING
    and batch summaries by ``inboxpy.app`` at INFO, so INFO shows one line per
    failed message plus a summary. ``force=True`` replaces existing handlers.
    """

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
