"""Process-wide logging setup.

Every record carries a short run id so that log lines from one CLI invocation
or one Streamlit server process can be told apart.
"""
from __future__ import annotations

import logging
import sys
import uuid

_RUN_ID = uuid.uuid4().hex[:8]

logger = logging.getLogger("pentopublic")


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is at emit time (test runners swap it)."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


class _RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID
        return True


def get_run_id() -> str:
    """Return the id stamped on every log record of this process."""
    return _RUN_ID


def setup_logging(level: str | None = None) -> None:
    """Attach a stderr handler to the package logger (idempotent)."""
    if level is None:
        from pentopublic.config import settings
        level = settings.LOG_LEVEL

    logger.setLevel(level.upper())
    if any(isinstance(h, _StderrHandler) for h in logger.handlers):
        return

    handler = _StderrHandler()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s %(levelname)-7s [%(run_id)s] %(name)s: %(message)s",
    ))
    handler.addFilter(_RunIdFilter())
    logger.addHandler(handler)
