"""Process-wide logger setup.

Every record carries the run id of the current process so CLI, API and UI
output can be told apart in a shared log.
"""
from __future__ import annotations
import logging
import sys
import uuid
from paytrack.config import settings

_RUN_ID = uuid.uuid4().hex[:8]


def get_run_id() -> str:
    """Short id identifying this process in log output."""
    return _RUN_ID


class _RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = _RUN_ID
        return True


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a stderr handler to the ``paytrack`` logger once."""
    root = logging.getLogger("paytrack")
    root.setLevel((level or settings.LOG_LEVEL).upper())
    if not any(getattr(h, "_paytrack", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(run_id)s] %(levelname)s %(name)s: %(message)s"
        ))
        handler.addFilter(_RunIdFilter())
        handler._paytrack = True
        root.addHandler(handler)
    return root


logger = configure_logging()
