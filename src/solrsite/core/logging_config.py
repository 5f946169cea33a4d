"""Central logging configuration utilities.

A single composition-root driven `configure_logging` wires separate
stdout/stderr sinks and injects the site root id being worked on into all
log records. Adapters or domain code never mutate global logging; they only
emit via `LoggingPort` or standard module loggers.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from typing import Iterator, Optional
import contextvars

# Root page id of the site currently being resolved ("-" outside of a site)
site_root_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "site_root", default="-"
)

DEFAULT_FORMAT = (
    "[%(asctime)s] %(levelname)s %(name)s site=%(site_root)s: %(message)s"
)


def _coerce_level(level: int | str | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    key = str(level).upper().strip()
    return logging.getLevelNamesMapping().get(key, logging.INFO)


@contextlib.contextmanager
def site_root_context(root_page_id: int | str) -> Iterator[None]:
    """Tag all records emitted inside the block with ``root_page_id``."""
    token = site_root_var.set(str(root_page_id))
    try:
        yield
    finally:
        site_root_var.reset(token)


class _SiteRootFilter(logging.Filter):
    """Inject site root id from contextvar into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - simple
        record.site_root = site_root_var.get()
        return True


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover
        return record.levelno <= self.max_level


class _MinLevelFilter(logging.Filter):
    def __init__(self, min_level: int):
        super().__init__()
        self.min_level = min_level

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover
        return record.levelno >= self.min_level


def configure_logging(
    level: int | str | None = None,
    fmt: Optional[str] = None,
    quiet_sqlalchemy: bool = True,
) -> None:
    """Configure root logger with separate stdout/stderr sinks & site root id.

    Notes
    -----
    * Existing root handlers are removed so repeated calls do not duplicate output.
    * SQLAlchemy engine echo is kept at WARNING unless ``quiet_sqlalchemy`` is False.
    """
    numeric_level = _coerce_level(level)
    fmt = fmt or DEFAULT_FORMAT

    root = logging.getLogger()
    root.setLevel(numeric_level)

    for h in list(root.handlers):
        root.removeHandler(h)

    formatter = logging.Formatter(fmt)
    site_filter = _SiteRootFilter()

    # stdout handler for DEBUG/INFO
    stdout_handler = logging.StreamHandler(stream=sys.stdout)
    stdout_handler.setLevel(logging.DEBUG)
    stdout_handler.addFilter(_MaxLevelFilter(logging.INFO))
    stdout_handler.addFilter(site_filter)
    stdout_handler.setFormatter(formatter)

    # stderr handler for WARNING+
    stderr_handler = logging.StreamHandler(stream=sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.addFilter(_MinLevelFilter(logging.WARNING))
    stderr_handler.addFilter(site_filter)
    stderr_handler.setFormatter(formatter)

    root.addHandler(stdout_handler)
    root.addHandler(stderr_handler)

    if quiet_sqlalchemy:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logging.getLogger("solrsite").debug(
        "Logging configured level=%s quiet_sqlalchemy=%s", numeric_level, quiet_sqlalchemy
    )
