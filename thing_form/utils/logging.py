"""Logging utilities for thing_form.

The form owns the terminal while it runs, so diagnostics never go to the
screen: they are written to a log file that lives for the whole process.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Union

from thing_form.errors import StartupError

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGER = "thing_form"


class SessionLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that prefixes messages with the session identifier."""

    def process(self, msg: str, kwargs):  # type: ignore[override]
        session = self.extra.get("session")
        if session:
            msg = f"[세션 {session}] {msg}"
        return msg, kwargs


def _level_value(level: Union[int, str]) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure the base logger for the thing_form package.

    Args:
        level: Logging level or level name to apply. Defaults to INFO.
    """

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(_level_value(level))
    package_logger.propagate = False

    logging.captureWarnings(True)


@contextmanager
def log_to_file(
    path: str, level: Union[int, str] = logging.DEBUG
) -> Iterator[logging.FileHandler]:
    """Attach a file handler to the package logger for the duration of the block.

    The handler is removed and closed on every exit path.

    Raises:
        StartupError: the log file cannot be opened.
    """

    try:
        handler = logging.FileHandler(path, mode="a", encoding="utf-8")
    except OSError as exc:
        raise StartupError(f"could not open file for debugging: {exc}") from exc

    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_DATE_FORMAT))
    configure_logging(level)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.addHandler(handler)
    try:
        yield handler
    finally:
        package_logger.removeHandler(handler)
        handler.close()


def get_session_logger(component: str, session_id: str) -> SessionLoggerAdapter:
    """Return a logger adapter scoped to a form session."""

    logger = logging.getLogger(f"{PACKAGE_LOGGER}.{component}")
    return SessionLoggerAdapter(logger, {"session": session_id})
