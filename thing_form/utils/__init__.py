"""thing_form 공용 유틸리티."""

from .logging import (
    SessionLoggerAdapter,
    configure_logging,
    get_session_logger,
    log_to_file,
)

__all__ = [
    "SessionLoggerAdapter",
    "configure_logging",
    "get_session_logger",
    "log_to_file",
]
