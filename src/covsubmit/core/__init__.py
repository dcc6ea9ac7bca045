"""Core module exports."""

from covsubmit.core.errors import (
    ConfigError,
    CovSubmitError,
    ErrorCode,
    PreconditionError,
)
from covsubmit.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "CovSubmitError",
    "ConfigError",
    "ErrorCode",
    "PreconditionError",
    # Logging
    "configure_logging",
    "get_logger",
]
