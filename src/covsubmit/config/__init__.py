"""Config module exports."""

from covsubmit.config.loader import load_config
from covsubmit.config.models import (
    CovSubmitConfig,
    LoggingConfig,
    LogOutputConfig,
    UploadConfig,
)

__all__ = [
    "load_config",
    "CovSubmitConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "UploadConfig",
]
