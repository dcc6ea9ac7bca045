"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (COVSUBMIT__SECTION__KEY)
3. YAML config (~/.config/covsubmit/config.yaml or an explicit path)
4. Built-in defaults (this file)

Environment Variable Format:
    COVSUBMIT__<SECTION>__<KEY>=<VALUE>

Examples:
    COVSUBMIT__LOGGING__LEVEL=DEBUG
    COVSUBMIT__UPLOAD__TIMEOUT_SEC=60

Upload parameters themselves (token, codecov_url) are not part of this
config; they come from keyword arguments and CODECOV_* variables.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        COVSUBMIT__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. The upload URI and server response are "
        "printed regardless of this setting.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class UploadConfig(BaseModel):
    """HTTP upload configuration.

    Env vars:
        COVSUBMIT__UPLOAD__TIMEOUT_SEC: Network timeout for the POST request
    """

    timeout_sec: float = Field(
        default=30.0,
        description="Timeout for the upload request. The request is attempted once; "
        "a timeout propagates to the caller.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v


class CovSubmitConfig(BaseModel):
    """Root configuration for covsubmit."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)
