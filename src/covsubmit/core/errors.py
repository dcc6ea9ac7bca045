"""covsubmit error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Precondition
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_MISSING_REQUIRED = 2003
    NO_COMPATIBLE_PLATFORM = 2010

    # Precondition (3xxx)
    TRAILING_SLASH_URL = 3001
    NO_PARAMETERS = 3002


@dataclass(frozen=True, slots=True)
class CovSubmitError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'NO_COMPATIBLE_PLATFORM')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CovSubmitError):
    """Configuration-related errors, including CI platform detection."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def missing_required(cls, field: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_MISSING_REQUIRED,
            message=f"Missing required environment variable: {field}",
            details={"field": field},
        )

    @classmethod
    def no_compatible_platform(cls) -> "ConfigError":
        return cls(
            code=ErrorCode.NO_COMPATIBLE_PLATFORM,
            message="No compatible CI platform detected. "
            "Run under AppVeyor, Travis or CircleCI, or use submit_local.",
        )


class PreconditionError(CovSubmitError):
    """Upload request is malformed; raised before any network I/O."""

    @classmethod
    def trailing_slash(cls, url: str) -> "PreconditionError":
        return cls(
            code=ErrorCode.TRAILING_SLASH_URL,
            message=f"the codecov_url should not end with a /, given url {url}",
            details={"url": url},
        )

    @classmethod
    def no_parameters(cls) -> "PreconditionError":
        return cls(
            code=ErrorCode.NO_PARAMETERS,
            message="At least one upload parameter is required",
        )
