"""Tests for error types and codes."""

import pytest

from covsubmit.core.errors import (
    ConfigError,
    CovSubmitError,
    ErrorCode,
    PreconditionError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_MISSING_REQUIRED, 2000),
            (ErrorCode.NO_COMPATIBLE_PLATFORM, 2000),
            (ErrorCode.TRAILING_SLASH_URL, 3000),
            (ErrorCode.NO_PARAMETERS, 3000),
        ],
    )
    def test_codes_in_designated_range(self, code: ErrorCode, expected_range: int) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestCovSubmitError:
    """Base error behavior tests."""

    def test_to_dict_serializes_all_fields(self) -> None:
        error = CovSubmitError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            retryable=True,
            details={"key": "value"},
        )

        assert error.to_dict() == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "retryable": True,
            "details": {"key": "value"},
        }

    def test_str_includes_code_and_name(self) -> None:
        error = CovSubmitError(code=ErrorCode.NO_PARAMETERS, message="nothing")
        assert str(error) == "[3002] NO_PARAMETERS: nothing"

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(CovSubmitError) as exc_info:
            raise ConfigError.no_compatible_platform()
        assert exc_info.value.code == ErrorCode.NO_COMPATIBLE_PLATFORM


class TestConfigError:
    """ConfigError factory tests."""

    def test_missing_required_names_variable(self) -> None:
        error = ConfigError.missing_required("TRAVIS_BRANCH")
        assert error.code == ErrorCode.CONFIG_MISSING_REQUIRED
        assert "TRAVIS_BRANCH" in error.message
        assert error.details == {"field": "TRAVIS_BRANCH"}

    def test_no_compatible_platform_is_not_retryable(self) -> None:
        error = ConfigError.no_compatible_platform()
        assert error.retryable is False
        assert "No compatible CI platform detected" in error.message

    def test_invalid_value_stringifies_value(self) -> None:
        error = ConfigError.invalid_value("upload.timeout_sec", -1, "must be positive")
        assert error.details["value"] == "-1"


class TestPreconditionError:
    """PreconditionError factory tests."""

    def test_trailing_slash_mentions_url(self) -> None:
        error = PreconditionError.trailing_slash("https://codecov.io/")
        assert error.code == ErrorCode.TRAILING_SLASH_URL
        assert "https://codecov.io/" in error.message

    def test_no_parameters(self) -> None:
        error = PreconditionError.no_parameters()
        assert error.code == ErrorCode.NO_PARAMETERS
        assert isinstance(error, CovSubmitError)
