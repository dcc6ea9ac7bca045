"""Protocol constants for the Codecov upload API.

These are wire-level facts, not user-configurable. For configurable values,
see models.py.
"""

DEFAULT_CODECOV_URL = "https://codecov.io"
"""Service origin used when no codecov_url parameter is given."""

UPLOAD_PATH = "/upload/v2"
"""Upload endpoint path, appended to the base URL."""

# =============================================================================
# Control Parameters
# =============================================================================
# Consumed by the uploader itself, never sent in the query string.

CODECOV_URL_PARAM = "codecov_url"
DRY_RUN_PARAM = "dry_run"

CONTROL_PARAMS = frozenset({CODECOV_URL_PARAM, DRY_RUN_PARAM})

# =============================================================================
# Environment Variables
# =============================================================================

CODECOV_URL_ENV = "CODECOV_URL"
CODECOV_TOKEN_ENV = "CODECOV_TOKEN"
REPO_TOKEN_ENV = "REPO_TOKEN"
"""Deprecated fallback for CODECOV_TOKEN, honored by the local path only."""
