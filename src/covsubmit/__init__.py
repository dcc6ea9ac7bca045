"""covsubmit - upload line coverage to Codecov from CI or a local checkout."""

from covsubmit.coverage import FileCoverage, read_lcov, to_json
from covsubmit.submit import (
    UploadResult,
    set_defaults,
    submit,
    submit_generic,
    submit_local,
    submit_token,
)

__version__ = "0.1.0"

__all__ = [
    "FileCoverage",
    "UploadResult",
    "read_lcov",
    "set_defaults",
    "submit",
    "submit_generic",
    "submit_local",
    "submit_token",
    "to_json",
]
