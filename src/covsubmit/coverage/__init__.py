"""Coverage records, LCOV input and upload body serialization."""

from covsubmit.coverage.lcov import read_lcov
from covsubmit.coverage.models import CoverageParseError, FileCoverage
from covsubmit.coverage.serializer import dumps, to_json

__all__ = [
    "CoverageParseError",
    "FileCoverage",
    "dumps",
    "read_lcov",
    "to_json",
]
