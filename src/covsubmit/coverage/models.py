"""Coverage records handed to the uploader.

Line-sequence model: one slot per source line, starting at line 1. A slot is
None for non-executable lines and a hit count otherwise.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


class CoverageParseError(Exception):
    """Error reading coverage data."""

    pass


@dataclass(frozen=True, slots=True)
class FileCoverage:
    """Coverage data for a single file."""

    filename: str  # used verbatim as the key in the upload body
    coverage: Sequence[int | None]
