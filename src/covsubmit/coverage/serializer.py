"""Codecov JSON body construction.

Wire structure (https://docs.codecov.com/reference/upload):

    {
      "coverage": {
        "path/to/file.py": [null, 1, 0, null, 0, 1],
        "path/to/other.py": [null, 0, 1, 1, null]
      }
    }

Index 0 is always null so that list index equals 1-based line number.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from covsubmit.coverage.models import FileCoverage


def to_json(fcs: Iterable[FileCoverage]) -> dict[str, Any]:
    """Build the upload body. Later records win on duplicate filenames."""
    cov: dict[str, list[int | None]] = {}
    for fc in fcs:
        cov[fc.filename] = [None, *fc.coverage]
    return {"coverage": cov}


def dumps(fcs: Iterable[FileCoverage]) -> str:
    return json.dumps(to_json(fcs))
