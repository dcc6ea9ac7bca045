"""LCOV tracefile reader.

Only line records are relevant to the upload body:
- SF:<source file path>
- DA:<line>,<hit count>[,<checksum>]
- end_of_record

Other records (BRDA, FN, FNDA, LF, LH, ...) are skipped.

Used by: pytest-cov, cargo-llvm-cov, gcov, Coverage.jl (LCOV.writefile)
"""

import contextlib
from pathlib import Path

from covsubmit.core.logging import get_logger
from covsubmit.coverage.models import CoverageParseError, FileCoverage

log = get_logger(__name__)


def _to_line_sequence(lines: dict[int, int]) -> tuple[int | None, ...]:
    if not lines:
        return ()
    return tuple(lines.get(n) for n in range(1, max(lines) + 1))


def read_lcov(path: Path, *, base_path: Path | None = None) -> list[FileCoverage]:
    """Read an LCOV file into FileCoverage records, in file order.

    Args:
        path: LCOV tracefile.
        base_path: If given, SF paths under it are made relative to it.
                   Paths outside it are kept as-is.

    Raises:
        CoverageParseError: If the file is missing or unreadable.
    """
    if not path.exists():
        raise CoverageParseError(f"LCOV file not found: {path}")

    try:
        content = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise CoverageParseError(f"Failed to read LCOV file: {e}") from e

    records: list[FileCoverage] = []
    current_file: str | None = None
    lines: dict[int, int] = {}

    for line in content.splitlines():
        line = line.strip()
        if not line:
            continue

        if line.startswith("SF:"):
            current_file = line[3:]
            if base_path:
                with contextlib.suppress(ValueError):
                    current_file = str(Path(current_file).relative_to(base_path))
            lines = {}

        elif line.startswith("DA:"):
            if current_file is None:
                continue
            parts = line[3:].split(",")
            if len(parts) >= 2:
                try:
                    line_num = int(parts[0])
                    hits_str = parts[1]
                    # Some tools write '-' for zero
                    hits = 0 if hits_str == "-" else int(hits_str)
                except ValueError:
                    log.debug("lcov_bad_line_record", path=str(path), record=line)
                    continue
                if line_num >= 1:
                    lines[line_num] = hits

        elif line == "end_of_record":
            if current_file is not None:
                records.append(FileCoverage(current_file, _to_line_sequence(lines)))
            current_file = None
            lines = {}

    # File without trailing end_of_record
    if current_file is not None:
        records.append(FileCoverage(current_file, _to_line_sequence(lines)))

    log.debug("lcov_read", path=str(path), files=len(records))
    return records
