"""Tests for the LCOV reader."""

from __future__ import annotations

from pathlib import Path

import pytest

from covsubmit.coverage.lcov import read_lcov
from covsubmit.coverage.models import CoverageParseError, FileCoverage


class TestReadLcov:
    """read_lcov() tests."""

    def test_reads_line_records(self, tmp_path: Path) -> None:
        lcov = tmp_path / "lcov.info"
        lcov.write_text(
            "TN:\n"
            "SF:src/Foo.jl\n"
            "DA:1,1\n"
            "DA:2,0\n"
            "DA:4,3\n"
            "LF:3\n"
            "LH:2\n"
            "end_of_record\n"
        )

        assert read_lcov(lcov) == [FileCoverage("src/Foo.jl", (1, 0, None, 3))]

    def test_multiple_files_keep_order(self, tmp_path: Path) -> None:
        lcov = tmp_path / "lcov.info"
        lcov.write_text(
            "SF:b.py\nDA:1,1\nend_of_record\n"
            "SF:a.py\nDA:2,5\nend_of_record\n"
        )

        records = read_lcov(lcov)

        assert [r.filename for r in records] == ["b.py", "a.py"]
        assert records[1].coverage == (None, 5)

    def test_dash_hits_count_as_zero(self, tmp_path: Path) -> None:
        lcov = tmp_path / "lcov.info"
        lcov.write_text("SF:a.py\nDA:1,-\nend_of_record\n")

        assert read_lcov(lcov)[0].coverage == (0,)

    def test_checksum_field_ignored(self, tmp_path: Path) -> None:
        lcov = tmp_path / "lcov.info"
        lcov.write_text("SF:a.py\nDA:1,4,abcdef\nend_of_record\n")

        assert read_lcov(lcov)[0].coverage == (4,)

    def test_malformed_and_branch_records_skipped(self, tmp_path: Path) -> None:
        lcov = tmp_path / "lcov.info"
        lcov.write_text(
            "DA:1,1\n"  # before any SF
            "SF:a.py\n"
            "DA:x,1\n"
            "BRDA:1,0,0,1\n"
            "FN:1,f\n"
            "FNDA:1,f\n"
            "DA:2,1\n"
            "end_of_record\n"
        )

        assert read_lcov(lcov) == [FileCoverage("a.py", (None, 1))]

    def test_missing_end_of_record(self, tmp_path: Path) -> None:
        lcov = tmp_path / "lcov.info"
        lcov.write_text("SF:a.py\nDA:1,1\n")

        assert read_lcov(lcov) == [FileCoverage("a.py", (1,))]

    def test_file_without_line_data(self, tmp_path: Path) -> None:
        lcov = tmp_path / "lcov.info"
        lcov.write_text("SF:empty.py\nend_of_record\n")

        assert read_lcov(lcov) == [FileCoverage("empty.py", ())]

    def test_base_path_makes_paths_relative(self, tmp_path: Path) -> None:
        lcov = tmp_path / "lcov.info"
        inside = tmp_path / "src" / "a.py"
        lcov.write_text(f"SF:{inside}\nDA:1,1\nend_of_record\nSF:/elsewhere/b.py\nend_of_record\n")

        records = read_lcov(lcov, base_path=tmp_path)

        assert records[0].filename == str(Path("src") / "a.py")
        assert records[1].filename == "/elsewhere/b.py"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CoverageParseError, match="not found"):
            read_lcov(tmp_path / "missing.info")
