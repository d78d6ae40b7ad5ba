"""Unit tests for timestamped report files."""
import os
import re
from datetime import datetime

from ..reports import build_report_filename, write_markdown_report


class TestBuildReportFilename:

    def test_fixed_clock(self):
        now = datetime(2024, 3, 5, 14, 7, 9)
        assert build_report_filename("swarm_report", now) == "swarm_report_2024-03-05_14-07-09.md"

    def test_pattern(self):
        name = build_report_filename("contract_analysis_report", datetime(2025, 12, 31, 23, 59, 59))
        assert re.fullmatch(r"contract_analysis_report_\d{4}-\d{2}-\d{2}_\d{2}-\d{2}-\d{2}\.md", name)

    def test_date_and_time_from_same_instant(self):
        # Date and time must never straddle midnight
        name = build_report_filename("r", datetime(2024, 1, 1, 0, 0, 0))
        assert name == "r_2024-01-01_00-00-00.md"


class TestWriteMarkdownReport:

    def test_creates_directory_and_writes(self, tmp_path):
        reports_dir = tmp_path / "nested" / "reports"
        path = write_markdown_report(
            "# Title\n\nBody ✓",
            "swarm_report",
            reports_dir=str(reports_dir),
            now=datetime(2024, 3, 5, 14, 7, 9),
        )

        assert path == os.path.join(str(reports_dir), "swarm_report_2024-03-05_14-07-09.md")
        with open(path, encoding="utf-8") as f:
            assert f.read() == "# Title\n\nBody ✓"
