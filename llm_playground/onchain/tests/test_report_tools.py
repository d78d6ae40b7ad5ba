"""Unit tests for the contract analysis report."""
import os
from datetime import datetime
from unittest.mock import patch

from ..tools.report_tools import DISCLAIMER, format_contract_report, generate_report, save_contract_report

ADDRESS = "0x1234567890123456789012345678901234567890"
SECTIONS = {
    "social_analysis": "SOCIAL-SECTION-TEXT",
    "market_analysis": "MARKET-SECTION-TEXT",
    "on_chain_analysis": "ONCHAIN-SECTION-TEXT",
    "opportunity_evaluation": "OPPORTUNITY-SECTION-TEXT",
}
NOW = datetime(2024, 3, 5, 14, 7, 9)


class TestFormatContractReport:

    def test_sections_in_order(self):
        report = format_contract_report(ADDRESS, generated_at=NOW, **SECTIONS)

        markers = [
            "# Crypto Contract Analysis Report",
            ADDRESS,
            "2024-03-05 14:07:09",
            "## Social Analysis",
            "SOCIAL-SECTION-TEXT",
            "## Market Analysis",
            "MARKET-SECTION-TEXT",
            "## On-Chain Analysis",
            "ONCHAIN-SECTION-TEXT",
            "## Opportunity Evaluation",
            "OPPORTUNITY-SECTION-TEXT",
            DISCLAIMER,
        ]
        positions = [report.index(marker) for marker in markers]
        assert positions == sorted(positions)

    def test_sections_are_stripped(self):
        report = format_contract_report(
            ADDRESS,
            social_analysis="\n   indented social\n",
            market_analysis="m",
            on_chain_analysis="o",
            opportunity_evaluation="e",
            generated_at=NOW,
        )
        assert "## Social Analysis\n\nindented social\n\n## Market Analysis" in report


class TestSaveContractReport:

    def test_writes_timestamped_file(self, tmp_path):
        result = save_contract_report(ADDRESS, reports_dir=str(tmp_path), now=NOW, **SECTIONS)

        expected_path = os.path.join(str(tmp_path), "contract_analysis_report_2024-03-05_14-07-09.md")
        assert result.startswith(f"Report saved to {expected_path}\n\n# Crypto Contract Analysis Report")
        with open(expected_path, encoding="utf-8") as f:
            assert f.read() == result.split("\n\n", 1)[1]

    def test_tool_uses_reports_dir(self, tmp_path):
        with patch("llm_playground.config.common_settings.REPORTS_DIR", str(tmp_path)):
            result = generate_report.invoke({"contract_address": ADDRESS, **SECTIONS})

        files = os.listdir(tmp_path)
        assert len(files) == 1
        assert files[0].startswith("contract_analysis_report_")
        assert "OPPORTUNITY-SECTION-TEXT" in result
