"""Markdown report for a finished contract analysis."""
from datetime import datetime
from typing import Optional

from langchain_core.tools import tool

from llm_playground.utils.reports import write_markdown_report

from .schemas import GenerateReportInput

REPORT_PREFIX = "contract_analysis_report"

DISCLAIMER = (
    "*Disclaimer: This report was generated automatically from social, market and on-chain data. "
    "It is for informational purposes only and is not financial advice. "
    "Always do your own research before investing.*"
)


def format_contract_report(
    contract_address: str,
    social_analysis: str,
    market_analysis: str,
    on_chain_analysis: str,
    opportunity_evaluation: str,
    generated_at: datetime,
) -> str:
    """Assemble the report sections in their fixed order."""
    return "\n".join([
        "# Crypto Contract Analysis Report",
        "",
        f"**Contract Address:** `{contract_address}`",
        "",
        f"**Generated:** {generated_at.strftime('%Y-%m-%d %H:%M:%S')}",
        "",
        "## Social Analysis",
        "",
        social_analysis.strip(),
        "",
        "## Market Analysis",
        "",
        market_analysis.strip(),
        "",
        "## On-Chain Analysis",
        "",
        on_chain_analysis.strip(),
        "",
        "## Opportunity Evaluation",
        "",
        opportunity_evaluation.strip(),
        "",
        "---",
        "",
        DISCLAIMER,
        "",
    ])


def save_contract_report(
    contract_address: str,
    social_analysis: str,
    market_analysis: str,
    on_chain_analysis: str,
    opportunity_evaluation: str,
    reports_dir: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """Write the report and return ``Report saved to <path>`` followed by the report."""
    now = now or datetime.now()
    report = format_contract_report(
        contract_address,
        social_analysis,
        market_analysis,
        on_chain_analysis,
        opportunity_evaluation,
        generated_at=now,
    )
    path = write_markdown_report(report, REPORT_PREFIX, reports_dir=reports_dir, now=now)
    return f"Report saved to {path}\n\n{report}"


@tool(
    name_or_callable="generate_report",
    description="Generate the final markdown report from all analysis sections and save it to disk.",
    args_schema=GenerateReportInput,
)
def generate_report(
    contract_address: str,
    social_analysis: str,
    market_analysis: str,
    on_chain_analysis: str,
    opportunity_evaluation: str,
) -> str:
    return save_contract_report(
        contract_address,
        social_analysis,
        market_analysis,
        on_chain_analysis,
        opportunity_evaluation,
    )
