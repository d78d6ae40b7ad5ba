from .analysis_tools import (
    analyze_market_data,
    analyze_on_chain_data,
    analyze_social_sentiment,
    evaluate_opportunity,
)
from .farcaster_search import FarcasterContractSearchTool, FarcasterSearchTool
from .fetch_tools import coingecko_fetch, etherscan_fetch, farcaster_fetch
from .report_tools import generate_report
from .workflow_tools import request_additional_data, update_progress

__all__ = [
    "FarcasterSearchTool",
    "FarcasterContractSearchTool",
    "farcaster_fetch",
    "coingecko_fetch",
    "etherscan_fetch",
    "analyze_social_sentiment",
    "analyze_market_data",
    "analyze_on_chain_data",
    "evaluate_opportunity",
    "generate_report",
    "update_progress",
    "request_additional_data",
]
