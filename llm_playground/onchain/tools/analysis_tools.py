"""Analysis tools for the contract analysis team.

These return fixed illustrative analyses; the agents that call them write the
actual narrative.
"""
import textwrap

from langchain_core.tools import tool

from .schemas import EvaluateOpportunityInput, MarketDataInput, OnChainDataInput, SocialDataInput

SOCIAL_SENTIMENT_ANALYSIS = textwrap.dedent("""\
    Social Sentiment Analysis:
    - Overall sentiment is strongly positive with 78% positive mentions
    - Notable increase in discussion volume (3.2x) indicates growing interest
    - Engagement from established influencers suggests credibility
    - Key positive themes: innovative tokenomics, strong community
    - No significant red flags in community discussions
    - Recommendation: Social signals are POSITIVE""")

MARKET_ANALYSIS = textwrap.dedent("""\
    Market Analysis:
    - Price performance is strong (+45.7% in 7 days)
    - Market cap of $4.58M indicates early-stage but established project
    - Healthy trading volume relative to market cap (27% ratio)
    - Liquidity is adequate for current market size
    - Price appreciation pattern appears sustainable rather than parabolic
    - ROI since launch is 118% in just 14 days
    - Recommendation: Market signals are POSITIVE""")

ON_CHAIN_ANALYSIS = textwrap.dedent("""\
    On-Chain Analysis:
    - Contract is verified, increasing transparency and trustworthiness
    - Distribution of holders (1,459) is healthy for a 2-week old project
    - Top 10 wallet concentration (45.3%) is moderate but not concerning
    - Transaction activity indicates actual use rather than speculation only
    - Creator address has good reputation based on previous projects
    - No suspicious token movements detected
    - Recommendation: On-chain signals are POSITIVE""")

OPPORTUNITY_EVALUATION = textwrap.dedent("""\
    Opportunity Evaluation:

    After reviewing all available data and analysis:

    - Social sentiment is positive with strong community engagement
    - Market performance shows healthy growth without excessive volatility
    - On-chain metrics indicate legitimate activity and reasonable distribution

    OVERALL ASSESSMENT: This appears to be a GOOD opportunity with a favorable risk/reward ratio.

    Key strengths:
    - Verified contract with transparent operations
    - Growing community with positive sentiment
    - Sustainable price growth rather than pump-and-dump pattern

    Potential risks:
    - Still an early-stage project with inherent volatility risk
    - Monitor top wallet concentration for potential large sell-offs

    Recommendation: Consider allocating a moderate position with defined stop-loss.""")


@tool(
    name_or_callable="analyze_social_sentiment",
    description="Analyze social data to determine sentiment and community interest.",
    args_schema=SocialDataInput,
)
def analyze_social_sentiment(social_data: str) -> str:
    return SOCIAL_SENTIMENT_ANALYSIS


@tool(
    name_or_callable="analyze_market_data",
    description="Analyze market data to evaluate price performance and metrics.",
    args_schema=MarketDataInput,
)
def analyze_market_data(market_data: str) -> str:
    return MARKET_ANALYSIS


@tool(
    name_or_callable="analyze_on_chain_data",
    description="Analyze on-chain data to evaluate contract health and activity.",
    args_schema=OnChainDataInput,
)
def analyze_on_chain_data(on_chain_data: str) -> str:
    return ON_CHAIN_ANALYSIS


@tool(
    name_or_callable="evaluate_opportunity",
    description="Evaluate all analysis to determine if this is a good opportunity.",
    args_schema=EvaluateOpportunityInput,
)
def evaluate_opportunity(social_analysis: str, market_analysis: str, on_chain_analysis: str) -> str:
    return OPPORTUNITY_EVALUATION
