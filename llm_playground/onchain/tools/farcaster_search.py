"""Farcaster cast search tools backed by the Neynar API.

``FarcasterSearchTool`` returns the cleaned casts as JSON.
``FarcasterContractSearchTool`` narrows the query to contract discussions and
adds a keyword sentiment summary on top of the raw data.
"""
import json
import math
from typing import Any, List, Optional, Type

from langchain_core.tools import BaseTool
from pydantic import BaseModel

from llm_playground.utils.logger import logger

from ..neynar_client import NeynarClient
from ..schemas import CleanCast, NeynarCast, NeynarSearchResponse, SentimentBreakdown
from .schemas import FarcasterSearchInput

POSITIVE_KEYWORDS = ["bullish", "good", "great", "promising", "moon", "gem", "profit", "potential"]
NEGATIVE_KEYWORDS = ["scam", "rug", "ponzi", "bad", "avoid", "dump", "bearish", "risk"]

INFLUENCER_MIN_FOLLOWERS = 500
MAX_INFLUENCERS = 3
MAX_HIGHLIGHTS = 3
HIGHLIGHT_LENGTH = 50


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clean_casts(response: NeynarSearchResponse) -> List[CleanCast]:
    return [CleanCast.from_cast(cast) for cast in response.result.casts]


def summarize_sentiment(casts: List[CleanCast]) -> SentimentBreakdown:
    """
    Keyword sentiment over cast texts.

    A cast counts as positive when it mentions any positive keyword and as
    negative when it mentions any negative keyword; it can count as both.
    Neutral is whatever remains of the total.
    """
    total = len(casts)
    if total == 0:
        return SentimentBreakdown()

    positive = 0
    negative = 0
    for cast in casts:
        text = cast.text.lower()
        if any(keyword in text for keyword in POSITIVE_KEYWORDS):
            positive += 1
        if any(keyword in text for keyword in NEGATIVE_KEYWORDS):
            negative += 1
    neutral = total - positive - negative

    return SentimentBreakdown(
        positive=_round_half_up(positive / total * 100),
        neutral=_round_half_up(neutral / total * 100),
        negative=_round_half_up(negative / total * 100),
    )


def key_influencers(casts: List[NeynarCast]) -> str:
    """First three authors with more than 500 followers, as ``@name`` handles."""
    handles = [
        f"@{cast.author.display_name}"
        for cast in casts
        if cast.author.follower_count and cast.author.follower_count > INFLUENCER_MIN_FOLLOWERS
    ][:MAX_INFLUENCERS]
    return ", ".join(handles) or "None identified"


def cast_highlights(casts: List[CleanCast]) -> str:
    return "; ".join(f'"{cast.text[:HIGHLIGHT_LENGTH]}..."' for cast in casts[:MAX_HIGHLIGHTS])


def format_contract_summary(response: NeynarSearchResponse) -> str:
    casts = clean_casts(response)
    sentiment = summarize_sentiment(casts)

    raw = {
        "casts": [cast.model_dump() for cast in casts],
        "count": len(casts),
        "sentiment": sentiment.model_dump(),
    }
    lines = [
        "Farcaster data summary:",
        f"- {len(casts)} mentions found",
        f"- Sentiment: {sentiment.positive}% positive, {sentiment.neutral}% neutral, "
        f"{sentiment.negative}% negative",
        f"- Key influencers discussing: {key_influencers(response.result.casts)}",
        f"- Recent cast highlights: {cast_highlights(casts)}",
        "",
        f"Raw data: {json.dumps(raw)}",
    ]
    return "\n".join(lines)


class FarcasterSearchTool(BaseTool):
    """Search Farcaster casts and return them as cleaned JSON.

    Raises ConfigurationError on construction when NEYNAR_API_KEY is not set.
    """

    name: str = "farcaster_search"
    description: str = (
        "Search for Farcaster casts related to a specific query or token. "
        "Use this to find conversations about specific blockchain tokens or addresses."
    )
    args_schema: Type[BaseModel] = FarcasterSearchInput
    client: Any = None

    def __init__(self, api_key: Optional[str] = None, client: Optional[NeynarClient] = None, **kwargs: Any):
        super().__init__(client=client or NeynarClient(api_key=api_key), **kwargs)

    def _build_query(self, query: str) -> str:
        return query

    def _format(self, response: NeynarSearchResponse) -> str:
        casts = clean_casts(response)
        return json.dumps({"casts": [cast.model_dump() for cast in casts], "count": len(casts)})

    def _run(self, query: str, **kwargs: Any) -> str:
        try:
            logger.info(f"[Farcaster] Running {self.name} with query: {query}")
            response = self.client.search_casts(self._build_query(query))
            return self._format(response)
        except Exception as e:
            logger.error(f"[Farcaster] {self.name} error: {e}")
            return f"Error searching Farcaster: {e}"


class FarcasterContractSearchTool(FarcasterSearchTool):
    """Farcaster search scoped to a contract, with a keyword sentiment summary."""

    name: str = "farcaster_search"
    description: str = (
        "Search for Farcaster casts related to a specific Ethereum contract address. "
        "Use this to find conversations about specific blockchain tokens or contracts."
    )

    def _build_query(self, query: str) -> str:
        return f"ethereum contract {query}"

    def _format(self, response: NeynarSearchResponse) -> str:
        return format_contract_summary(response)
