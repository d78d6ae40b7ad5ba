"""
Specialist agents of the contract analysis team.

Each factory returns a named tool-calling agent; the supervisor routes work
between them by name.
"""
from typing import List, Optional

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel

from llm_playground.utils.model_factory import create_demo_chat_model

from .prompts import (
    DATA_FETCHER_PROMPT,
    MARKET_ANALYSIS_PROMPT,
    ON_CHAIN_ANALYSIS_PROMPT,
    OPPORTUNITY_EVALUATION_PROMPT,
    REPORT_GENERATION_PROMPT,
    SOCIAL_ANALYSIS_PROMPT,
)
from .tools import (
    analyze_market_data,
    analyze_on_chain_data,
    analyze_social_sentiment,
    coingecko_fetch,
    etherscan_fetch,
    evaluate_opportunity,
    farcaster_fetch,
    generate_report,
    request_additional_data,
    update_progress,
)

DEFAULT_MODEL = "gpt-4o"


def _model(model: Optional[BaseChatModel]) -> BaseChatModel:
    return model or create_demo_chat_model("contract_analysis", default_model=DEFAULT_MODEL)


def create_data_fetcher_agent(model: Optional[BaseChatModel] = None):
    return create_agent(
        model=_model(model),
        tools=[farcaster_fetch, coingecko_fetch, etherscan_fetch, update_progress],
        system_prompt=DATA_FETCHER_PROMPT,
        name="data_fetcher_agent",
    )


def create_social_analysis_agent(model: Optional[BaseChatModel] = None):
    return create_agent(
        model=_model(model),
        tools=[analyze_social_sentiment, request_additional_data, update_progress],
        system_prompt=SOCIAL_ANALYSIS_PROMPT,
        name="social_analysis_agent",
    )


def create_market_analysis_agent(model: Optional[BaseChatModel] = None):
    return create_agent(
        model=_model(model),
        tools=[analyze_market_data],
        system_prompt=MARKET_ANALYSIS_PROMPT,
        name="market_analysis_agent",
    )


def create_on_chain_analysis_agent(model: Optional[BaseChatModel] = None):
    return create_agent(
        model=_model(model),
        tools=[analyze_on_chain_data],
        system_prompt=ON_CHAIN_ANALYSIS_PROMPT,
        name="on_chain_analysis_agent",
    )


def create_opportunity_evaluation_agent(model: Optional[BaseChatModel] = None):
    return create_agent(
        model=_model(model),
        tools=[evaluate_opportunity],
        system_prompt=OPPORTUNITY_EVALUATION_PROMPT,
        name="opportunity_evaluation_agent",
    )


def create_report_generation_agent(model: Optional[BaseChatModel] = None):
    return create_agent(
        model=_model(model),
        tools=[generate_report],
        system_prompt=REPORT_GENERATION_PROMPT,
        name="report_generation_agent",
    )


def create_contract_analysis_agents(model: Optional[BaseChatModel] = None) -> List:
    """All six specialists, in the order the supervisor uses them."""
    model = _model(model)
    return [
        create_data_fetcher_agent(model),
        create_social_analysis_agent(model),
        create_market_analysis_agent(model),
        create_on_chain_analysis_agent(model),
        create_opportunity_evaluation_agent(model),
        create_report_generation_agent(model),
    ]
