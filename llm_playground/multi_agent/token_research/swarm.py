"""
Token research swarm.

A ``supervisor`` delegates to a ``market_researcher`` (Tavily) and a
``social_analyst`` (Farcaster), collects both answers and writes the final
response to a timestamped markdown report.
"""
import uuid
from datetime import datetime
from typing import Any, List, Optional, Sequence

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_core.tools import BaseTool
from langchain_tavily import TavilySearch
from langgraph_swarm import create_handoff_tool, create_swarm

from llm_playground.onchain.tools import FarcasterSearchTool
from llm_playground.utils.checkpointer import new_checkpointer
from llm_playground.utils.langsmith import create_thread_config
from llm_playground.utils.logger import logger
from llm_playground.utils.messages import last_message_content
from llm_playground.utils.model_factory import create_demo_chat_model
from llm_playground.utils.reports import write_markdown_report

from .prompts import MARKET_RESEARCHER_PROMPT, SOCIAL_ANALYST_PROMPT, SUPERVISOR_PROMPT

DEFAULT_MODEL = "gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.2
DEFAULT_TOKEN = "0xf1fc9580784335b2613c1392a530c1aa2a69ba3d"
MARKET_SEARCH_MAX_RESULTS = 5
REPORT_PREFIX = "swarm_report"

SUPERVISOR = "supervisor"
MARKET_RESEARCHER = "market_researcher"
SOCIAL_ANALYST = "social_analyst"


def create_research_agents(
    model: BaseChatModel,
    market_tools: Sequence[BaseTool],
    social_tools: Sequence[BaseTool],
) -> List:
    transfer_to_market_researcher = create_handoff_tool(
        agent_name=MARKET_RESEARCHER,
        description="Transfer to the market research agent that can analyze token fundamentals and market data.",
    )
    transfer_to_social_analyst = create_handoff_tool(
        agent_name=SOCIAL_ANALYST,
        description="Transfer to the social analyst agent that can analyze Farcaster activity and sentiment.",
    )
    transfer_to_supervisor = create_handoff_tool(
        agent_name=SUPERVISOR,
        description="Transfer back to the supervisor to compile the final report.",
    )

    market_researcher = create_agent(
        model=model,
        tools=[*market_tools, transfer_to_supervisor],
        system_prompt=MARKET_RESEARCHER_PROMPT,
        name=MARKET_RESEARCHER,
    )
    social_analyst = create_agent(
        model=model,
        tools=[*social_tools, transfer_to_supervisor],
        system_prompt=SOCIAL_ANALYST_PROMPT,
        name=SOCIAL_ANALYST,
    )
    supervisor = create_agent(
        model=model,
        tools=[transfer_to_market_researcher, transfer_to_social_analyst],
        system_prompt=SUPERVISOR_PROMPT,
        name=SUPERVISOR,
    )
    return [supervisor, market_researcher, social_analyst]


def build_token_research_swarm(
    model: Optional[BaseChatModel] = None,
    market_tools: Optional[Sequence[BaseTool]] = None,
    social_tools: Optional[Sequence[BaseTool]] = None,
    checkpointer: Optional[Any] = None,
):
    """Compile the swarm; Tavily and Farcaster search are used when no tools are given."""
    model = model or create_demo_chat_model(
        "token_research", default_model=DEFAULT_MODEL, default_temperature=DEFAULT_TEMPERATURE
    )
    if market_tools is None:
        market_tools = [TavilySearch(max_results=MARKET_SEARCH_MAX_RESULTS)]
    if social_tools is None:
        social_tools = [FarcasterSearchTool()]

    workflow = create_swarm(
        create_research_agents(model, market_tools, social_tools),
        default_active_agent=SUPERVISOR,
    )
    return workflow.compile(checkpointer=checkpointer or new_checkpointer())


def format_swarm_report(token: str, response: str) -> str:
    return f"# Swarm Agent Research Report\n\n## Token: {token}\n\n{response}"


def run_token_research(
    token: str = DEFAULT_TOKEN,
    app: Optional[Any] = None,
    reports_dir: Optional[str] = None,
    now: Optional[datetime] = None,
) -> str:
    """Research ``token`` on a fresh thread, save the report and return its path."""
    app = app or build_token_research_swarm()
    config = create_thread_config(str(uuid.uuid4()), demo_name="token_research")

    logger.info(f"[TokenResearch] Researching {token}")
    state = app.invoke({"messages": [HumanMessage(token)]}, config)
    response = last_message_content(state)

    path = write_markdown_report(format_swarm_report(token, response), REPORT_PREFIX, reports_dir, now)
    print(f"Swarm report saved to: {path}")
    print("Swarm response =>", response)
    return path


def run() -> None:
    run_token_research(DEFAULT_TOKEN)
