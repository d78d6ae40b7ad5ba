"""
Research, math and review experts under a supervisor.

The supervisor hands each request to the expert that fits it and the whole run
is streamed in ``values`` mode.
"""
from typing import List, Optional, Sequence

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_core.tools import BaseTool
from langchain_tavily import TavilySearch
from langgraph_supervisor import create_supervisor

from llm_playground.utils.messages import print_stream_values
from llm_playground.utils.model_factory import create_demo_chat_model

from .tools import add, multiply

DEFAULT_MODEL = "gpt-4o"
QUESTION = "what's the combined headcount of the FAANG companies in 2024??"

MATH_PROMPT = "You are a math expert. Always use one tool at a time."
RESEARCH_PROMPT = "You are a world class researcher with access to web search. Do not do any math."
REVIEW_PROMPT = (
    "You are a world class research reviewer. Do not do any math or research. "
    "You should provide the best review for the content."
)
SUPERVISOR_PROMPT = (
    "You are a team supervisor managing a research expert, a math expert and a review expert. "
    "For current events, use research_expert. "
    "For reviewing the research, use review_expert. "
    "For math problems, use math_expert."
)


def create_experts(model: BaseChatModel, search_tools: Sequence[BaseTool]) -> List:
    research_agent = create_agent(
        model=model,
        tools=list(search_tools),
        system_prompt=RESEARCH_PROMPT,
        name="research_expert",
    )
    math_agent = create_agent(
        model=model,
        tools=[add, multiply],
        system_prompt=MATH_PROMPT,
        name="math_expert",
    )
    review_agent = create_agent(
        model=model,
        tools=[],
        system_prompt=REVIEW_PROMPT,
        name="review_expert",
    )
    return [research_agent, math_agent, review_agent]


def build_supervisor_app(model: BaseChatModel, search_tools: Optional[Sequence[BaseTool]] = None):
    workflow = create_supervisor(
        create_experts(model, search_tools if search_tools is not None else [TavilySearch()]),
        model=model,
        prompt=SUPERVISOR_PROMPT,
    )
    return workflow.compile()


def run(model: Optional[BaseChatModel] = None, question: str = QUESTION) -> None:
    model = model or create_demo_chat_model("agent_supervisor", default_model=DEFAULT_MODEL)
    app = build_supervisor_app(model)
    print_stream_values(app.stream({"messages": [HumanMessage(question)]}, stream_mode="values"))
