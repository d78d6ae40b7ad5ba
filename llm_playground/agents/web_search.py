"""
Web search through OpenAI's search-preview model.

The ``web_search`` tool wraps a single chat completion with
``web_search_options``; an agent uses it to answer news questions, and
``compare_openai_and_tavily`` puts the direct call next to a Tavily agent.
"""
from typing import Any, Dict, Optional

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_core.tools import tool
from openai import OpenAI
from pydantic import BaseModel, Field

from llm_playground.config.common_settings import WEB_SEARCH_MODEL, get_required_env
from llm_playground.utils.checkpointer import new_checkpointer
from llm_playground.utils.langsmith import create_thread_config
from llm_playground.utils.logger import logger
from llm_playground.utils.messages import last_message_content
from llm_playground.utils.model_factory import create_chat_model

from .prompts import TOPIC_RESEARCH_PROMPT, WEB_SEARCH_SYSTEM_PROMPT
from .react_agent import THREAD_ID, build_simple_agent, create_search_tools

DEFAULT_MODEL = "gpt-4o-mini"
SEARCH_CONTEXT_SIZE = "high"
NEWS_QUESTION = "what's the latest news on bitcoin?"
COMPARISON_TOPIC = "bitcoin"


class WebSearchInput(BaseModel):
    query: str = Field(description="search terms")


def _openai_client() -> OpenAI:
    return OpenAI(api_key=get_required_env("OPENAI_API_KEY"))


def search_completion(messages, client: Optional[OpenAI] = None) -> str:
    """Run one search-preview completion and return its text."""
    client = client or _openai_client()
    completion = client.chat.completions.create(
        model=WEB_SEARCH_MODEL,
        web_search_options={"search_context_size": SEARCH_CONTEXT_SIZE},
        messages=messages,
    )
    return completion.choices[0].message.content or ""


def search_web(query: str, client: Optional[OpenAI] = None) -> str:
    content = search_completion(
        [
            {"role": "system", "content": WEB_SEARCH_SYSTEM_PROMPT},
            {"role": "user", "content": query},
        ],
        client,
    )
    return f"Search results: {content}"


@tool(
    name_or_callable="web_search",
    description="Search the web using gpt-4o-search-preview",
    args_schema=WebSearchInput,
)
def web_search(query: str) -> str:
    logger.info("[WebSearch] Using websearch tool...")
    return search_web(query)


def build_web_search_agent(model: BaseChatModel, checkpointer=None):
    return create_agent(model=model, tools=[web_search], checkpointer=checkpointer, name="web_search_agent")


def compare_openai_and_tavily(
    topic: str = COMPARISON_TOPIC,
    model: Optional[BaseChatModel] = None,
    client: Optional[OpenAI] = None,
    tools=None,
) -> Dict[str, Any]:
    """Answer the same research prompt with a direct search call and with a Tavily agent."""
    prompt = TOPIC_RESEARCH_PROMPT.format(topic=topic)

    openai_result = search_completion([{"role": "user", "content": prompt}], client)

    model = model or create_chat_model(DEFAULT_MODEL, temperature=0)
    agent = build_simple_agent(model, tools or create_search_tools(), checkpointer=new_checkpointer())
    state = agent.invoke(
        {"messages": [HumanMessage(prompt)]},
        create_thread_config(THREAD_ID, demo_name="openai_vs_tavily"),
    )
    return {"openai": openai_result, "tavily": last_message_content(state)}


def run(model: Optional[BaseChatModel] = None) -> None:
    model = model or create_chat_model(DEFAULT_MODEL, temperature=0)
    agent = build_web_search_agent(model, checkpointer=new_checkpointer())
    state = agent.invoke(
        {"messages": [HumanMessage(NEWS_QUESTION)]},
        create_thread_config(THREAD_ID, demo_name="web_search"),
    )
    print(last_message_content(state))


def run_comparison(topic: str = COMPARISON_TOPIC) -> None:
    results = compare_openai_and_tavily(topic)
    print("*** OPENAI ***")
    print(results["openai"])
    print("\n\n*** TAVILY ***")
    print(results["tavily"])
