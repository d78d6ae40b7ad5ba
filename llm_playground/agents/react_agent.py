"""
Tool-calling agents over Tavily web search.

- ``run_simple_agent``: prebuilt agent with a memory checkpointer; the second
  turn on thread 42 relies on the first.
- ``run_weather_agent``: hand-built agent/tools graph without a checkpointer;
  the caller carries the history between turns.
- ``run_token_lookup``: single question about a token contract.
"""
from typing import List, Optional, Sequence

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, HumanMessage
from langchain_core.tools import BaseTool
from langchain_tavily import TavilySearch
from langgraph.graph import END, START, MessagesState, StateGraph
from langgraph.prebuilt import ToolNode

from llm_playground.utils.checkpointer import new_checkpointer
from llm_playground.utils.langsmith import create_thread_config
from llm_playground.utils.messages import last_message_content
from llm_playground.utils.model_factory import create_chat_model

DEFAULT_MODEL = "gpt-4o-mini"
SEARCH_MAX_RESULTS = 3
THREAD_ID = "42"

WEATHER_QUESTION = "what is the current weather in sf"
WEATHER_FOLLOW_UP = "what about ny"
TOKEN_QUESTION = "search about this token on base for me: 0x290f057a2c59b95d8027aa4abf31782676502071"


def create_search_tools(max_results: int = SEARCH_MAX_RESULTS) -> List[BaseTool]:
    return [TavilySearch(max_results=max_results)]


def build_simple_agent(model: BaseChatModel, tools: Sequence[BaseTool], checkpointer=None):
    return create_agent(model=model, tools=list(tools), checkpointer=checkpointer, name="search_agent")


def should_continue(state: MessagesState) -> str:
    """Route to the tools node while the model keeps requesting tools."""
    last_message = state["messages"][-1]
    if isinstance(last_message, AIMessage) and last_message.tool_calls:
        return "tools"
    return END


def build_custom_agent_graph(model: BaseChatModel, tools: Sequence[BaseTool]):
    bound_model = model.bind_tools(list(tools))

    def call_model(state: MessagesState):
        response = bound_model.invoke(state["messages"])
        return {"messages": [response]}

    workflow = StateGraph(MessagesState)
    workflow.add_node("agent", call_model)
    workflow.add_node("tools", ToolNode(list(tools)))
    workflow.add_edge(START, "agent")
    workflow.add_conditional_edges("agent", should_continue, ["tools", END])
    workflow.add_edge("tools", "agent")
    return workflow.compile()


def run_simple_agent(model: Optional[BaseChatModel] = None, tools: Optional[Sequence[BaseTool]] = None) -> List[str]:
    model = model or create_chat_model(DEFAULT_MODEL, temperature=0)
    agent = build_simple_agent(model, tools or create_search_tools(), checkpointer=new_checkpointer())
    config = create_thread_config(THREAD_ID, demo_name="react_agent")

    responses = []
    for question in (WEATHER_QUESTION, WEATHER_FOLLOW_UP):
        state = agent.invoke({"messages": [HumanMessage(question)]}, config)
        responses.append(last_message_content(state))

    print("response 1 =>", responses[0])
    print("\nresponse 2 =>", responses[1])
    return responses


def run_weather_agent(model: Optional[BaseChatModel] = None, tools: Optional[Sequence[BaseTool]] = None) -> List[str]:
    model = model or create_chat_model(DEFAULT_MODEL, temperature=0)
    app = build_custom_agent_graph(model, tools or create_search_tools())

    final_state = app.invoke({"messages": [HumanMessage(WEATHER_QUESTION)]})
    # No checkpointer, so the follow-up carries the previous messages itself.
    next_state = app.invoke({"messages": final_state["messages"] + [HumanMessage(WEATHER_FOLLOW_UP)]})

    responses = [last_message_content(final_state), last_message_content(next_state)]
    print("response 1 =>", responses[0])
    print("\nresponse 2 =>", responses[1])
    return responses


def run_token_lookup(model: Optional[BaseChatModel] = None, tools: Optional[Sequence[BaseTool]] = None) -> str:
    model = model or create_chat_model(DEFAULT_MODEL, temperature=0)
    agent = build_simple_agent(model, tools or create_search_tools(), checkpointer=new_checkpointer())

    state = agent.invoke(
        {"messages": [HumanMessage(TOKEN_QUESTION)]},
        create_thread_config(THREAD_ID, demo_name="token_lookup"),
    )
    response = last_message_content(state)
    print("response 1 =>", response)
    return response


def run(model: Optional[BaseChatModel] = None) -> None:
    run_simple_agent(model)
