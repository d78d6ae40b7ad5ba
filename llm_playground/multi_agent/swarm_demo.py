"""
Two agents that hand the conversation to each other.

Alice adds numbers, Bob speaks like a pirate. The active agent is remembered
per thread, so the second turn starts with whoever answered the first.
"""
from typing import Any, Dict, List, Optional

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langgraph_swarm import create_handoff_tool, create_swarm

from llm_playground.utils.checkpointer import new_checkpointer
from llm_playground.utils.langsmith import create_thread_config
from llm_playground.utils.messages import pretty_print
from llm_playground.utils.model_factory import create_demo_chat_model

from .tools import add

DEFAULT_MODEL = "gpt-4o"
THREAD_ID = "1"
TURNS = ["i'd like to speak to Bob", "what's 5 + 7?"]


def create_swarm_agents(model: BaseChatModel) -> List:
    alice = create_agent(
        model=model,
        tools=[
            add,
            create_handoff_tool(agent_name="Bob", description="Transfer to Bob, he can help with pirate language"),
        ],
        system_prompt="You are Alice, an addition expert.",
        name="Alice",
    )
    bob = create_agent(
        model=model,
        tools=[
            create_handoff_tool(agent_name="Alice", description="Transfer to Alice, she can help with math"),
        ],
        system_prompt="You are Bob, you speak like a pirate.",
        name="Bob",
    )
    return [alice, bob]


def build_swarm_app(model: BaseChatModel, checkpointer=None):
    workflow = create_swarm(create_swarm_agents(model), default_active_agent="Alice")
    return workflow.compile(checkpointer=checkpointer or new_checkpointer())


def run(model: Optional[BaseChatModel] = None, app=None) -> List[Dict[str, Any]]:
    if app is None:
        app = build_swarm_app(model or create_demo_chat_model("agent_swarm", default_model=DEFAULT_MODEL))
    config = create_thread_config(THREAD_ID, demo_name="agent_swarm")

    results = []
    for turn in TURNS:
        state = app.invoke({"messages": [HumanMessage(turn)]}, config)
        print(f"active agent => {state.get('active_agent')}")
        pretty_print(state["messages"][-1])
        results.append(state)
    return results
