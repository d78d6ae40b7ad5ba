"""
Reflection agent.

``create_reflection_agent`` builds an agent that answers through the
``generate_reflection`` tool (plus web search), while ``reflect_with_thoughts``
asks the model to work step by step and keeps every thought it stores.
"""
import uuid
from typing import List, Optional, Sequence

from langchain.agents import create_agent
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langchain_core.tools import BaseTool
from pydantic import BaseModel, Field

from llm_playground.utils.checkpointer import new_checkpointer
from llm_playground.utils.langsmith import create_thread_config
from llm_playground.utils.logger import logger
from llm_playground.utils.messages import last_message_content
from llm_playground.utils.model_factory import create_chat_model

from ..prompts import PERSONALITY_BLEND_PROMPT, REFLECTION_AGENT_PROMPT
from ..react_agent import create_search_tools
from .personality import PersonalityBlend
from .tools import ReflectionTool, ThoughtStorageTool, ThoughtStore

DEFAULT_MODEL = "gpt-4o"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_PROMPT_ID = "1"

DEFAULT_BLEND = PersonalityBlend(joy=0.8, sadness=0.1, anger=0.05, fear=0.02, disgust=0.03)

AGENT_PROMPT = "Reflect on the nature of artificial intelligence and its impact on society"
UTILITY_PROMPT = "Explore the future of remote work and its implications"


class ReflectionResult(BaseModel):
    final_thought: str
    thought_process: List[str] = Field(default_factory=list)
    prompt_id: str


def _default_model() -> BaseChatModel:
    return create_chat_model(DEFAULT_MODEL, temperature=DEFAULT_TEMPERATURE)


def build_personality_prompt(prompt: str, blend: PersonalityBlend) -> str:
    context = PERSONALITY_BLEND_PROMPT.format(blend_lines="\n".join(blend.blend_lines()))
    return f"{context}\n\n{prompt}"


def create_reflection_agent(
    blend: Optional[PersonalityBlend] = None,
    model: Optional[BaseChatModel] = None,
    search_tools: Optional[Sequence[BaseTool]] = None,
    checkpointer=None,
):
    """
    Build the reflection agent.

    Args:
        blend: Personality levels for the reflection tool (defaults to a joy-heavy blend)
        model: Chat model; gpt-4o at temperature 0.7 when omitted
        search_tools: Extra tools; Tavily search when omitted
        checkpointer: Memory for the agent; a fresh in-memory saver when omitted
    """
    tools: List[BaseTool] = [ReflectionTool(blend=blend or DEFAULT_BLEND)]
    tools.extend(search_tools if search_tools is not None else create_search_tools())

    return create_agent(
        model=model or _default_model(),
        tools=tools,
        system_prompt=REFLECTION_AGENT_PROMPT,
        checkpointer=checkpointer or new_checkpointer(),
        name="reflection_agent",
    )


def generate_reflection(
    prompt: str,
    thread_id: str,
    blend: Optional[PersonalityBlend] = None,
    model: Optional[BaseChatModel] = None,
    search_tools: Optional[Sequence[BaseTool]] = None,
) -> str:
    """Run the reflection agent once on ``thread_id`` and return its final text."""
    agent = create_reflection_agent(blend, model, search_tools)
    state = agent.invoke(
        {"messages": [HumanMessage(prompt)]},
        create_thread_config(thread_id, demo_name="reflection"),
    )
    return last_message_content(state)


def reflect_with_thoughts(
    prompt: str,
    blend: Optional[PersonalityBlend] = None,
    model: Optional[BaseChatModel] = None,
    prompt_id: str = DEFAULT_PROMPT_ID,
) -> ReflectionResult:
    blend = blend or DEFAULT_BLEND
    store = ThoughtStore(prompt_id=prompt_id, personality_type=blend.dominant().value)

    agent = create_agent(
        model=model or _default_model(),
        tools=[ThoughtStorageTool(store=store)],
        name="thought_agent",
    )
    state = agent.invoke({"messages": [HumanMessage(build_personality_prompt(prompt, blend))]})

    logger.info(f"[Reflection] Finished prompt {prompt_id} with {len(store.thoughts)} stored thought(s)")
    return ReflectionResult(
        final_thought=last_message_content(state),
        thought_process=list(store.thoughts),
        prompt_id=prompt_id,
    )


def run(model: Optional[BaseChatModel] = None) -> None:
    print("=== Testing direct agent usage ===")
    agent = create_reflection_agent(
        PersonalityBlend(joy=0.7, sadness=0.1, anger=0.1, fear=0.05, disgust=0.05),
        model=model,
    )
    state = agent.invoke(
        {"messages": [HumanMessage(AGENT_PROMPT)]},
        create_thread_config(str(uuid.uuid4()), demo_name="reflection"),
    )
    print("Direct agent response =>", last_message_content(state))

    print("\n=== Testing utility function ===")
    reflection = generate_reflection(UTILITY_PROMPT, str(uuid.uuid4()), PersonalityBlend(), model=model)
    print("Utility function response =>", reflection)

    print("\n=== Testing stored thoughts ===")
    result = reflect_with_thoughts(UTILITY_PROMPT, model=model)
    print("Final thought =>", result.final_thought)
    print("Thought process =>", result.thought_process)
