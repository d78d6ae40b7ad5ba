"""
Contract analysis supervisor.

A supervisor agent named "God" drives six specialists through data
collection, analysis, evaluation and report writing for one contract
address. ``analyze_contract_with_stream`` runs the team under a time budget.
"""
import asyncio
from typing import Any, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import HumanMessage
from langgraph_supervisor import create_supervisor

from llm_playground.config.common_settings import CONTRACT_ANALYSIS_TIMEOUT_SECONDS
from llm_playground.exceptions import AnalysisTimeoutError
from llm_playground.utils.checkpointer import async_checkpointer, get_checkpointer
from llm_playground.utils.langsmith import create_thread_config
from llm_playground.utils.logger import logger
from llm_playground.utils.messages import STREAM_SEPARATOR, pretty_print
from llm_playground.utils.model_factory import create_demo_chat_model

from .agents import DEFAULT_MODEL, create_contract_analysis_agents
from .prompts import SUPERVISOR_NAME, SUPERVISOR_PROMPT

RECURSION_LIMIT = 100


def build_contract_analysis_app(model: Optional[BaseChatModel] = None, checkpointer: Optional[Any] = None):
    """Compile the supervisor workflow with a checkpointer."""
    model = model or create_demo_chat_model("contract_analysis", default_model=DEFAULT_MODEL)

    workflow = create_supervisor(
        create_contract_analysis_agents(model),
        model=model,
        prompt=SUPERVISOR_PROMPT,
        supervisor_name=SUPERVISOR_NAME,
    )
    return workflow.compile(checkpointer=checkpointer or get_checkpointer())


def build_analysis_request(contract_address: str) -> dict:
    return {"messages": [HumanMessage(content=f"Analyze this contract: {contract_address}")]}


async def _print_new_messages(app: Any, contract_address: str, config: dict) -> int:
    seen = set()
    async for state in app.astream(build_analysis_request(contract_address), config, stream_mode="values"):
        for message in state.get("messages") or []:
            key = message.id or id(message)
            if key in seen:
                continue
            seen.add(key)
            pretty_print(message)
            print(STREAM_SEPARATOR)
    return len(seen)


async def analyze_contract_with_stream(
    contract_address: str,
    timeout_seconds: float = CONTRACT_ANALYSIS_TIMEOUT_SECONDS,
    app: Optional[Any] = None,
    thread_id: Optional[str] = None,
) -> None:
    """
    Stream a full analysis of ``contract_address`` to the console.

    Every message produced by the team is printed once, as soon as it shows
    up in the streamed state.

    Raises:
        AnalysisTimeoutError: If the run does not finish within ``timeout_seconds``
    """
    config = create_thread_config(thread_id, demo_name="contract_analysis")
    config["recursion_limit"] = RECURSION_LIMIT

    logger.info(f"[ContractAnalysis] Starting analysis of {contract_address} (timeout {timeout_seconds:g}s)")
    if app is not None:
        await _stream_with_timeout(app, contract_address, config, timeout_seconds)
        return

    async with async_checkpointer() as checkpointer:
        app = build_contract_analysis_app(checkpointer=checkpointer)
        await _stream_with_timeout(app, contract_address, config, timeout_seconds)


async def _stream_with_timeout(app: Any, contract_address: str, config: dict, timeout_seconds: float) -> None:
    try:
        printed = await asyncio.wait_for(_print_new_messages(app, contract_address, config), timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        logger.error(f"[ContractAnalysis] Analysis of {contract_address} timed out")
        raise AnalysisTimeoutError(timeout_seconds) from e

    logger.info(f"[ContractAnalysis] Finished with {printed} messages")


def run_contract_analysis(contract_address: str, timeout_seconds: float = CONTRACT_ANALYSIS_TIMEOUT_SECONDS) -> None:
    asyncio.run(analyze_contract_with_stream(contract_address, timeout_seconds))
