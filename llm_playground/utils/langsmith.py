"""
LangSmith tracking utilities with thread support.

Builds run configs that carry a ``thread_id`` for the checkpointer and, when
tracing is on, LangSmith metadata, tags and a tracer callback.
"""

import os
import uuid
from typing import Any, Dict, Optional

from langchain_core.tracers import LangChainTracer

from .logger import logger


def is_langsmith_enabled() -> bool:
    """
    Check if LangSmith tracking is enabled.

    Supports both new (LANGSMITH_TRACING) and legacy (LANGCHAIN_TRACING_V2) env vars.
    """
    tracing_enabled = os.getenv("LANGSMITH_TRACING", "").lower() == "true"
    if not tracing_enabled:
        tracing_enabled = os.getenv("LANGCHAIN_TRACING_V2", "").lower() == "true"

    return tracing_enabled


def generate_session_id() -> str:
    """Generate a new session ID for thread tracking."""
    return str(uuid.uuid4())


def create_thread_config(
    thread_id: Optional[str] = None, demo_name: Optional[str] = None
) -> Dict[str, Any]:
    """
    Create a LangGraph run config for one conversation thread.

    Args:
        thread_id: Thread/session ID (generates new one if not provided)
        demo_name: Optional demo name added to the trace tags

    Returns:
        Config dict with ``configurable.thread_id`` and, when tracing is
        enabled, metadata, tags and a LangChainTracer callback
    """
    if not thread_id:
        thread_id = generate_session_id()

    config: Dict[str, Any] = {"configurable": {"thread_id": thread_id}}

    if not is_langsmith_enabled():
        return config

    project_name = os.getenv("LANGSMITH_PROJECT", "llm-playground")

    config["metadata"] = {"thread_id": thread_id, "session_id": thread_id}
    config["tags"] = [f"thread:{thread_id}"]
    if demo_name:
        config["metadata"]["demo"] = demo_name
        config["tags"].append(f"demo:{demo_name}")

    try:
        tracer = LangChainTracer(
            project_name=project_name,
            tags=config["tags"],
            metadata=config["metadata"],
        )
        config["callbacks"] = [tracer]
    except Exception as e:
        logger.warning(f"Failed to create LangChainTracer: {e}")

    return config


def log_tracking_status() -> None:
    """Log the current LangSmith tracking status."""
    if is_langsmith_enabled():
        project = os.getenv("LANGSMITH_PROJECT", "llm-playground")
        logger.info(f"LangSmith tracking enabled - project: {project}")
        if not os.getenv("LANGSMITH_API_KEY"):
            logger.warning("LANGSMITH_API_KEY not set - traces will not be uploaded")
    else:
        logger.info("LangSmith tracking disabled")
