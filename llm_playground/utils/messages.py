"""Console rendering of chat messages and graph states."""

import json
from typing import Any, Iterable, Mapping

from langchain_core.messages import AIMessage, BaseMessage

from llm_playground.utils.model_factory import extract_text_content

STREAM_SEPARATOR = "-----\n"


def format_message(message: BaseMessage) -> str:
    """Render one message as ``[<type>]`` followed by its text and any tool calls."""
    lines = [f"[{message.type}]", extract_text_content(message.content)]

    if isinstance(message, AIMessage) and message.tool_calls:
        lines.append("Tools:")
        for tool_call in message.tool_calls:
            lines.append(f"- {tool_call['name']}({json.dumps(tool_call.get('args', {}))})")

    return "\n".join(lines)


def pretty_print(message: BaseMessage) -> None:
    print(format_message(message))


def last_message_content(state: Mapping[str, Any]) -> str:
    """Text of the final message in a graph state (``""`` when there is none)."""
    messages = state.get("messages") or []
    if not messages:
        return ""
    return extract_text_content(messages[-1].content)


def print_stream_values(stream: Iterable[Mapping[str, Any]]) -> None:
    """Print the last message of every ``values`` chunk of a graph stream."""
    for chunk in stream:
        messages = chunk.get("messages") or []
        if not messages:
            continue
        pretty_print(messages[-1])
        print(STREAM_SEPARATOR)
