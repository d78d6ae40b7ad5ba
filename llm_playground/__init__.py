"""
Runnable LangChain / LangGraph demonstrations.

Each subpackage wires hosted chat models into framework primitives (prompt
templates, structured output, retrieval graphs, prebuilt agents, supervisor
and swarm teams) and prints the result. Run them through the
``llm-playground`` command.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
