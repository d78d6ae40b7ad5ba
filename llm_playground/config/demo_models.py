"""
Per-demo chat model overrides.

Edit this mapping to change which model a demo runs on without touching the
demo itself. Keys match the names registered in ``llm_playground.main``
(plus a few agent names used inside multi-agent demos).

Model names decide the provider (see ``utils/model_factory.py``): ``gpt-*`` and
``o*`` go to OpenAI, ``llama-*`` / ``mixtral-*`` / ``gemma*`` go to Groq,
``claude-*`` to Anthropic and ``grok-*`` to xAI.

Examples:

DEMO_MODEL_OVERRIDES = {
    "tagging": {"model": "gpt-4o-mini", "temperature": 0},
    "contract_analysis": {"model": "claude-3-5-sonnet-latest"},
}
"""

from typing import Any, Dict

from llm_playground.config.common_settings import GROQ_DEFAULT_MODEL

DEMO_MODEL_OVERRIDES: Dict[str, Dict[str, Any]] = {
    # Groq-hosted demos; mixtral-8x7b-32768 has been retired by Groq.
    "conversation": {"model": GROQ_DEFAULT_MODEL, "temperature": 0},
    "tagging": {"model": GROQ_DEFAULT_MODEL, "temperature": 0},
    "people_extraction": {"model": GROQ_DEFAULT_MODEL, "temperature": 0},
    "rag_graph": {"model": GROQ_DEFAULT_MODEL, "temperature": 0},
    "sql_qa": {"model": GROQ_DEFAULT_MODEL, "temperature": 0},
}
