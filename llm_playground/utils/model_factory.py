"""Model factory for creating OpenAI, Groq, Anthropic or xAI chat models by name.

This module provides a factory function for creating chat models from the
hosted providers used across the demos. It detects the provider from the model
name and configures the client with the specified parameters.

Key Features:
- Automatic provider detection based on model name
- Support for OpenAI, Groq, Anthropic and xAI chat models
- Tool binding and JSON mode support
- Per-demo overrides (see ``config/demo_models.py``)
- Shared OpenAI embeddings factory
"""

import os
from typing import Any, List, Optional

from langchain_core.embeddings import Embeddings
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_groq import ChatGroq
from langchain_openai import ChatOpenAI, OpenAIEmbeddings

from llm_playground.config import common_settings  # noqa: F401  loads .env
from llm_playground.exceptions import ConfigurationError
from llm_playground.utils.logger import logger

# Import Anthropic for Claude models (optional)
try:
    from langchain_anthropic import ChatAnthropic
    _HAS_ANTHROPIC = True
except ImportError:
    ChatAnthropic = None  # type: ignore
    _HAS_ANTHROPIC = False


def extract_text_content(content: Any) -> str:
    """
    Normalize LLM message content to a plain text string.

    Some providers return content as a list of blocks with type/text structure
    instead of a plain string. This function handles both formats.

    Args:
        content: Message content - can be a string, list of content blocks, or other

    Returns:
        Extracted text content as a string

    Examples:
        >>> extract_text_content("Hello world")
        'Hello world'
        >>> extract_text_content([{"type": "text", "text": "Hello"}])
        'Hello'
    """
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text" and part.get("text"):
                parts.append(part["text"])
        return "".join(parts)
    if isinstance(content, str):
        return content
    return str(content) if content is not None else ""


def is_anthropic_model(model_name: str) -> bool:
    """Check if the model name corresponds to an Anthropic model.

    Examples:
        >>> is_anthropic_model("claude-3-opus")
        True
        >>> is_anthropic_model("gpt-4")
        False
    """
    return model_name.lower().startswith("claude")


def is_groq_model(model_name: str) -> bool:
    """Check if the model name corresponds to a model served by Groq.

    Examples:
        >>> is_groq_model("llama-3.3-70b-versatile")
        True
        >>> is_groq_model("mixtral-8x7b-32768")
        True
        >>> is_groq_model("gpt-4o")
        False
    """
    groq_prefixes = [
        'llama',
        'meta-llama/',
        'mixtral',
        'gemma',
        'qwen',
        'deepseek-r1-distill',
        'openai/gpt-oss',
        'moonshotai/',
    ]
    return any(model_name.lower().startswith(prefix) for prefix in groq_prefixes)


def is_xai_model(model_name: str) -> bool:
    """Check if the model name corresponds to an xAI (Grok) model.

    Examples:
        >>> is_xai_model("grok-3-mini")
        True
        >>> is_xai_model("gpt-4")
        False
    """
    return model_name.lower().startswith("grok")


def get_model_provider(model_name: str) -> str:
    """Return the provider ("anthropic", "groq", "xai" or "openai") for a model name."""
    if is_anthropic_model(model_name):
        return "anthropic"
    if is_groq_model(model_name):
        return "groq"
    if is_xai_model(model_name):
        return "xai"
    return "openai"


def _require_key(env_name: str, provider: str) -> str:
    api_key = os.getenv(env_name)
    if not api_key:
        raise ConfigurationError(f"{env_name} environment variable is required for {provider} models")
    return api_key


def create_chat_model(
    model_name: Optional[str] = None,
    temperature: Optional[float] = None,
    api_tools: Optional[List] = None,
    json_mode: bool = False,
) -> BaseChatModel:
    """Create a chat model instance (OpenAI, Groq, Anthropic, or xAI) based on model name.

    Args:
        model_name: Name of the model to create. If None, uses DEFAULT_MODEL.
                   Examples: "gpt-4o", "llama-3.3-70b-versatile", "claude-3-5-haiku-latest"
        temperature: Sampling temperature. None keeps the provider default.
        api_tools: Optional list of tools to bind to the model for function calling.
        json_mode: Wraps OpenAI/xAI models with JSON-mode structured output.

    Returns:
        Configured chat model instance, with tools bound if provided.

    Raises:
        ConfigurationError: If the provider API key is not set.
        RuntimeError: If an optional provider package is not installed.

    Environment Variables:
        DEFAULT_MODEL: Default model to use if model_name is None (default: "gpt-4o-mini")
        OPENAI_API_KEY: Required for OpenAI models
        GROQ_API_KEY: Required for Groq models
        ANTHROPIC_API_KEY: Required for Anthropic models
        X_AI_API_KEY: Required for xAI (Grok) models
        XAI_BASE_URL: Base URL for xAI API (default: "https://api.x.ai/v1")
    """
    if model_name is None:
        model_name = os.getenv("DEFAULT_MODEL", "gpt-4o-mini")

    kwargs: dict = {"model": model_name}
    if temperature is not None:
        kwargs["temperature"] = float(temperature)

    provider = get_model_provider(model_name)

    if provider == "anthropic":
        if not _HAS_ANTHROPIC:
            raise RuntimeError(
                "Anthropic chat model not available. Install langchain-anthropic to use Claude models.")
        model = ChatAnthropic(api_key=_require_key("ANTHROPIC_API_KEY", "Anthropic"), **kwargs)

    elif provider == "groq":
        model = ChatGroq(api_key=_require_key("GROQ_API_KEY", "Groq"), max_retries=3, **kwargs)

    elif provider == "xai":
        # xAI exposes an OpenAI-compatible API
        model = ChatOpenAI(
            api_key=_require_key("X_AI_API_KEY", "xAI"),
            base_url=os.getenv("XAI_BASE_URL", "https://api.x.ai/v1"),
            timeout=60,
            max_retries=3,
            **kwargs,
        )

    else:
        model = ChatOpenAI(
            api_key=_require_key("OPENAI_API_KEY", "OpenAI"),
            timeout=60,
            max_retries=3,
            **kwargs,
        )

    if json_mode and provider in ("openai", "xai"):
        model = model.with_structured_output(method="json_mode")

    # Bind API tools if available
    if api_tools:
        logger.info(f"Binding tools to {provider} model {model_name}: {[tool.name for tool in api_tools]}")
        model = model.bind_tools(api_tools)

    return model


def create_demo_chat_model(
    demo_name: str,
    default_model: Optional[str] = None,
    default_temperature: Optional[float] = None,
) -> BaseChatModel:
    """Create the chat model for a demo, honoring ``DEMO_MODEL_OVERRIDES``.

    - Reads the override for ``demo_name`` from ``config/demo_models.py``
    - Falls back to the provided defaults, then to DEFAULT_MODEL
    """
    from llm_playground.config.demo_models import DEMO_MODEL_OVERRIDES

    override = (DEMO_MODEL_OVERRIDES or {}).get(demo_name, {})
    model_name = override.get("model", default_model)
    temperature = override.get("temperature", default_temperature)
    logger.info("ModelFactory: creating model for %s model=%s temperature=%s", demo_name, model_name, temperature)
    return create_chat_model(model_name=model_name, temperature=temperature)


def create_embeddings(model: Optional[str] = None) -> Embeddings:
    """Create the OpenAI embeddings client used by the retrieval demos."""
    model_id = model or os.getenv("EMBEDDINGS_MODEL", "text-embedding-3-large")
    return OpenAIEmbeddings(model=model_id, api_key=_require_key("OPENAI_API_KEY", "OpenAI"))
