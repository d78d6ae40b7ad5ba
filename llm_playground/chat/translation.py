"""
Translation with a chat model, first with hand-built messages and then with a
prompt template.
"""
from typing import List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import BaseMessage, HumanMessage, SystemMessage

from llm_playground.utils.logger import logger
from llm_playground.utils.model_factory import create_demo_chat_model, extract_text_content

from .prompts import DEFAULT_TARGET_LANGUAGE, TRANSLATION_PROMPT, TRANSLATION_SYSTEM_TEMPLATE

DEFAULT_MODEL = "gpt-4"


def build_translation_messages(text: str, language: str = DEFAULT_TARGET_LANGUAGE) -> List[BaseMessage]:
    return [
        SystemMessage(content=TRANSLATION_SYSTEM_TEMPLATE.format(language=language)),
        HumanMessage(content=text),
    ]


def translate(model: BaseChatModel, text: str, language: str = DEFAULT_TARGET_LANGUAGE) -> str:
    """Translate ``text`` with explicit system and human messages."""
    return extract_text_content(model.invoke(build_translation_messages(text, language)).content)


def translate_with_template(model: BaseChatModel, text: str, language: str = DEFAULT_TARGET_LANGUAGE) -> str:
    """Translate ``text`` by piping the prompt template into the model."""
    chain = TRANSLATION_PROMPT | model
    return extract_text_content(chain.invoke({"language": language, "text": text}).content)


def run(model: Optional[BaseChatModel] = None) -> None:
    model = model or create_demo_chat_model("translation", default_model=DEFAULT_MODEL)

    logger.info("[Translation] Translating with system + human messages")
    print(translate(model, "hi!"))

    logger.info("[Translation] Translating with a prompt template")
    print(translate_with_template(model, "Hello, how are you?"))
