"""Prompts for the chat demos."""
from langchain_core.prompts import ChatPromptTemplate

TRANSLATION_SYSTEM_TEMPLATE = "Translate the following from English into {language}"

TRANSLATION_PROMPT = ChatPromptTemplate.from_messages([
    ("system", TRANSLATION_SYSTEM_TEMPLATE),
    ("user", "{text}"),
])

DEFAULT_TARGET_LANGUAGE = "Brazilian Portuguese"
