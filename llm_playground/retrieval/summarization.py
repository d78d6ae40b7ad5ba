"""Summarize the main theme of retrieved documents with a prompt | model | parser chain."""
from typing import List, Optional

from langchain_core.documents import Document
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser

from llm_playground.utils.model_factory import create_chat_model

from .documents import format_docs, load_blog_post
from .prompts import SUMMARY_PROMPT

DEFAULT_MODEL = "gpt-4o-mini"


def build_summarization_chain(model: BaseChatModel):
    return SUMMARY_PROMPT | model | StrOutputParser()


def summarize_documents(model: BaseChatModel, docs: List[Document]) -> str:
    return build_summarization_chain(model).invoke({"context": format_docs(docs, separator="\n\n")})


def run(model: Optional[BaseChatModel] = None, docs: Optional[List[Document]] = None) -> None:
    model = model or create_chat_model(DEFAULT_MODEL, temperature=0)
    docs = docs if docs is not None else load_blog_post()
    print(summarize_documents(model, docs))
