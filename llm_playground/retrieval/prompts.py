"""Prompts for the retrieval demos."""
from langchain_core.prompts import ChatPromptTemplate, PromptTemplate

RAG_PROMPT = ChatPromptTemplate.from_messages([
    (
        "human",
        "You are an assistant for question-answering tasks. Use the following pieces of retrieved "
        "context to answer the question. If you don't know the answer, just say that you don't know. "
        "Use three sentences maximum and keep the answer concise.\n"
        "Question: {question} \n"
        "Context: {context} \n"
        "Answer:",
    ),
])

GENERATION_SYSTEM_PROMPT = (
    "You are an assistant for question-answering tasks. "
    "Use the following pieces of retrieved context to answer "
    "the question. If you don't know the answer, say that you "
    "don't know. Use three sentences maximum and keep the "
    "answer concise."
    "\n\n"
    "{context}"
)

SUMMARY_PROMPT = PromptTemplate.from_template(
    "Summarize the main theme in these retrieved docs: {context}"
)
