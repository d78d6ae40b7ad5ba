"""
Two-step RAG as a LangGraph graph: ``retrieve`` fills the context from the
vector store, ``generate`` answers from it.
"""
from typing import List, Optional, TypedDict

from langchain_core.documents import Document
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.vectorstores import VectorStore
from langgraph.graph import END, START, StateGraph

from llm_playground.utils.model_factory import create_demo_chat_model, extract_text_content

from .documents import build_blog_vector_store, format_docs
from .prompts import RAG_PROMPT

DEFAULT_QUESTION = "What is Task Decomposition?"


class RAGState(TypedDict):
    question: str
    context: List[Document]
    answer: str


def build_rag_graph(vector_store: VectorStore, model: BaseChatModel):
    """Compile the retrieve -> generate graph over ``vector_store``."""

    def retrieve(state: RAGState):
        return {"context": vector_store.similarity_search(state["question"])}

    def generate(state: RAGState):
        prompt = RAG_PROMPT.invoke({
            "question": state["question"],
            "context": format_docs(state["context"]),
        })
        response = model.invoke(prompt)
        return {"answer": extract_text_content(response.content)}

    graph_builder = StateGraph(RAGState)
    graph_builder.add_node("retrieve", retrieve)
    graph_builder.add_node("generate", generate)
    graph_builder.add_edge(START, "retrieve")
    graph_builder.add_edge("retrieve", "generate")
    graph_builder.add_edge("generate", END)
    return graph_builder.compile()


def run(model: Optional[BaseChatModel] = None, vector_store: Optional[VectorStore] = None) -> None:
    model = model or create_demo_chat_model("rag_graph")
    vector_store = vector_store or build_blog_vector_store()

    result = build_rag_graph(vector_store, model).invoke({"question": DEFAULT_QUESTION})

    print(f"\nQuestion: {result['question']}")
    print(f"\nAnswer: {result['answer']}")
