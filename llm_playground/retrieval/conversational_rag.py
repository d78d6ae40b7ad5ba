"""
Conversational RAG over a message-list state.

The model decides whether to call the ``retrieve`` tool or answer directly;
retrieved content is then stuffed into a system prompt for the final answer.
Three variants are shown: without memory, with a checkpointer keyed by thread
and as a prebuilt agent that may retrieve several times.
"""
from typing import List, Optional, Sequence

from langchain.agents import create_agent
from langchain_core.documents import Document
from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage, ToolMessage
from langchain_core.tools import BaseTool, tool
from langchain_core.vectorstores import VectorStore
from langgraph.graph import END, START, MessagesState, StateGraph
from langgraph.prebuilt import ToolNode, tools_condition

from llm_playground.utils.checkpointer import new_checkpointer
from llm_playground.utils.langsmith import create_thread_config
from llm_playground.utils.messages import print_stream_values
from llm_playground.utils.model_factory import create_chat_model

from .documents import build_blog_vector_store
from .prompts import GENERATION_SYSTEM_PROMPT

DEFAULT_MODEL = "gpt-4o-mini"
RETRIEVE_K = 2
MEMORY_THREAD_ID = "abc123"

GREETING = "Hello"
QUESTION = "What is Task Decomposition?"
FOLLOW_UP = "Can you look up some common ways of doing it?"
AGENT_QUESTION = (
    "What is the standard method for Task Decomposition?\n"
    "Once you get the answer, look up common extensions of that method."
)


def serialize_documents(docs: Sequence[Document]) -> str:
    return "\n".join(
        f"Source: {doc.metadata.get('source')}\nContent: {doc.page_content}" for doc in docs
    )


def make_retrieve_tool(vector_store: VectorStore, k: int = RETRIEVE_K) -> BaseTool:
    """Build a ``retrieve`` tool returning serialized text plus the raw documents."""

    @tool(response_format="content_and_artifact")
    def retrieve(query: str):
        """Retrieve information related to a query."""
        docs = vector_store.similarity_search(query, k=k)
        return serialize_documents(docs), docs

    return retrieve


def recent_tool_messages(messages: Sequence[BaseMessage]) -> List[ToolMessage]:
    """Return the trailing run of tool messages, oldest first."""
    recent: List[ToolMessage] = []
    for message in reversed(messages):
        if not isinstance(message, ToolMessage):
            break
        recent.append(message)
    return recent[::-1]


def conversation_messages(messages: Sequence[BaseMessage]) -> List[BaseMessage]:
    """Human and system turns plus AI turns that did not request tools."""
    return [
        message
        for message in messages
        if isinstance(message, (HumanMessage, SystemMessage))
        or (isinstance(message, AIMessage) and not message.tool_calls)
    ]


def build_generation_system_prompt(tool_messages: Sequence[ToolMessage]) -> str:
    docs_content = "\n".join(str(message.content) for message in tool_messages)
    return GENERATION_SYSTEM_PROMPT.format(context=docs_content)


def build_conversational_rag_graph(vector_store: VectorStore, model: BaseChatModel, checkpointer=None):
    retrieve = make_retrieve_tool(vector_store)

    def query_or_respond(state: MessagesState):
        """Generate a tool call for retrieval or respond."""
        response = model.bind_tools([retrieve]).invoke(state["messages"])
        return {"messages": [response]}

    def generate(state: MessagesState):
        """Answer from the latest retrieved content."""
        system_prompt = build_generation_system_prompt(recent_tool_messages(state["messages"]))
        prompt = [SystemMessage(system_prompt)] + conversation_messages(state["messages"])
        response = model.invoke(prompt)
        return {"messages": [response]}

    graph_builder = StateGraph(MessagesState)
    graph_builder.add_node("query_or_respond", query_or_respond)
    graph_builder.add_node("tools", ToolNode([retrieve]))
    graph_builder.add_node("generate", generate)

    graph_builder.add_edge(START, "query_or_respond")
    graph_builder.add_conditional_edges(
        "query_or_respond",
        tools_condition,
        {END: END, "tools": "tools"},
    )
    graph_builder.add_edge("tools", "generate")
    graph_builder.add_edge("generate", END)

    return graph_builder.compile(checkpointer=checkpointer)


def build_retrieval_agent(vector_store: VectorStore, model: BaseChatModel, checkpointer=None):
    return create_agent(model=model, tools=[make_retrieve_tool(vector_store)], checkpointer=checkpointer)


def _stream(graph, content: str, config=None) -> None:
    print_stream_values(graph.stream({"messages": [HumanMessage(content)]}, config=config, stream_mode="values"))


def run(model: Optional[BaseChatModel] = None, vector_store: Optional[VectorStore] = None) -> None:
    model = model or create_chat_model(DEFAULT_MODEL, temperature=0)
    vector_store = vector_store or build_blog_vector_store()

    graph = build_conversational_rag_graph(vector_store, model)
    _stream(graph, GREETING)
    _stream(graph, QUESTION)

    memory_graph = build_conversational_rag_graph(vector_store, model, checkpointer=new_checkpointer())
    config = create_thread_config(MEMORY_THREAD_ID, demo_name="conversational_rag")
    _stream(memory_graph, QUESTION, config)
    _stream(memory_graph, FOLLOW_UP, config)

    agent = build_retrieval_agent(vector_store, model, checkpointer=new_checkpointer())
    _stream(agent, AGENT_QUESTION, create_thread_config(MEMORY_THREAD_ID, demo_name="retrieval_agent"))
