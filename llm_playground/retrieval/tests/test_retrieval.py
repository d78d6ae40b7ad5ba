"""Unit tests for the retrieval demos.

Embeddings are deterministic fakes and models are fake or mocked, so the vector
store and the graphs run for real without network access.
"""
from unittest.mock import MagicMock, patch

import pytest
from langchain_core.documents import Document
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage, SystemMessage, ToolMessage

from ..conversational_rag import (
    build_conversational_rag_graph,
    build_generation_system_prompt,
    conversation_messages,
    make_retrieve_tool,
    recent_tool_messages,
    serialize_documents,
)
from ..documents import build_vector_store, format_docs, load_blog_post, split_documents
from ..prompts import RAG_PROMPT
from ..rag_graph import build_rag_graph
from ..semantic_search import search_examples
from ..summarization import summarize_documents


@pytest.fixture
def embeddings():
    return DeterministicFakeEmbedding(size=16)


@pytest.fixture
def docs():
    return [
        Document(page_content="Task decomposition breaks a hard task into smaller steps.", metadata={"source": "blog"}),
        Document(page_content="Chain of thought prompts the model to think step by step.", metadata={"source": "blog"}),
        Document(page_content="Tree of thoughts explores several reasoning paths.", metadata={"source": "paper"}),
    ]


@pytest.fixture
def vector_store(docs, embeddings):
    return build_vector_store(docs, embeddings)


class TestDocuments:

    def test_split_documents_respects_chunk_size(self):
        long_doc = Document(page_content=" ".join(["word"] * 600))
        chunks = split_documents([long_doc], chunk_size=1000, chunk_overlap=200)

        assert len(chunks) > 1
        assert all(len(chunk.page_content) <= 1000 for chunk in chunks)

    def test_format_docs(self, docs):
        assert format_docs(docs[:2]) == f"{docs[0].page_content}\n{docs[1].page_content}"
        assert format_docs(docs[:2], separator="\n\n").count("\n\n") == 1

    def test_load_blog_post_parses_paragraphs_only(self):
        with patch("llm_playground.retrieval.documents.WebBaseLoader") as loader_cls:
            loader_cls.return_value.load.return_value = [Document(page_content="text")]
            result = load_blog_post("https://example.com/post")

        assert result[0].page_content == "text"
        kwargs = loader_cls.call_args.kwargs
        assert kwargs["web_paths"] == ("https://example.com/post",)
        assert "parse_only" in kwargs["bs_kwargs"]

    def test_vector_store_search(self, vector_store, docs):
        results = vector_store.similarity_search(docs[0].page_content, k=1)
        assert results[0].page_content == docs[0].page_content


class TestSemanticSearch:

    def test_search_examples(self, vector_store, embeddings):
        results = search_examples(vector_store, embeddings)

        assert len(results["similarity"]) == 3
        document, score = results["similarity_with_score"][0]
        assert isinstance(document, Document)
        assert isinstance(score, float)
        assert len(results["vector_with_score"]) == 1
        assert len(results["mmr_batch"]) == 2
        assert all(len(batch) == 1 for batch in results["mmr_batch"])


class TestRagGraph:

    def test_prompt_contains_question_and_context(self):
        messages = RAG_PROMPT.invoke({"question": "What?", "context": "Because."}).to_messages()
        assert len(messages) == 1
        assert "Question: What?" in messages[0].content
        assert "Context: Because." in messages[0].content

    def test_graph_retrieves_then_generates(self, vector_store):
        model = FakeListChatModel(responses=["It splits tasks into steps."])
        graph = build_rag_graph(vector_store, model)

        result = graph.invoke({"question": "What is Task Decomposition?"})

        assert result["answer"] == "It splits tasks into steps."
        assert len(result["context"]) == 3


class TestConversationalHelpers:

    def test_serialize_documents(self, docs):
        assert serialize_documents(docs[:1]) == (
            "Source: blog\nContent: Task decomposition breaks a hard task into smaller steps."
        )

    def test_retrieve_tool_returns_content_and_artifact(self, vector_store):
        retrieve = make_retrieve_tool(vector_store)
        message = retrieve.invoke({
            "type": "tool_call",
            "name": "retrieve",
            "id": "call_1",
            "args": {"query": "task decomposition"},
        })

        assert isinstance(message, ToolMessage)
        assert message.content.count("Source: ") == 2
        assert len(message.artifact) == 2

    def test_recent_tool_messages_takes_trailing_run(self):
        messages = [
            HumanMessage("q"),
            ToolMessage("old", tool_call_id="1"),
            AIMessage("a"),
            ToolMessage("first", tool_call_id="2"),
            ToolMessage("second", tool_call_id="3"),
        ]
        assert [m.content for m in recent_tool_messages(messages)] == ["first", "second"]
        assert recent_tool_messages([HumanMessage("q")]) == []

    def test_conversation_messages_drops_tool_traffic(self):
        tool_request = AIMessage("", tool_calls=[{"name": "retrieve", "args": {"query": "x"}, "id": "1"}])
        messages = [
            SystemMessage("sys"),
            HumanMessage("q"),
            tool_request,
            ToolMessage("docs", tool_call_id="1"),
            AIMessage("answer"),
        ]
        assert [m.content for m in conversation_messages(messages)] == ["sys", "q", "answer"]

    def test_generation_system_prompt_includes_docs(self):
        prompt = build_generation_system_prompt([
            ToolMessage("doc one", tool_call_id="1"),
            ToolMessage("doc two", tool_call_id="2"),
        ])
        assert prompt.startswith("You are an assistant for question-answering tasks.")
        assert prompt.endswith("\n\ndoc one\ndoc two")


class TestConversationalGraph:

    def test_direct_answer_skips_retrieval(self, vector_store):
        model = MagicMock()
        model.bind_tools.return_value.invoke.return_value = AIMessage("Hello! How can I help?")

        graph = build_conversational_rag_graph(vector_store, model)
        result = graph.invoke({"messages": [HumanMessage("Hello")]})

        assert [m.type for m in result["messages"]] == ["human", "ai"]
        model.invoke.assert_not_called()

    def test_tool_call_then_generate(self, vector_store):
        model = MagicMock()
        model.bind_tools.return_value.invoke.return_value = AIMessage(
            "",
            tool_calls=[{"name": "retrieve", "args": {"query": "task decomposition"}, "id": "call_1"}],
        )
        model.invoke.return_value = AIMessage("Task decomposition splits work into steps.")

        graph = build_conversational_rag_graph(vector_store, model)
        result = graph.invoke({"messages": [HumanMessage("What is Task Decomposition?")]})

        assert [m.type for m in result["messages"]] == ["human", "ai", "tool", "ai"]
        assert result["messages"][-1].content == "Task decomposition splits work into steps."

        prompt = model.invoke.call_args.args[0]
        assert isinstance(prompt[0], SystemMessage)
        assert "Source: " in prompt[0].content
        assert [m.type for m in prompt[1:]] == ["human"]


class TestSummarization:

    def test_summarize_documents(self, docs):
        model = FakeListChatModel(responses=["Agents plan with task decomposition."])
        assert summarize_documents(model, docs) == "Agents plan with task decomposition."
