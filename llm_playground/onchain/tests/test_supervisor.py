"""Tests for the contract analysis supervisor run loop.

The compiled team is replaced by a fake app whose ``astream`` yields graph
states, so no model is ever called.
"""
import asyncio
from unittest.mock import MagicMock, patch

import pytest
from langchain_core.messages import AIMessage, HumanMessage

from ...exceptions import AnalysisTimeoutError
from ..prompts import SUPERVISOR_NAME, SUPERVISOR_PROMPT
from ..supervisor import analyze_contract_with_stream, build_analysis_request, build_contract_analysis_app

ADDRESS = "0x1234567890123456789012345678901234567890"


class FakeApp:
    """Streams a growing message list, like a graph in ``values`` mode."""

    def __init__(self, delay: float = 0.0):
        self.delay = delay
        self.calls = []

    async def astream(self, inputs, config, stream_mode):
        self.calls.append((inputs, config, stream_mode))
        request = inputs["messages"][0]
        request.id = "m0"
        first = AIMessage(content="Delegating to data_fetcher_agent", id="m1")
        second = AIMessage(content="Report saved", id="m2")

        yield {"messages": [request]}
        await asyncio.sleep(self.delay)
        yield {"messages": [request, first]}
        yield {"messages": [request, first, second]}


class TestAnalyzeContractWithStream:

    def test_prints_each_message_once(self, capsys):
        app = FakeApp()
        asyncio.run(analyze_contract_with_stream(ADDRESS, timeout_seconds=5, app=app, thread_id="t-1"))

        out = capsys.readouterr().out
        assert out.count(f"Analyze this contract: {ADDRESS}") == 1
        assert out.count("Delegating to data_fetcher_agent") == 1
        assert out.count("Report saved") == 1

        _, config, stream_mode = app.calls[0]
        assert stream_mode == "values"
        assert config["configurable"]["thread_id"] == "t-1"
        assert config["recursion_limit"] > 25

    def test_timeout(self):
        app = FakeApp(delay=1.0)
        with pytest.raises(AnalysisTimeoutError) as exc_info:
            asyncio.run(analyze_contract_with_stream(ADDRESS, timeout_seconds=0.05, app=app))

        assert isinstance(exc_info.value, TimeoutError)
        assert str(exc_info.value) == "Analysis timed out after 0.05s"

    def test_request_carries_address(self):
        request = build_analysis_request(ADDRESS)
        assert isinstance(request["messages"][0], HumanMessage)
        assert ADDRESS in request["messages"][0].content


class TestBuildContractAnalysisApp:

    @patch("llm_playground.onchain.supervisor.create_contract_analysis_agents")
    @patch("llm_playground.onchain.supervisor.create_supervisor")
    def test_supervisor_wiring(self, mock_create_supervisor, mock_agents):
        model = MagicMock()
        checkpointer = MagicMock()
        mock_agents.return_value = ["a", "b"]

        app = build_contract_analysis_app(model=model, checkpointer=checkpointer)

        mock_agents.assert_called_once_with(model)
        mock_create_supervisor.assert_called_once_with(
            ["a", "b"],
            model=model,
            prompt=SUPERVISOR_PROMPT,
            supervisor_name=SUPERVISOR_NAME,
        )
        mock_create_supervisor.return_value.compile.assert_called_once_with(checkpointer=checkpointer)
        assert app is mock_create_supervisor.return_value.compile.return_value
        assert SUPERVISOR_NAME == "God"


def echo_graph(checkpointer):
    """One-node graph answering every request with a fixed message."""
    from langgraph.graph import END, START, MessagesState, StateGraph

    def answer(state: MessagesState):
        return {"messages": [AIMessage(content="Report saved", id="r1")]}

    builder = StateGraph(MessagesState)
    builder.add_node("answer", answer)
    builder.add_edge(START, "answer")
    builder.add_edge("answer", END)
    return builder.compile(checkpointer=checkpointer)


class TestSqliteCheckpointedRun:

    def test_streams_with_sqlite_backend(self, monkeypatch, tmp_path, capsys):
        pytest.importorskip("langgraph.checkpoint.sqlite.aio")
        from langgraph.checkpoint.sqlite.aio import AsyncSqliteSaver

        monkeypatch.setenv("LANGGRAPH_CHECKPOINTER", "sqlite")
        monkeypatch.setenv("LANGGRAPH_SQLITE_PATH", str(tmp_path / "checkpoints.sqlite"))
        used = []

        def build_app(checkpointer):
            used.append(checkpointer)
            return echo_graph(checkpointer)

        with patch("llm_playground.onchain.supervisor.build_contract_analysis_app", side_effect=build_app):
            asyncio.run(analyze_contract_with_stream(ADDRESS, timeout_seconds=30, thread_id="sqlite-1"))

        assert isinstance(used[0], AsyncSqliteSaver)
        out = capsys.readouterr().out
        assert out.count(f"Analyze this contract: {ADDRESS}") == 1
        assert out.count("Report saved") == 1
