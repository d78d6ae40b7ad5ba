"""Wiring tests for the supervisor and swarm demos; agent construction is patched out."""
import os
from datetime import datetime
from unittest.mock import MagicMock, patch

from langchain_core.messages import AIMessage

from ..supervisor_demo import SUPERVISOR_PROMPT, build_supervisor_app
from ..swarm_demo import THREAD_ID, TURNS, build_swarm_app, run as run_swarm
from ..token_research.swarm import (
    MARKET_RESEARCHER,
    SOCIAL_ANALYST,
    SUPERVISOR,
    build_token_research_swarm,
    format_swarm_report,
    run_token_research,
)
from ..tools import add, multiply


def agent_kwargs(create_agent) -> dict:
    return {call.kwargs["name"]: call.kwargs for call in create_agent.call_args_list}


def tool_names(tools) -> list:
    return [getattr(t, "name", None) for t in tools]


class TestArithmeticTools:

    def test_add(self):
        assert add.invoke({"a": 2, "b": 3}) == 5

    def test_multiply(self):
        assert multiply.invoke({"a": 4, "b": 5}) == 20


class TestSupervisorDemo:

    def test_experts_and_supervisor(self):
        model = MagicMock()
        search = MagicMock()
        with patch("llm_playground.multi_agent.supervisor_demo.create_agent") as create_agent, \
                patch("llm_playground.multi_agent.supervisor_demo.create_supervisor") as create_supervisor:
            build_supervisor_app(model, search_tools=[search])

        experts = agent_kwargs(create_agent)
        assert set(experts) == {"research_expert", "math_expert", "review_expert"}
        assert experts["research_expert"]["tools"] == [search]
        assert tool_names(experts["math_expert"]["tools"]) == ["add", "multiply"]
        assert experts["review_expert"]["tools"] == []

        agents = create_supervisor.call_args.args[0]
        assert agents == [create_agent.return_value] * 3
        assert create_supervisor.call_args.kwargs["prompt"] == SUPERVISOR_PROMPT
        create_supervisor.return_value.compile.assert_called_once_with()


class TestSwarmDemo:

    def test_alice_and_bob_hand_off(self):
        with patch("llm_playground.multi_agent.swarm_demo.create_agent") as create_agent, \
                patch("llm_playground.multi_agent.swarm_demo.create_swarm") as create_swarm:
            build_swarm_app(MagicMock())

        agents = agent_kwargs(create_agent)
        assert tool_names(agents["Alice"]["tools"]) == ["add", "transfer_to_bob"]
        assert tool_names(agents["Bob"]["tools"]) == ["transfer_to_alice"]
        assert create_swarm.call_args.kwargs["default_active_agent"] == "Alice"
        assert create_swarm.return_value.compile.call_args.kwargs["checkpointer"] is not None

    def test_run_uses_one_thread_for_both_turns(self, capsys):
        app = MagicMock()
        app.invoke.side_effect = [
            {"messages": [AIMessage("Ahoy, matey!")], "active_agent": "Bob"},
            {"messages": [AIMessage("5 + 7 be 12, arr!")], "active_agent": "Bob"},
        ]

        states = run_swarm(app=app)

        assert len(states) == 2
        sent = [call.args[0]["messages"][0].content for call in app.invoke.call_args_list]
        assert sent == TURNS
        assert {call.args[1]["configurable"]["thread_id"] for call in app.invoke.call_args_list} == {THREAD_ID}
        assert "active agent => Bob" in capsys.readouterr().out


class TestTokenResearch:

    def test_swarm_wiring(self):
        market_tool = MagicMock(name="tavily")
        social_tool = MagicMock(name="farcaster")
        with patch("llm_playground.multi_agent.token_research.swarm.create_agent") as create_agent, \
                patch("llm_playground.multi_agent.token_research.swarm.create_swarm") as create_swarm:
            build_token_research_swarm(MagicMock(), market_tools=[market_tool], social_tools=[social_tool])

        agents = agent_kwargs(create_agent)
        assert agents[MARKET_RESEARCHER]["tools"][0] is market_tool
        assert tool_names(agents[MARKET_RESEARCHER]["tools"][1:]) == ["transfer_to_supervisor"]
        assert agents[SOCIAL_ANALYST]["tools"][0] is social_tool
        assert tool_names(agents[SUPERVISOR]["tools"]) == [
            "transfer_to_market_researcher",
            "transfer_to_social_analyst",
        ]
        assert create_swarm.call_args.kwargs["default_active_agent"] == SUPERVISOR

    def test_format_swarm_report(self):
        assert format_swarm_report("0xabc", "Looks healthy.") == (
            "# Swarm Agent Research Report\n\n## Token: 0xabc\n\nLooks healthy."
        )

    def test_run_writes_report(self, tmp_path):
        app = MagicMock()
        app.invoke.return_value = {"messages": [AIMessage("### 1. TOKEN FUNDAMENTALS\n...")]}

        path = run_token_research(
            "0xabc",
            app=app,
            reports_dir=str(tmp_path),
            now=datetime(2024, 3, 5, 14, 7, 9),
        )

        assert os.path.basename(path) == "swarm_report_2024-03-05_14-07-09.md"
        with open(path, encoding="utf-8") as f:
            assert f.read() == "# Swarm Agent Research Report\n\n## Token: 0xabc\n\n### 1. TOKEN FUNDAMENTALS\n..."
        assert app.invoke.call_args.args[0]["messages"][0].content == "0xabc"
