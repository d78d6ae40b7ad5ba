"""Tests for the Tavily agents; the search tool is replaced by a local tool."""
from unittest.mock import MagicMock, patch

from langchain_core.messages import AIMessage, HumanMessage
from langchain_core.tools import tool
from langgraph.graph import END

from ..react_agent import (
    THREAD_ID,
    TOKEN_QUESTION,
    WEATHER_FOLLOW_UP,
    WEATHER_QUESTION,
    build_custom_agent_graph,
    run_simple_agent,
    run_token_lookup,
    run_weather_agent,
    should_continue,
)


@tool
def search(query: str) -> str:
    """Look up the weather."""
    return "Sunny, 20C"


def tool_call(query: str, call_id: str = "call_1") -> AIMessage:
    return AIMessage("", tool_calls=[{"name": "search", "args": {"query": query}, "id": call_id}])


class TestShouldContinue:

    def test_routes_to_tools_on_tool_calls(self):
        assert should_continue({"messages": [HumanMessage("hi"), tool_call("sf")]}) == "tools"

    def test_ends_on_plain_answer(self):
        assert should_continue({"messages": [HumanMessage("hi"), AIMessage("hello")]}) == END


class TestCustomGraph:

    def test_loops_through_tools(self):
        model = MagicMock()
        model.bind_tools.return_value.invoke.side_effect = [tool_call("weather sf"), AIMessage("It is sunny in SF.")]

        app = build_custom_agent_graph(model, [search])
        state = app.invoke({"messages": [HumanMessage(WEATHER_QUESTION)]})

        assert [m.type for m in state["messages"]] == ["human", "ai", "tool", "ai"]
        assert state["messages"][2].content == "Sunny, 20C"
        assert state["messages"][-1].content == "It is sunny in SF."

    def test_weather_agent_carries_history(self, capsys):
        model = MagicMock()
        bound = model.bind_tools.return_value
        bound.invoke.side_effect = [
            tool_call("weather sf"),
            AIMessage("It is sunny in SF."),
            AIMessage("It is cloudy in NY."),
        ]

        responses = run_weather_agent(model, [search])

        assert responses == ["It is sunny in SF.", "It is cloudy in NY."]
        follow_up_messages = bound.invoke.call_args_list[2].args[0]
        assert follow_up_messages[0].content == WEATHER_QUESTION
        assert follow_up_messages[-1].content == WEATHER_FOLLOW_UP
        assert "response 2 => It is cloudy in NY." in capsys.readouterr().out


class TestPrebuiltAgent:

    def test_simple_agent_reuses_thread(self):
        with patch("llm_playground.agents.react_agent.create_agent") as create_agent:
            agent = create_agent.return_value
            agent.invoke.side_effect = [
                {"messages": [AIMessage("Sunny in SF")]},
                {"messages": [AIMessage("Cloudy in NY")]},
            ]
            responses = run_simple_agent(MagicMock(), [search])

        assert responses == ["Sunny in SF", "Cloudy in NY"]
        assert create_agent.call_args.kwargs["checkpointer"] is not None
        configs = [call.args[1] for call in agent.invoke.call_args_list]
        assert all(config["configurable"]["thread_id"] == THREAD_ID for config in configs)

    def test_token_lookup(self):
        with patch("llm_playground.agents.react_agent.create_agent") as create_agent:
            create_agent.return_value.invoke.return_value = {"messages": [AIMessage("It is a Base token.")]}
            response = run_token_lookup(MagicMock(), [search])

        assert response == "It is a Base token."
        sent = create_agent.return_value.invoke.call_args.args[0]["messages"][0]
        assert sent.content == TOKEN_QUESTION
