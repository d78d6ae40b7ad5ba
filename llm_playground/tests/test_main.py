"""Tests for the command line entry point."""
from unittest.mock import MagicMock, patch

import pytest

from llm_playground.exceptions import AnalysisTimeoutError, ConfigurationError
from llm_playground.main import DEMOS, Demo, build_parser, main

ADDRESS = "0x1234567890123456789012345678901234567890"


class TestRegistry:

    @pytest.mark.parametrize("name", sorted(DEMOS))
    def test_every_target_resolves(self, name):
        assert callable(DEMOS[name].load())

    def test_list(self, capsys):
        assert main(["list"]) == 0
        output = capsys.readouterr().out
        for name in DEMOS:
            assert name in output

    def test_unknown_demo_is_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["run", "no_such_demo"])


class TestRunDemo:

    def test_missing_keys_stop_the_demo(self, monkeypatch, capsys):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)
        with patch.object(Demo, "load") as load:
            assert main(["run", "translation"]) == 1
        load.assert_not_called()
        assert "missing configuration for 'translation'" in capsys.readouterr().out

    def test_runs_demo_when_configured(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        runner = MagicMock()
        with patch.object(Demo, "load", return_value=runner):
            assert main(["run", "translation"]) == 0
        runner.assert_called_once_with()

    def test_demo_failure_exits_non_zero(self, monkeypatch, capsys):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        runner = MagicMock(side_effect=RuntimeError("boom"))
        with patch.object(Demo, "load", return_value=runner):
            assert main(["run", "translation"]) == 1
        assert "Error running translation: boom" in capsys.readouterr().err

    def test_playground_errors_are_logged_as_dicts(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        runner = MagicMock(side_effect=ConfigurationError("GROQ_API_KEY environment variable is required."))
        with patch.object(Demo, "load", return_value=runner), \
                patch("llm_playground.main.logger") as mock_logger:
            assert main(["run", "translation"]) == 1
        logged = mock_logger.error.call_args.args[0]
        assert "'error_type': 'ConfigurationError'" in logged
        assert "'retryable': False" in logged


class TestAnalyzeContract:

    def test_missing_address_prints_usage(self, capsys):
        assert main(["analyze-contract"]) == 1
        captured = capsys.readouterr()
        assert captured.out.startswith("Contract Analysis Tool")
        assert f"Example: llm-playground analyze-contract {ADDRESS}" in captured.out
        assert "Please provide a contract address" in captured.err

    def test_success(self, monkeypatch, capsys):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        with patch("llm_playground.onchain.supervisor.run_contract_analysis") as run_analysis:
            assert main(["analyze-contract", ADDRESS, "--timeout", "30"]) == 0

        run_analysis.assert_called_once_with(ADDRESS, 30.0)
        assert "Analysis complete" in capsys.readouterr().out

    def test_errors_are_reported(self, monkeypatch, capsys):
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        with patch(
            "llm_playground.onchain.supervisor.run_contract_analysis",
            side_effect=AnalysisTimeoutError(1),
        ):
            assert main(["analyze-contract", ADDRESS]) == 1

        assert "Error during analysis: Analysis timed out after 1s" in capsys.readouterr().err


class TestTokenResearch:

    def test_runs_research(self, monkeypatch):
        for key in ("OPENAI_API_KEY", "TAVILY_API_KEY", "NEYNAR_API_KEY"):
            monkeypatch.setenv(key, "test")
        with patch("llm_playground.multi_agent.token_research.run_token_research") as research:
            assert main(["token-research", "0xabc"]) == 0
        research.assert_called_once_with("0xabc")

    def test_unexpected_errors_exit_non_zero(self, monkeypatch, capsys):
        for key in ("OPENAI_API_KEY", "TAVILY_API_KEY", "NEYNAR_API_KEY"):
            monkeypatch.setenv(key, "test")
        with patch(
            "llm_playground.multi_agent.token_research.run_token_research",
            side_effect=ConnectionError("tavily unreachable"),
        ):
            assert main(["token-research", "0xabc"]) == 1
        assert "Error during research: tavily unreachable" in capsys.readouterr().err

    def test_missing_keys(self, monkeypatch):
        monkeypatch.delenv("NEYNAR_API_KEY", raising=False)
        with patch("llm_playground.multi_agent.token_research.run_token_research") as research:
            assert main(["token-research", "0xabc"]) == 1
        research.assert_not_called()
