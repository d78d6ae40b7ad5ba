"""
Command line entry point.

    llm-playground list
    llm-playground run <demo>
    llm-playground analyze-contract <address> [--timeout SECONDS]
    llm-playground token-research <token>
"""
import argparse
import importlib
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from llm_playground.config.common_settings import CONTRACT_ANALYSIS_TIMEOUT_SECONDS
from llm_playground.exceptions import PlaygroundError
from llm_playground.utils.langsmith import log_tracking_status
from llm_playground.utils.logger import logger
from llm_playground.utils.startup_validation import validate_demo_environment

OPENAI = "OPENAI_API_KEY"
GROQ = "GROQ_API_KEY"
TAVILY = "TAVILY_API_KEY"
NEYNAR = "NEYNAR_API_KEY"
MARKET_DATA_KEYS = ["NEYNAR_API_KEY", "ETHERSCAN_API_KEY", "COINGECKO_API_KEY"]

EXAMPLE_ADDRESS = "0x1234567890123456789012345678901234567890"


@dataclass
class Demo:
    name: str
    description: str
    target: str
    required_keys: List[str]
    optional_keys: List[str] = field(default_factory=list)

    def load(self) -> Callable[[], object]:
        """Import the demo module on first use and return its entry point."""
        module_name, func_name = self.target.split(":")
        return getattr(importlib.import_module(module_name), func_name)


DEMOS: Dict[str, Demo] = {
    demo.name: demo
    for demo in [
        Demo("translation", "Translate with messages and a prompt template",
             "llm_playground.chat.translation:run", [OPENAI]),
        Demo("conversation", "Stateless calls versus passing the history",
             "llm_playground.chat.conversation:run", [GROQ]),
        Demo("tagging", "Classify passages with structured output",
             "llm_playground.extraction.tagging:run", [GROQ]),
        Demo("people_extraction", "Extract people from free text",
             "llm_playground.extraction.people:run", [GROQ, OPENAI]),
        Demo("semantic_search", "Similarity and MMR search over a PDF",
             "llm_playground.retrieval.semantic_search:run", [OPENAI]),
        Demo("rag_graph", "Two-step retrieve/generate graph over a blog post",
             "llm_playground.retrieval.rag_graph:run", [GROQ, OPENAI]),
        Demo("conversational_rag", "Retrieval as a tool, with and without memory",
             "llm_playground.retrieval.conversational_rag:run", [OPENAI]),
        Demo("summarization", "Summarize the main theme of a blog post",
             "llm_playground.retrieval.summarization:run", [OPENAI]),
        Demo("sql_qa", "Answer questions over the Chinook database",
             "llm_playground.sql_qa.graph:run", [GROQ]),
        Demo("react_agent", "Prebuilt search agent with thread memory",
             "llm_playground.agents.react_agent:run_simple_agent", [OPENAI, TAVILY]),
        Demo("weather_agent", "Hand-built agent/tools graph",
             "llm_playground.agents.react_agent:run_weather_agent", [OPENAI, TAVILY]),
        Demo("token_lookup", "Single search about a token contract",
             "llm_playground.agents.react_agent:run_token_lookup", [OPENAI, TAVILY]),
        Demo("web_search", "Agent using OpenAI web search",
             "llm_playground.agents.web_search:run", [OPENAI]),
        Demo("openai_vs_tavily", "Same research prompt through OpenAI search and Tavily",
             "llm_playground.agents.web_search:run_comparison", [OPENAI, TAVILY]),
        Demo("reflection", "Reflection agent with a personality blend",
             "llm_playground.agents.reflection.agent:run", [OPENAI, TAVILY]),
        Demo("agent_supervisor", "Research, math and review experts under a supervisor",
             "llm_playground.multi_agent.supervisor_demo:run", [OPENAI, TAVILY]),
        Demo("agent_swarm", "Alice and Bob handing off to each other",
             "llm_playground.multi_agent.swarm_demo:run", [OPENAI]),
        Demo("token_research", "Market and social research swarm for a token",
             "llm_playground.multi_agent.token_research.swarm:run", [OPENAI, TAVILY, NEYNAR]),
    ]
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="llm-playground", description="Run LangChain / LangGraph demos")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list", help="List the available demos")

    run_parser = subparsers.add_parser("run", help="Run a demo by name")
    run_parser.add_argument("demo", choices=sorted(DEMOS), help="Demo to run")

    analyze_parser = subparsers.add_parser("analyze-contract", help="Analyze an Ethereum contract")
    analyze_parser.add_argument("address", nargs="?", help="Ethereum contract address")
    analyze_parser.add_argument(
        "--timeout",
        type=float,
        default=CONTRACT_ANALYSIS_TIMEOUT_SECONDS,
        help="Time budget in seconds (default: %(default)s)",
    )

    research_parser = subparsers.add_parser("token-research", help="Research a token with the swarm")
    research_parser.add_argument("token", help="Token contract address or symbol")

    return parser


def list_demos() -> int:
    width = max(len(name) for name in DEMOS)
    for name, demo in DEMOS.items():
        print(f"{name.ljust(width)}  {demo.description}")
    return 0


def report_failure(prefix: str, context: str, error: Exception) -> int:
    """Log a failed command and print ``<prefix>: <error>`` to stderr."""
    if isinstance(error, PlaygroundError):
        logger.error(f"[CLI] {context} failed: {error.to_dict()}")
    else:
        logger.exception(f"[CLI] {context} failed")
    print(f"{prefix}: {error}", file=sys.stderr)
    return 1


def run_demo(name: str) -> int:
    demo = DEMOS[name]
    if not validate_demo_environment(name, demo.required_keys, demo.optional_keys):
        print(f"Error: missing configuration for '{name}', see the log above")
        return 1

    log_tracking_status()
    try:
        demo.load()()
    except Exception as e:
        return report_failure(f"Error running {name}", f"Demo {name}", e)
    return 0


def analyze_contract(address: Optional[str], timeout_seconds: float) -> int:
    print("Contract Analysis Tool")
    print("=====================\n")

    if not address:
        print("Error: Please provide a contract address", file=sys.stderr)
        print("Usage: llm-playground analyze-contract [ethereum-address]")
        print(f"Example: llm-playground analyze-contract {EXAMPLE_ADDRESS}")
        return 1

    if not validate_demo_environment("contract_analysis", [OPENAI], MARKET_DATA_KEYS):
        print("Error during analysis: missing configuration, see the log above", file=sys.stderr)
        return 1

    from llm_playground.onchain.supervisor import run_contract_analysis

    try:
        run_contract_analysis(address, timeout_seconds)
    except Exception as e:
        return report_failure("Error during analysis", f"Contract analysis for {address}", e)

    print("\nAnalysis complete")
    return 0


def token_research(token: str) -> int:
    if not validate_demo_environment("token_research", [OPENAI, TAVILY, NEYNAR]):
        return 1

    from llm_playground.multi_agent.token_research import run_token_research

    try:
        run_token_research(token)
    except Exception as e:
        return report_failure("Error during research", f"Token research for {token}", e)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.command == "list":
        return list_demos()
    if args.command == "run":
        return run_demo(args.demo)
    if args.command == "analyze-contract":
        return analyze_contract(args.address, args.timeout)
    return token_research(args.token)


if __name__ == "__main__":
    sys.exit(main())
