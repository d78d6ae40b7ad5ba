"""Token research swarm: market and social workers under a supervisor, ending in a markdown report."""
from .swarm import build_token_research_swarm, run_token_research

__all__ = ["build_token_research_swarm", "run_token_research"]
