"""Contract analysis supervisor.

A team of tool-calling agents (data fetcher, social/market/on-chain analysts,
opportunity evaluator and report writer) coordinated by a supervisor:
- Farcaster casts via Neynar, market data via CoinGecko, contract data via Etherscan
- Mock data whenever an API key is missing
- A timestamped markdown report as the final artifact
"""
from .validators import is_valid_ethereum_address

__all__ = ["is_valid_ethereum_address"]
