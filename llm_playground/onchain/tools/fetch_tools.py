"""
Data collection tools for the contract analysis team.

Every tool validates the address first, queries the live service when its API
key is configured and otherwise answers with illustrative mock data.
"""
import os
import textwrap

from langchain_core.tools import tool

from llm_playground.exceptions import ConfigurationError
from llm_playground.utils.logger import logger

from ..market_clients import CoinGeckoClient, EtherscanClient
from ..validators import INVALID_ADDRESS_MESSAGE, is_valid_ethereum_address
from .farcaster_search import FarcasterContractSearchTool
from .schemas import ContractAddressInput


def mock_farcaster_data(contract_address: str) -> str:
    return textwrap.dedent(f"""\
        Farcaster data for contract {contract_address}:
        - 127 mentions in the last 24 hours
        - Sentiment: 78% positive, 15% neutral, 7% negative
        - Key influencers discussing: @crypto_wizard, @defi_analyst, @nft_hunter
        - Common topics: "promising project", "innovative tokenomics", "strong community"
        - Recent activity spike: 3.2x increase in mentions since yesterday""")


def mock_coingecko_data(contract_address: str) -> str:
    return textwrap.dedent(f"""\
        Coingecko data for contract {contract_address}:
        - Current price: $0.0458
        - 24h change: +12.3%
        - 7d change: +45.7%
        - Market cap: $4,580,000
        - 24h volume: $1,250,000
        - Liquidity: $850,000
        - Launched: 14 days ago
        - Initial price: $0.0210""")


def mock_etherscan_data(contract_address: str) -> str:
    return textwrap.dedent(f"""\
        Etherscan data for contract {contract_address}:
        - Contract verified: Yes
        - Created: 2024-05-01
        - Creator address: 0x7a2309a8f1E037ae65C295b4f7dBD24C496ab8B3
        - Total transactions: 5,827
        - Unique holders: 1,459
        - Top 10 holders concentration: 45.3%
        - Recent transaction volume: 325 ETH (24h)
        - Token standard: ERC-20""")


@tool(
    name_or_callable="farcaster_fetch",
    description="Fetch social data about a contract from Farcaster.",
    args_schema=ContractAddressInput,
)
def farcaster_fetch(contract_address: str) -> str:
    """Fetch social data about a contract from Farcaster."""
    if not is_valid_ethereum_address(contract_address):
        return INVALID_ADDRESS_MESSAGE

    try:
        try:
            search_tool = FarcasterContractSearchTool()
        except ConfigurationError:
            logger.warning("[ContractAnalysis] Farcaster API key not found, using mock data instead.")
            return mock_farcaster_data(contract_address)

        result = search_tool.invoke({"query": contract_address})
        return f"Farcaster data for contract {contract_address}:\n{result}"
    except Exception as e:
        return f"Error fetching Farcaster data: {e}"


@tool(
    name_or_callable="coingecko_fetch",
    description="Fetch market data about a token from Coingecko.",
    args_schema=ContractAddressInput,
)
def coingecko_fetch(contract_address: str) -> str:
    """Fetch market data about a token from Coingecko."""
    if not is_valid_ethereum_address(contract_address):
        return INVALID_ADDRESS_MESSAGE

    try:
        if os.environ.get("COINGECKO_API_KEY"):
            return CoinGeckoClient().token_summary(contract_address)
        return mock_coingecko_data(contract_address)
    except Exception as e:
        return f"Error fetching Coingecko data: {e}"


@tool(
    name_or_callable="etherscan_fetch",
    description="Fetch on-chain data about a contract from Etherscan.",
    args_schema=ContractAddressInput,
)
def etherscan_fetch(contract_address: str) -> str:
    """Fetch on-chain data about a contract from Etherscan."""
    if not is_valid_ethereum_address(contract_address):
        return INVALID_ADDRESS_MESSAGE

    try:
        if os.environ.get("ETHERSCAN_API_KEY"):
            return EtherscanClient().contract_summary(contract_address)
        return mock_etherscan_data(contract_address)
    except Exception as e:
        return f"Error fetching Etherscan data: {e}"
