"""Unit tests for the data collection tools."""
from unittest.mock import MagicMock, patch

import pytest

from ...exceptions import ExternalServiceError
from ..market_clients import CoinGeckoClient, EtherscanClient
from ..tools.fetch_tools import coingecko_fetch, etherscan_fetch, farcaster_fetch

ADDRESS = "0x1234567890123456789012345678901234567890"


@pytest.fixture
def no_api_keys(monkeypatch):
    for key in ("NEYNAR_API_KEY", "COINGECKO_API_KEY", "ETHERSCAN_API_KEY"):
        monkeypatch.delenv(key, raising=False)


class TestInvalidAddress:

    @pytest.mark.parametrize("fetch_tool", [farcaster_fetch, coingecko_fetch, etherscan_fetch])
    def test_rejects_bad_address(self, fetch_tool, no_api_keys):
        result = fetch_tool.invoke({"contract_address": "0x123"})
        assert result == "Error: Invalid Ethereum contract address format"


class TestMockData:

    def test_farcaster_mock(self, no_api_keys):
        result = farcaster_fetch.invoke({"contract_address": ADDRESS})
        assert result.startswith(f"Farcaster data for contract {ADDRESS}:")
        assert "127 mentions in the last 24 hours" in result

    def test_coingecko_mock(self, no_api_keys):
        result = coingecko_fetch.invoke({"contract_address": ADDRESS})
        assert result.startswith(f"Coingecko data for contract {ADDRESS}:")
        assert "- Current price: $0.0458" in result

    def test_etherscan_mock(self, no_api_keys):
        result = etherscan_fetch.invoke({"contract_address": ADDRESS})
        assert result.startswith(f"Etherscan data for contract {ADDRESS}:")
        assert "- Unique holders: 1,459" in result


class TestLiveClients:

    def test_farcaster_uses_contract_search(self, monkeypatch):
        monkeypatch.setenv("NEYNAR_API_KEY", "neynar-test")
        with patch("llm_playground.onchain.tools.fetch_tools.FarcasterContractSearchTool") as tool_cls:
            tool_cls.return_value.invoke.return_value = "Farcaster data summary:\n- 3 mentions found"
            result = farcaster_fetch.invoke({"contract_address": ADDRESS})

        tool_cls.return_value.invoke.assert_called_once_with({"query": ADDRESS})
        assert result == f"Farcaster data for contract {ADDRESS}:\nFarcaster data summary:\n- 3 mentions found"

    def test_etherscan_error_is_reported(self, monkeypatch):
        monkeypatch.setenv("ETHERSCAN_API_KEY", "etherscan-test")
        with patch.object(EtherscanClient, "contract_summary", side_effect=ExternalServiceError("Etherscan", "Invalid API Key")):
            result = etherscan_fetch.invoke({"contract_address": ADDRESS})
        assert result == "Error fetching Etherscan data: Etherscan API error: Invalid API Key"

    def test_coingecko_live_summary(self, monkeypatch):
        monkeypatch.setenv("COINGECKO_API_KEY", "cg-test")
        monkeypatch.delenv("COINGECKO_API_BASE", raising=False)
        payload = {
            "name": "Example",
            "symbol": "exm",
            "market_data": {
                "current_price": {"usd": 0.0458},
                "price_change_percentage_24h": 12.3,
                "price_change_percentage_7d": 45.7,
                "market_cap": {"usd": 4580000},
                "total_volume": {"usd": 1250000},
            },
        }
        response = MagicMock()
        response.json.return_value = payload
        with patch("llm_playground.onchain.market_clients.requests.get", return_value=response) as mock_get:
            result = coingecko_fetch.invoke({"contract_address": ADDRESS})

        url = mock_get.call_args[0][0]
        assert url == f"https://pro-api.coingecko.com/api/v3/coins/ethereum/contract/{ADDRESS.lower()}"
        assert mock_get.call_args.kwargs["headers"]["x-cg-pro-api-key"] == "cg-test"
        assert "- Token: Example (EXM)" in result
        assert "- Current price: $0.0458" in result
        assert "- 24h change: +12.3%" in result
        assert "- Market cap: $4,580,000" in result


class TestEtherscanClient:

    def test_contract_summary(self, monkeypatch):
        monkeypatch.delenv("ETHERSCAN_BASE_URL", raising=False)
        client = EtherscanClient(api_key="etherscan-test")
        source = {"status": "1", "message": "OK", "result": [
            {"SourceCode": "contract X {}", "ContractName": "X", "CompilerVersion": "v0.8.20", "Proxy": "0"}
        ]}
        creation = {"status": "1", "message": "OK", "result": [
            {"contractCreator": "0xcreator", "txHash": "0xtx"}
        ]}
        responses = [MagicMock(), MagicMock()]
        responses[0].json.return_value = source
        responses[1].json.return_value = creation

        with patch("llm_playground.onchain.market_clients.requests.get", side_effect=responses) as mock_get:
            summary = client.contract_summary(ADDRESS)

        first_params = mock_get.call_args_list[0].kwargs["params"]
        assert first_params["chainid"] == 1
        assert first_params["apikey"] == "etherscan-test"
        assert "- Contract verified: Yes" in summary
        assert "- Contract name: X" in summary
        assert "- Creator address: 0xcreator" in summary

    def test_status_zero_raises(self):
        client = EtherscanClient(api_key="bad")
        response = MagicMock()
        response.json.return_value = {"status": "0", "message": "NOTOK", "result": "Invalid API Key"}
        with patch("llm_playground.onchain.market_clients.requests.get", return_value=response):
            with pytest.raises(ExternalServiceError, match="Invalid API Key"):
                client.get_source_code(ADDRESS)

    def test_public_coingecko_base_without_key(self, monkeypatch):
        monkeypatch.delenv("COINGECKO_API_KEY", raising=False)
        monkeypatch.delenv("COINGECKO_API_BASE", raising=False)
        client = CoinGeckoClient(api_key="")
        assert client._get_base_url() == "https://api.coingecko.com/api/v3"
        assert "x-cg-pro-api-key" not in client._headers()
