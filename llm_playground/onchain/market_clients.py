"""
Live Etherscan and CoinGecko lookups for a token contract.

Each client formats its response as the same bullet summary the mock data
uses.
"""
import os
from typing import Any, Dict, List, Optional

import requests

from llm_playground.exceptions import ExternalServiceError
from llm_playground.utils.logger import logger

from .validators import require_valid_address


def _fmt_usd(value: Any) -> str:
    if value is None:
        return "n/a"
    try:
        number = float(value)
    except (TypeError, ValueError):
        return str(value)
    if abs(number) >= 1:
        return f"${number:,.0f}"
    return f"${number:.4f}"


def _fmt_pct(value: Any) -> str:
    if value is None:
        return "n/a"
    try:
        return f"{float(value):+.1f}%"
    except (TypeError, ValueError):
        return str(value)


class EtherscanClient:
    """Contract metadata from the Etherscan v2 multichain API."""

    def __init__(self, api_key: Optional[str] = None, chain_id: int = 1, timeout: int = 30):
        self.api_key = (api_key or os.environ.get("ETHERSCAN_API_KEY", "")).strip()
        self.base_url = os.environ.get("ETHERSCAN_BASE_URL", "https://api.etherscan.io/v2/api").rstrip("/")
        self.chain_id = chain_id
        self.timeout = timeout

    def _http_get(self, params: Dict[str, Any]) -> Any:
        p = {"chainid": self.chain_id, **params, "apikey": self.api_key}
        try:
            r = requests.get(self.base_url, params=p, headers={"Accept": "application/json"}, timeout=self.timeout)
            r.raise_for_status()
            payload = r.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise ExternalServiceError("Etherscan", str(e), status) from e
        except requests.RequestException as e:
            raise ExternalServiceError("Etherscan", str(e)) from e

        if str(payload.get("status")) != "1":
            raise ExternalServiceError("Etherscan", str(payload.get("result") or payload.get("message")))
        return payload.get("result")

    def get_source_code(self, address: str) -> Dict[str, Any]:
        rows = self._http_get({"module": "contract", "action": "getsourcecode", "address": address})
        return rows[0] if isinstance(rows, list) and rows else {}

    def get_contract_creation(self, address: str) -> Dict[str, Any]:
        rows = self._http_get({"module": "contract", "action": "getcontractcreation", "contractaddresses": address})
        return rows[0] if isinstance(rows, list) and rows else {}

    def contract_summary(self, address: str) -> str:
        """Bullet summary of verification status and creator for ``address``."""
        require_valid_address(address)
        logger.info(f"[Etherscan] Fetching contract data for {address}")

        source = self.get_source_code(address)
        creation = self.get_contract_creation(address)

        verified = bool(source.get("SourceCode"))
        lines: List[str] = [
            f"Etherscan data for contract {address}:",
            f"- Contract verified: {'Yes' if verified else 'No'}",
            f"- Contract name: {source.get('ContractName') or 'Unknown'}",
            f"- Compiler: {source.get('CompilerVersion') or 'n/a'}",
            f"- Proxy: {'Yes' if str(source.get('Proxy', '0')) == '1' else 'No'}",
            f"- Creator address: {creation.get('contractCreator') or 'n/a'}",
            f"- Creation transaction: {creation.get('txHash') or 'n/a'}",
        ]
        return "\n".join(lines)


class CoinGeckoClient:
    """Market data for a token looked up by its contract address."""

    def __init__(self, api_key: Optional[str] = None, platform: str = "ethereum", timeout: int = 30):
        self.api_key = (api_key or os.environ.get("COINGECKO_API_KEY", "")).strip()
        self.platform = platform
        self.timeout = timeout

    def _get_base_url(self) -> str:
        if self.api_key:
            return os.environ.get("COINGECKO_API_BASE", "https://pro-api.coingecko.com/api/v3").rstrip("/")
        return os.environ.get("COINGECKO_API_BASE", "https://api.coingecko.com/api/v3").rstrip("/")

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {"Accept": "application/json"}
        if self.api_key:
            headers["x-cg-pro-api-key"] = self.api_key
        return headers

    def _http_get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        url = f"{self._get_base_url()}{path}"
        try:
            r = requests.get(url, headers=self._headers(), params=params or {}, timeout=self.timeout)
            r.raise_for_status()
            return r.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise ExternalServiceError("CoinGecko", str(e), status) from e
        except requests.RequestException as e:
            raise ExternalServiceError("CoinGecko", str(e)) from e

    def token_summary(self, address: str) -> str:
        """Bullet summary of price, changes, market cap and volume for ``address``."""
        require_valid_address(address)
        logger.info(f"[CoinGecko] Fetching market data for {address}")

        data = self._http_get(f"/coins/{self.platform}/contract/{address.lower()}")
        market = data.get("market_data") or {}

        lines: List[str] = [
            f"Coingecko data for contract {address}:",
            f"- Token: {data.get('name', 'Unknown')} ({str(data.get('symbol', '')).upper()})",
            f"- Current price: {_fmt_usd((market.get('current_price') or {}).get('usd'))}",
            f"- 24h change: {_fmt_pct(market.get('price_change_percentage_24h'))}",
            f"- 7d change: {_fmt_pct(market.get('price_change_percentage_7d'))}",
            f"- Market cap: {_fmt_usd((market.get('market_cap') or {}).get('usd'))}",
            f"- 24h volume: {_fmt_usd((market.get('total_volume') or {}).get('usd'))}",
            f"- All-time high: {_fmt_usd((market.get('ath') or {}).get('usd'))}",
        ]
        if data.get("genesis_date"):
            lines.append(f"- Launched: {data['genesis_date']}")
        return "\n".join(lines)
