"""
HTTP client for the Neynar Farcaster API.

Only the cast search endpoint is used: it returns casts matching a free text
query, validated into ``NeynarSearchResponse``.
"""
import os
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from llm_playground.exceptions import ConfigurationError, ExternalServiceError
from llm_playground.utils.logger import logger

from .schemas import NeynarSearchResponse

DEFAULT_SEARCH_LIMIT = 15


class NeynarClient:
    """
    HTTP client for Neynar cast search.

    Each request opens and closes its own ``httpx.Client``, so instances hold
    no connections between calls.

    Raises ConfigurationError on construction when no API key is available.
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None, timeout: float = 30.0):
        self.api_key = api_key or os.getenv("NEYNAR_API_KEY")
        if not self.api_key:
            raise ConfigurationError(
                "Neynar API key not found. Please set NEYNAR_API_KEY environment variable."
            )
        self.base_url = (base_url or os.getenv("NEYNAR_API_BASE", "https://api.neynar.com/v2")).rstrip("/")
        self.timeout = timeout

    def _get_headers(self) -> Dict[str, str]:
        return {
            "accept": "application/json",
            "x-api-key": self.api_key,
        }

    def _handle_response(self, response: httpx.Response) -> Dict[str, Any]:
        if response.status_code >= 400:
            raise ExternalServiceError(
                "Neynar",
                f"Failed to fetch from Farcaster API: {response.status_code}",
                response.status_code,
            )
        return response.json()

    def search_casts(self, query: str, limit: int = DEFAULT_SEARCH_LIMIT) -> NeynarSearchResponse:
        """
        Search casts matching ``query``.

        Raises:
            ExternalServiceError: On an HTTP error or a response that does not
                match the expected cast shape
        """
        url = f"{self.base_url}/farcaster/cast/search"

        logger.info(f"[Neynar] Searching casts q={query!r} limit={limit}")

        with httpx.Client(timeout=self.timeout) as client:
            response = client.get(url, params={"q": query, "limit": limit}, headers=self._get_headers())
        data = self._handle_response(response)

        try:
            return NeynarSearchResponse.model_validate(data)
        except ValidationError as e:
            raise ExternalServiceError("Neynar", f"Invalid API response format: {e}") from e
