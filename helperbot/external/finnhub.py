"""Finnhub quote and company profile client."""

import asyncio
from typing import TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from helperbot.errors import (
    ConfigurationError,
    DecodeError,
    HelperBotError,
    HTTPStatusError,
    NetworkError,
    NotFoundError,
)
from helperbot.models.quote import CompanyProfile, Quote

M = TypeVar("M", bound=BaseModel)


class FinnhubClient:
    """Finnhub REST client for quotes and company profiles."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://finnhub.io/api/v1",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize Finnhub client.

        Args:
            api_key: Finnhub API token, may be empty (checked per request)
            base_url: API base URL
            timeout: Limit in seconds for the whole call, body included
            client: Pre-built HTTP client (tests inject a mock transport here)
        """
        self.api_key = api_key.strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_quote(self, symbol: str) -> Quote:
        """Fetch the current quote for a symbol.

        Args:
            symbol: Upper-cased ticker symbol

        Returns:
            Quote with a non-zero current price

        Raises:
            ConfigurationError: If no API key is configured
            NetworkError: On connection failure or timeout
            HTTPStatusError: On any non-200 response
            DecodeError: If the body is not the expected JSON shape
            NotFoundError: If the feed returns a zero current price
        """
        quote = await self._get("/quote", symbol, Quote)
        if quote.current_price == 0:
            raise NotFoundError("symbol not found or no data available")

        logger.info(f"Fetched quote for {symbol}: {quote.current_price}")
        return quote

    async def fetch_profile(self, symbol: str) -> CompanyProfile:
        """Fetch the company profile for a symbol.

        Raises:
            Same errors as fetch_quote, except NotFoundError
        """
        return await self._get("/stock/profile2", symbol, CompanyProfile)

    async def fetch_profile_optional(self, symbol: str) -> CompanyProfile | None:
        """Fetch the company profile, discarding any failure.

        Args:
            symbol: Upper-cased ticker symbol

        Returns:
            CompanyProfile, or None if the fetch failed for any expected reason
        """
        try:
            return await self.fetch_profile(symbol)
        except HelperBotError as e:
            logger.debug(f"Company profile unavailable for {symbol}: {e}")
            return None

    async def _get(self, path: str, symbol: str, model: type[M]) -> M:
        """Issue a GET request and decode the body into ``model``."""
        if not self.api_key:
            raise ConfigurationError("FINNHUB_API_KEY not configured")

        url = f"{self.base_url}{path}"
        logger.debug(f"Requesting {url} for {symbol}")

        try:
            async with asyncio.timeout(self.timeout):
                response = await self.client.get(
                    url, params={"symbol": symbol, "token": self.api_key}
                )
        except (httpx.TimeoutException, TimeoutError) as e:
            raise NetworkError(f"Finnhub request to {path} timed out", timeout=True) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Finnhub request to {path} failed: {type(e).__name__}") from e

        if response.status_code != httpx.codes.OK:
            raise HTTPStatusError(response.status_code)

        try:
            return model.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise DecodeError(f"Unexpected Finnhub response from {path}: {e}") from e

    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()
