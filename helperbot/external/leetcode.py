"""LeetCode daily challenge client."""

import asyncio

import httpx
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from helperbot.errors import DecodeError, HTTPStatusError, NetworkError
from helperbot.models.question import DailyChallengeResponse, DailyQuestion

DAILY_QUESTION_QUERY = """{
    activeDailyCodingChallengeQuestion {
        question {
            title
            titleSlug
            difficulty
        }
    }
}"""


class LeetCodeClient:
    """Fetches the active daily coding challenge over GraphQL."""

    def __init__(
        self,
        graphql_url: str = "https://leetcode.com/graphql",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize LeetCode client.

        Args:
            graphql_url: GraphQL endpoint
            timeout: Limit in seconds for the whole call, body included
            client: Pre-built HTTP client (tests inject a mock transport here)
        """
        self.graphql_url = graphql_url
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(timeout=timeout)

    async def fetch_daily_question(self) -> DailyQuestion:
        """Fetch today's daily question.

        Returns:
            DailyQuestion, with empty strings for fields upstream omitted

        Raises:
            NetworkError: On connection failure or timeout
            HTTPStatusError: On any non-200 response
            DecodeError: If the body is not the expected JSON shape
        """
        logger.debug(f"Requesting daily question from {self.graphql_url}")

        try:
            async with asyncio.timeout(self.timeout):
                response = await self.client.post(
                    self.graphql_url,
                    json={"query": DAILY_QUESTION_QUERY},
                    headers={"Content-Type": "application/json"},
                )
        except (httpx.TimeoutException, TimeoutError) as e:
            raise NetworkError(f"LeetCode request timed out after {self.timeout}s", timeout=True) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"LeetCode request failed: {e}") from e

        if response.status_code != httpx.codes.OK:
            raise HTTPStatusError(response.status_code)

        try:
            payload = DailyChallengeResponse.model_validate_json(response.content)
        except PydanticValidationError as e:
            raise DecodeError(f"Unexpected LeetCode response: {e}") from e

        question = payload.question
        logger.info(f"Fetched daily question '{question.title}' ({question.difficulty})")
        return question

    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()
