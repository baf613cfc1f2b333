"""Shared test fixtures."""

import asyncio
from collections.abc import Callable

import httpx
import pytest
import pytest_asyncio

from helperbot.commands.handlers import CommandHandlers
from helperbot.external.finnhub import FinnhubClient
from helperbot.external.leetcode import LeetCodeClient

RequestHandler = Callable[[httpx.Request], httpx.Response]

QUOTE_PAYLOAD = {
    "c": 189.5,
    "d": 1.25,
    "dp": 0.664,
    "h": 190.1,
    "l": 187.2,
    "o": 188.0,
    "pc": 188.25,
}

PROFILE_PAYLOAD = {
    "name": "Apple Inc",
    "marketCapitalization": 2950000.5,
    "finnhubIndustry": "Technology",
    "exchange": "NASDAQ NMS - GLOBAL MARKET",
}


class RecordingSink:
    """Reply sink that records what would have been sent."""

    def __init__(self) -> None:
        self.sent: list[tuple[int, str, int | None]] = []

    async def send_message(
        self, chat_id: int, text: str, message_thread_id: int | None = None
    ) -> None:
        self.sent.append((chat_id, text, message_thread_id))

    @property
    def texts(self) -> list[str]:
        return [text for _, text, _ in self.sent]


def _mock_client(handler: RequestHandler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler), timeout=10)


def _daily_question_payload(title: str, slug: str, difficulty: str) -> dict:
    return {
        "data": {
            "activeDailyCodingChallengeQuestion": {
                "question": {"title": title, "titleSlug": slug, "difficulty": difficulty}
            }
        }
    }


def _finnhub_router(
    quote: httpx.Response | None = None,
    profile: httpx.Response | None = None,
    calls: list[httpx.Request] | None = None,
) -> RequestHandler:
    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if request.url.path.endswith("/quote"):
            return quote if quote is not None else httpx.Response(200, json=QUOTE_PAYLOAD)
        if request.url.path.endswith("/stock/profile2"):
            return profile if profile is not None else httpx.Response(200, json=PROFILE_PAYLOAD)
        return httpx.Response(404)

    return handler


@pytest.fixture
def mock_client() -> Callable[[RequestHandler], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are served by a handler function."""
    return _mock_client


@pytest.fixture
def daily_question_payload() -> Callable[[str, str, str], dict]:
    """Build a GraphQL daily challenge response body."""
    return _daily_question_payload


@pytest.fixture
def finnhub_router() -> Callable[..., RequestHandler]:
    """Serve /quote and /stock/profile2 with canned responses."""
    return _finnhub_router


@pytest.fixture
def quote_payload() -> dict:
    return dict(QUOTE_PAYLOAD)


@pytest.fixture
def profile_payload() -> dict:
    return dict(PROFILE_PAYLOAD)


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_handlers() -> Callable[..., CommandHandlers]:
    """Factory for CommandHandlers backed by mock transports."""

    def default_leetcode(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=_daily_question_payload("Two Sum", "two-sum", "Easy"))

    def factory(
        leetcode_handler: RequestHandler | None = None,
        finnhub_handler: RequestHandler | None = None,
        api_key: str = "test-key",
    ) -> CommandHandlers:
        leetcode = LeetCodeClient(
            graphql_url="https://leetcode.test/graphql",
            client=_mock_client(leetcode_handler or default_leetcode),
        )
        finnhub = FinnhubClient(
            api_key=api_key,
            base_url="https://finnhub.test/api/v1",
            client=_mock_client(finnhub_handler or _finnhub_router()),
        )
        return CommandHandlers(leetcode, finnhub)

    return factory


@pytest_asyncio.fixture
async def slow_drip_server():
    """Local HTTP server that trickles a JSON body one byte at a time.

    Yields:
        Factory taking (body, delay) and returning the server base URL
    """
    servers: list[asyncio.Server] = []
    writers: list[asyncio.StreamWriter] = []

    async def start(body: bytes, delay: float) -> str:
        async def serve(reader: asyncio.StreamReader, writer: asyncio.StreamWriter) -> None:
            writers.append(writer)
            try:
                await reader.readuntil(b"\r\n\r\n")
                writer.write(
                    b"HTTP/1.1 200 OK\r\n"
                    b"Content-Type: application/json\r\n"
                    b"Content-Length: " + str(len(body)).encode() + b"\r\n"
                    b"Connection: close\r\n\r\n"
                )
                await writer.drain()
                for i in range(len(body)):
                    await asyncio.sleep(delay)
                    if writer.is_closing():
                        break
                    writer.write(body[i : i + 1])
                    await writer.drain()
            except (ConnectionError, asyncio.IncompleteReadError):
                pass
            finally:
                writer.close()

        server = await asyncio.start_server(serve, "127.0.0.1", 0)
        servers.append(server)
        port = server.sockets[0].getsockname()[1]
        return f"http://127.0.0.1:{port}"

    yield start

    for writer in writers:
        writer.close()
    for server in servers:
        server.close()
        await server.wait_closed()
