"""Minimal Telegram Bot API client."""

from typing import Any

import httpx
from loguru import logger

from helperbot.errors import TelegramError
from helperbot.models.message import IncomingMessage


def parse_message(update: dict[str, Any]) -> IncomingMessage | None:
    """Extract a text message from a Telegram update.

    Args:
        update: Raw update object

    Returns:
        IncomingMessage, or None for updates without message text
    """
    message = update.get("message")
    if not isinstance(message, dict):
        return None

    text = message.get("text")
    chat = message.get("chat") or {}
    if not isinstance(text, str) or "id" not in chat:
        return None

    return IncomingMessage(
        chat_id=chat["id"],
        text=text,
        message_id=message.get("message_id", 0),
        message_thread_id=message.get("message_thread_id"),
    )


class TelegramClient:
    """Telegram Bot API client over HTTPS long polling."""

    def __init__(
        self,
        token: str,
        api_base: str = "https://api.telegram.org",
        poll_timeout: int = 30,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize Telegram client.

        Args:
            token: Bot token
            api_base: Bot API base URL
            poll_timeout: Server-side long-poll timeout in seconds
            client: Pre-built HTTP client (tests inject a mock transport here)
        """
        self._base_url = f"{api_base.rstrip('/')}/bot{token}"
        self.poll_timeout = poll_timeout
        # HTTP timeout has to outlast the long poll
        self.client = client or httpx.AsyncClient(timeout=poll_timeout + 10)

    async def _call(self, method: str, payload: dict[str, Any] | None = None) -> Any:
        """Call a Bot API method.

        Raises:
            TelegramError: On transport failure or a response with ok=false
        """
        try:
            response = await self.client.post(f"{self._base_url}/{method}", json=payload or {})
        except httpx.HTTPError as e:
            # The request URL embeds the token, keep it out of the message
            raise TelegramError(f"{method} failed: {type(e).__name__}") from e

        try:
            body = response.json()
        except ValueError as e:
            raise TelegramError(
                f"{method} returned non-JSON body (status {response.status_code})"
            ) from e

        if not body.get("ok"):
            description = body.get("description", "unknown error")
            raise TelegramError(f"{method} failed ({response.status_code}): {description}")

        return body.get("result")

    async def get_me(self) -> dict[str, Any]:
        """Return the bot's own user object."""
        return await self._call("getMe")

    async def get_updates(self, offset: int | None = None) -> list[dict[str, Any]]:
        """Long-poll for new message updates.

        Args:
            offset: First update id to return

        Returns:
            List of raw updates
        """
        payload: dict[str, Any] = {
            "timeout": self.poll_timeout,
            "allowed_updates": ["message"],
        }
        if offset is not None:
            payload["offset"] = offset
        return await self._call("getUpdates", payload)

    async def send_message(
        self, chat_id: int, text: str, message_thread_id: int | None = None
    ) -> None:
        """Send a text message.

        Args:
            chat_id: Target chat
            text: Message text
            message_thread_id: Forum topic to reply in, if any
        """
        payload: dict[str, Any] = {"chat_id": chat_id, "text": text}
        if message_thread_id is not None:
            payload["message_thread_id"] = message_thread_id

        await self._call("sendMessage", payload)
        logger.debug(f"Sent message to chat {chat_id}")

    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()
