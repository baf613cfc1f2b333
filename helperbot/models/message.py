"""Inbound chat message model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class IncomingMessage:
    """Text message received from the chat transport."""

    chat_id: int
    text: str
    message_id: int = 0
    message_thread_id: int | None = None

    def __str__(self) -> str:
        return f"{self.chat_id}: {self.text}"
