"""Telegram transport."""

from helperbot.transport.poller import UpdatePoller
from helperbot.transport.telegram import TelegramClient, parse_message

__all__ = [
    "TelegramClient",
    "UpdatePoller",
    "parse_message",
]
