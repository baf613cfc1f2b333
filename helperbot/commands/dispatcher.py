"""Command registry and dispatcher."""

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

from loguru import logger

from helperbot.models.message import IncomingMessage


class MatchMode(str, Enum):
    """How a trigger is compared against message text."""

    EXACT = "exact"
    PREFIX = "prefix"


class ReplySink(Protocol):
    """Capability to send text back to a conversation."""

    async def send_message(
        self, chat_id: int, text: str, message_thread_id: int | None = None
    ) -> None:
        """Send text to a chat, optionally inside a thread."""
        ...


@dataclass(frozen=True)
class CommandContext:
    """Everything a handler needs to answer one command."""

    message: IncomingMessage
    argument: str
    reply_sink: ReplySink

    async def reply(self, text: str) -> None:
        """Reply in the conversation (and thread) the command came from."""
        await self.reply_sink.send_message(
            self.message.chat_id, text, message_thread_id=self.message.message_thread_id
        )


Handler = Callable[[CommandContext], Awaitable[None]]


@dataclass(frozen=True)
class Command:
    """A trigger bound to its handler."""

    trigger: str
    match_mode: MatchMode
    handler: Handler

    def match(self, text: str) -> str | None:
        """Match message text against this command.

        Returns:
            The argument ("" for exact matches), or None if there is no match
        """
        if self.match_mode is MatchMode.EXACT:
            return "" if text == self.trigger else None

        if text.startswith(self.trigger):
            return text[len(self.trigger) :]
        # Chat clients trim trailing whitespace, so "!s " arrives as "!s"
        bare = self.trigger.rstrip()
        if bare and bare != self.trigger and text.rstrip() == bare:
            return ""
        return None


class CommandRegistry:
    """Immutable, ordered collection of commands."""

    def __init__(self, commands: Iterable[Command]) -> None:
        """Build the registry.

        Args:
            commands: Commands in priority order

        Raises:
            ValueError: If a trigger/match mode pair is registered twice
        """
        self._commands: tuple[Command, ...] = tuple(commands)

        seen: set[tuple[str, MatchMode]] = set()
        for command in self._commands:
            key = (command.trigger, command.match_mode)
            if key in seen:
                raise ValueError(
                    f"Duplicate command registration: {command.trigger!r} ({command.match_mode.value})"
                )
            seen.add(key)

    @property
    def commands(self) -> tuple[Command, ...]:
        return self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def resolve(self, text: str) -> tuple[Command, str] | None:
        """Find the first command matching the text.

        Returns:
            (command, argument), or None if nothing matches
        """
        for command in self._commands:
            argument = command.match(text)
            if argument is not None:
                return command, argument
        return None


def looks_like_command(text: str) -> bool:
    """Whether text is addressed to the bot rather than ordinary chat."""
    return text.startswith(("/", "!"))


class Dispatcher:
    """Routes inbound messages to exactly one handler."""

    def __init__(
        self,
        registry: CommandRegistry,
        reply_sink: ReplySink,
        unknown_handler: Handler | None = None,
    ) -> None:
        """Initialize dispatcher.

        Args:
            registry: Registered commands
            reply_sink: Transport used for replies
            unknown_handler: Called for unmatched commands; None drops them silently
        """
        self.registry = registry
        self.reply_sink = reply_sink
        self.unknown_handler = unknown_handler

    async def dispatch(self, message: IncomingMessage) -> bool:
        """Handle one inbound message.

        Args:
            message: Inbound text message

        Returns:
            True if a handler was invoked
        """
        resolved = self.registry.resolve(message.text)

        if resolved is None:
            if self.unknown_handler is None or not looks_like_command(message.text):
                logger.debug(f"Ignoring unmatched message in chat {message.chat_id}")
                return False
            handler: Handler = self.unknown_handler
            argument = message.text
            name = "unknown"
        else:
            command, argument = resolved
            handler = command.handler
            name = command.trigger.strip()

        logger.debug(f"Dispatching {name!r} for chat {message.chat_id}")
        context = CommandContext(message=message, argument=argument, reply_sink=self.reply_sink)

        try:
            await handler(context)
        except Exception:
            logger.exception(f"Handler for {name!r} failed in chat {message.chat_id}")

        return True
