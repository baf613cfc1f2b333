"""Command dispatch and handlers."""

from helperbot.commands.dispatcher import (
    Command,
    CommandContext,
    CommandRegistry,
    Dispatcher,
    MatchMode,
    ReplySink,
)
from helperbot.commands.handlers import CommandHandlers, build_registry, parse_symbol

__all__ = [
    "Command",
    "CommandContext",
    "CommandRegistry",
    "Dispatcher",
    "MatchMode",
    "ReplySink",
    "CommandHandlers",
    "build_registry",
    "parse_symbol",
]
