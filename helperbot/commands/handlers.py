"""Chat command handlers."""

from loguru import logger

from helperbot.commands.dispatcher import Command, CommandContext, CommandRegistry, MatchMode
from helperbot.errors import HelperBotError, ValidationError
from helperbot.external.finnhub import FinnhubClient
from helperbot.external.leetcode import LeetCodeClient
from helperbot.formatters import (
    HELP_TEXT,
    LEETCODE_PROBLEMS_URL,
    START_TEXT,
    STOCK_USAGE_TEXT,
    UNKNOWN_COMMAND_TEXT,
    format_question,
    format_quote,
)

STOCK_PREFIX = "!s "


def parse_symbol(argument: str) -> str:
    """Normalise a stock symbol argument.

    Raises:
        ValidationError: If nothing is left after trimming
    """
    symbol = argument.strip().upper()
    if not symbol:
        raise ValidationError("missing stock symbol")
    return symbol


class CommandHandlers:
    """Handlers for every bot command."""

    def __init__(
        self,
        leetcode: LeetCodeClient,
        finnhub: FinnhubClient,
        problems_url: str = LEETCODE_PROBLEMS_URL,
    ) -> None:
        """Initialize handlers.

        Args:
            leetcode: Daily question client
            finnhub: Quote and profile client
            problems_url: Base URL for problem links
        """
        self.leetcode = leetcode
        self.finnhub = finnhub
        self.problems_url = problems_url

    async def start(self, ctx: CommandContext) -> None:
        await ctx.reply(START_TEXT)

    async def help(self, ctx: CommandContext) -> None:
        await ctx.reply(HELP_TEXT)

    async def daily_question(self, ctx: CommandContext) -> None:
        """Reply with today's LeetCode question."""
        try:
            question = await self.leetcode.fetch_daily_question()
        except HelperBotError as e:
            logger.warning(f"Daily question fetch failed: {e}")
            await ctx.reply(f"Failed to fetch LeetCode daily question: {e.user_message}")
            return

        await ctx.reply(format_question(question, problems_url=self.problems_url))

    async def stock(self, ctx: CommandContext) -> None:
        """Reply with a quote for the symbol following ``!s``."""
        try:
            symbol = parse_symbol(ctx.argument)
        except ValidationError:
            await ctx.reply(STOCK_USAGE_TEXT)
            return

        try:
            quote = await self.finnhub.fetch_quote(symbol)
        except HelperBotError as e:
            logger.warning(f"Quote fetch failed for {symbol}: {e}")
            await ctx.reply(f"Failed to fetch stock quote: {e.user_message}")
            return

        profile = await self.finnhub.fetch_profile_optional(symbol)
        await ctx.reply(format_quote(symbol, quote, profile))

    async def unknown(self, ctx: CommandContext) -> None:
        await ctx.reply(UNKNOWN_COMMAND_TEXT)


def build_registry(handlers: CommandHandlers) -> CommandRegistry:
    """Build the command registry in priority order."""
    return CommandRegistry(
        [
            Command("/start", MatchMode.EXACT, handlers.start),
            Command("/help", MatchMode.EXACT, handlers.help),
            Command("/lc", MatchMode.EXACT, handlers.daily_question),
            Command("!lc", MatchMode.EXACT, handlers.daily_question),
            Command(STOCK_PREFIX, MatchMode.PREFIX, handlers.stock),
        ]
    )
