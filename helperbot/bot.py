"""Bot application manager."""

from loguru import logger

from helperbot.commands.dispatcher import Dispatcher
from helperbot.commands.handlers import CommandHandlers, build_registry
from helperbot.config import Config, config
from helperbot.external.finnhub import FinnhubClient
from helperbot.external.leetcode import LeetCodeClient
from helperbot.services.health_service import HealthChecker
from helperbot.transport.poller import UpdatePoller
from helperbot.transport.telegram import TelegramClient


def build_handlers(cfg: Config) -> CommandHandlers:
    """Create command handlers with their fetch clients.

    Args:
        cfg: Application configuration

    Returns:
        CommandHandlers instance owning fresh HTTP clients
    """
    leetcode = LeetCodeClient(graphql_url=cfg.leetcode.graphql_url, timeout=cfg.leetcode.timeout)
    finnhub = FinnhubClient(
        api_key=cfg.finnhub_api_key,
        base_url=cfg.finnhub.base_url,
        timeout=cfg.finnhub.timeout,
    )
    return CommandHandlers(leetcode, finnhub, problems_url=cfg.leetcode.problems_base_url)


class HelperBot:
    """Wires the Telegram transport to the command handlers."""

    def __init__(
        self,
        cfg: Config | None = None,
        telegram: TelegramClient | None = None,
        health: HealthChecker | None = None,
    ) -> None:
        """Initialize bot manager.

        Args:
            cfg: Application configuration, defaults to the module-level config
            telegram: Pre-built Telegram client, created from the config when omitted
            health: Health checker, created from the config when omitted
        """
        self.config = cfg or config
        self.health = health or HealthChecker(self.config.health.unhealthy_threshold)
        self.telegram: TelegramClient | None = telegram
        self.handlers: CommandHandlers | None = None
        self.dispatcher: Dispatcher | None = None
        self.poller: UpdatePoller | None = None

    async def start(self) -> None:
        """Start the bot.

        Raises:
            ConfigurationError: If the Telegram token is missing
            TelegramError: If the token is rejected by Telegram
        """
        token = self.config.require_telegram_token()
        logger.info("Starting helper bot...")

        if self.telegram is None:
            self.telegram = TelegramClient(
                token,
                api_base=self.config.telegram.api_base,
                poll_timeout=self.config.telegram.poll_timeout,
            )

        try:
            me = await self.telegram.get_me()
            logger.info(f"Authenticated as @{me.get('username', 'unknown')}")

            if not self.config.finnhub_api_key:
                logger.warning("FINNHUB_API_KEY not set, stock quotes will be unavailable")

            self.handlers = build_handlers(self.config)
            registry = build_registry(self.handlers)
            unknown = self.handlers.unknown if self.config.bot.reply_unknown_commands else None
            self.dispatcher = Dispatcher(registry, self.telegram, unknown_handler=unknown)
            logger.info(f"Registered {len(registry)} commands")

            self.poller = UpdatePoller(
                self.telegram,
                self.dispatcher,
                self.health,
                error_backoff_seconds=self.config.telegram.error_backoff_seconds,
            )
            await self.poller.start()
            logger.info("Bot started...")

        except Exception as e:
            logger.error(f"Failed to start bot: {e}")
            await self.stop()
            raise

    async def stop(self) -> None:
        """Stop the bot and release HTTP clients."""
        logger.info("Stopping helper bot...")

        if self.poller is not None:
            await self.poller.stop()
            self.poller = None

        if self.handlers is not None:
            await self.handlers.leetcode.close()
            await self.handlers.finnhub.close()
            self.handlers = None

        if self.telegram is not None:
            await self.telegram.close()
            self.telegram = None

        self.dispatcher = None
        logger.info("Helper bot stopped")

