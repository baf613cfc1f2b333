"""Main application entry point: bot polling plus health server."""

import asyncio
import signal
import sys
from pathlib import Path

import uvicorn
from loguru import logger

from helperbot.api.health import create_app
from helperbot.bot import HelperBot
from helperbot.config import Config, config
from helperbot.errors import HelperBotError


def setup_logging(cfg: Config) -> None:
    """Configure loguru sinks.

    Args:
        cfg: Application configuration
    """
    log_level = cfg.logging.level
    logger.remove()

    if cfg.logging.json_format:
        logger.add(
            sys.stdout,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
            serialize=True,
        )
    else:
        logger.add(
            sys.stdout,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}:{function}:{line}</cyan> | <level>{message}</level>",
        )

    if cfg.logging.file:
        log_path = Path(cfg.logging.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_path,
            level=log_level,
            rotation=cfg.logging.rotation,
            retention=cfg.logging.retention,
            compression="zip",
            serialize=cfg.logging.json_format,
        )

    logger.info(f"Logging configured at {log_level} level")


async def _wait_for_shutdown() -> None:
    """Block until SIGINT or SIGTERM."""
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)
    await stop.wait()


async def serve(cfg: Config) -> None:
    """Run the bot until the process is asked to stop.

    Args:
        cfg: Application configuration

    Raises:
        ConfigurationError: If the Telegram token is missing
        TelegramError: If Telegram rejects the token
    """
    bot = HelperBot(cfg)
    await bot.start()

    try:
        if cfg.health.enabled:
            logger.info(f"Health server listening on port {cfg.port}")
            server = uvicorn.Server(
                uvicorn.Config(
                    create_app(bot.health),
                    host="0.0.0.0",
                    port=cfg.port,
                    log_config=None,
                    access_log=False,
                )
            )
            await server.serve()
        else:
            logger.info("Health server disabled")
            await _wait_for_shutdown()
    finally:
        await bot.stop()


def run(cfg: Config | None = None) -> None:
    """Configure logging and run the bot, exiting non-zero on fatal errors."""
    cfg = cfg or config
    setup_logging(cfg)

    try:
        asyncio.run(serve(cfg))
    except HelperBotError as e:
        logger.error(f"Fatal startup error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Interrupted")


if __name__ == "__main__":
    run()
