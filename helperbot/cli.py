"""Command line interface."""

import asyncio
from pathlib import Path

import typer
from loguru import logger

from helperbot.bot import build_handlers
from helperbot.commands.handlers import parse_symbol
from helperbot.config import Config, config, load_config
from helperbot.errors import HelperBotError
from helperbot.formatters import format_question, format_quote

app = typer.Typer(
    name="helperbot",
    help="Telegram helper bot for LeetCode daily questions and stock quotes",
    no_args_is_help=True,
)


def _load(config_path: Path | None) -> Config:
    return load_config(config_path) if config_path is not None else config


async def _daily_question(cfg: Config) -> str:
    handlers = build_handlers(cfg)
    try:
        question = await handlers.leetcode.fetch_daily_question()
        return format_question(question, problems_url=handlers.problems_url)
    finally:
        await handlers.leetcode.close()
        await handlers.finnhub.close()


async def _quote(cfg: Config, symbol: str) -> str:
    handlers = build_handlers(cfg)
    try:
        quote = await handlers.finnhub.fetch_quote(symbol)
        profile = await handlers.finnhub.fetch_profile_optional(symbol)
        return format_quote(symbol, quote, profile)
    finally:
        await handlers.leetcode.close()
        await handlers.finnhub.close()


@app.command("run")
def run_command(
    config_path: Path | None = typer.Option(None, "--config", help="YAML settings file"),  # noqa: B008
) -> None:
    """Start the bot and the health server."""
    from helperbot.main import run

    run(_load(config_path))


@app.command("lc")
def daily_question_command(
    config_path: Path | None = typer.Option(None, "--config", help="YAML settings file"),  # noqa: B008
) -> None:
    """Print today's LeetCode daily question."""
    logger.remove()
    try:
        text = asyncio.run(_daily_question(_load(config_path)))
    except HelperBotError as e:
        typer.echo(f"Failed to fetch LeetCode daily question: {e.user_message}", err=True)
        raise typer.Exit(code=1) from None

    typer.echo(text)


@app.command("quote")
def quote_command(
    symbol: str = typer.Argument(..., help="Ticker symbol (e.g., AAPL)"),
    config_path: Path | None = typer.Option(None, "--config", help="YAML settings file"),  # noqa: B008
) -> None:
    """Print a stock quote."""
    logger.remove()
    try:
        symbol = parse_symbol(symbol)
        text = asyncio.run(_quote(_load(config_path), symbol))
    except HelperBotError as e:
        typer.echo(f"Failed to fetch stock quote: {e.user_message}", err=True)
        raise typer.Exit(code=1) from None

    typer.echo(text)


if __name__ == "__main__":
    app()
