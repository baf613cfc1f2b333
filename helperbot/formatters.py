"""Chat message formatting."""

from datetime import date

from helperbot.models.question import DailyQuestion
from helperbot.models.quote import CompanyProfile, Quote

LEETCODE_PROBLEMS_URL = "https://leetcode.com/problems"

DIFFICULTY_DECORATIONS: dict[str, str] = {
    "Easy": "🟩",
    "Medium": "🟨",
    "Hard": "🟥",
}

UP_INDICATOR = "🟢"
DOWN_INDICATOR = "🔴"

START_TEXT = "Welcome! I'm your helper bot. Use /help to see what I can do."

HELP_TEXT = """Available commands:
/start - Start the bot
/help - Show this help message
/lc - Get today's LeetCode daily challenge
!s SYMBOL - Get stock price (e.g., !s AAPL)"""

STOCK_USAGE_TEXT = "Please provide a stock symbol. Usage: !s AAPL"

UNKNOWN_COMMAND_TEXT = "Unknown command. Use /help to see available commands."


def difficulty_decoration(difficulty: str) -> str:
    """Return the decoration for a difficulty label, or "" if unrecognised."""
    return DIFFICULTY_DECORATIONS.get(difficulty, "")


def format_question(
    question: DailyQuestion,
    today: date | None = None,
    problems_url: str = LEETCODE_PROBLEMS_URL,
) -> str:
    """Render the daily question message.

    Args:
        question: Daily question to render
        today: Date shown in the header, defaults to the current date
        problems_url: Base URL for problem links

    Returns:
        Message text
    """
    today = today or date.today()
    difficulty = " ".join(
        part for part in (question.difficulty, difficulty_decoration(question.difficulty)) if part
    )
    url = f"{problems_url.rstrip('/')}/{question.title_slug}/"

    return (
        f"Date: {today.isoformat()}\n"
        f"Title: {question.title}\n"
        f"Difficulty: {difficulty}\n"
        f"{url}"
    )


def format_quote(symbol: str, quote: Quote, profile: CompanyProfile | None = None) -> str:
    """Render the stock quote message.

    The market cap and industry lines are only included when the profile
    carries a name and the respective value.

    Args:
        symbol: Ticker symbol as requested
        quote: Quote to render
        profile: Optional company profile enrichment

    Returns:
        Message text
    """
    indicator = UP_INDICATOR if quote.change >= 0 else DOWN_INDICATOR

    name = symbol
    extra_lines: list[str] = []
    if profile is not None and profile.name:
        name = profile.name
        if profile.market_capitalization > 0:
            # Finnhub reports market cap in millions
            extra_lines.append(f"🏢 Market Cap: ${profile.market_capitalization / 1000:.2f}B")
        if profile.industry:
            extra_lines.append(f"🏭 Industry: {profile.industry}")

    lines = [
        f"{name} ({symbol}) {indicator}",
        f"💵 Current: ${quote.current_price:.2f}",
        f"📈 Change: {quote.change:.2f} ({quote.percent_change:.2f}%)",
        f"📊 Open: ${quote.open:.2f} | High: ${quote.high:.2f} | Low: ${quote.low:.2f}",
        f"📉 Previous Close: ${quote.previous_close:.2f}",
        *extra_lines,
    ]
    return "\n".join(lines)
