"""Test message formatters."""

from datetime import date

import pytest

from helperbot.formatters import (
    DOWN_INDICATOR,
    UP_INDICATOR,
    difficulty_decoration,
    format_question,
    format_quote,
)
from helperbot.models import CompanyProfile, DailyQuestion, Quote


def make_quote(change: float = 1.25) -> Quote:
    return Quote(
        current_price=189.5,
        change=change,
        percent_change=0.66,
        high=190.1,
        low=187.2,
        open=188.0,
        previous_close=188.25,
    )


@pytest.mark.parametrize(
    ("difficulty", "decoration"),
    [("Easy", "🟩"), ("Medium", "🟨"), ("Hard", "🟥")],
)
def test_format_question_decorates_known_difficulty(difficulty, decoration):
    """Test known difficulty labels get their decoration."""
    question = DailyQuestion(title="Two Sum", title_slug="two-sum", difficulty=difficulty)

    msg = format_question(question)

    assert f"Difficulty: {difficulty} {decoration}" in msg
    assert "Two Sum" in msg


def test_format_question_unknown_difficulty():
    """Test unknown difficulty passes through undecorated."""
    question = DailyQuestion(title="Mystery", title_slug="mystery", difficulty="Extreme")

    msg = format_question(question)

    assert "Difficulty: Extreme\n" in msg
    for decoration in ("🟩", "🟨", "🟥"):
        assert decoration not in msg
    assert difficulty_decoration("easy") == ""


def test_format_question_contains_url():
    """Test problem URL is built from the slug verbatim."""
    question = DailyQuestion(
        title="Median of Two Sorted Arrays",
        title_slug="median-of-two-sorted-arrays",
        difficulty="Hard",
    )

    msg = format_question(question)

    assert "https://leetcode.com/problems/median-of-two-sorted-arrays/" in msg


def test_format_question_layout():
    """Test full message layout with a fixed date."""
    question = DailyQuestion(title="Two Sum", title_slug="two-sum", difficulty="Easy")

    msg = format_question(question, today=date(2024, 1, 15))

    assert msg == (
        "Date: 2024-01-15\n"
        "Title: Two Sum\n"
        "Difficulty: Easy 🟩\n"
        "https://leetcode.com/problems/two-sum/"
    )


def test_format_question_defaults_to_today():
    """Test date is taken at formatting time."""
    question = DailyQuestion(title="Two Sum", title_slug="two-sum", difficulty="Easy")

    msg = format_question(question)

    assert f"Date: {date.today().isoformat()}" in msg


@pytest.mark.parametrize(
    ("change", "indicator"),
    [(0.0, UP_INDICATOR), (-0.0, UP_INDICATOR), (2.5, UP_INDICATOR), (-0.01, DOWN_INDICATOR)],
)
def test_format_quote_indicator(change, indicator):
    """Test zero change resolves to the up indicator."""
    msg = format_quote("AAPL", make_quote(change=change))

    assert msg.splitlines()[0] == f"AAPL (AAPL) {indicator}"


def test_format_quote_without_profile():
    """Test quote lines render with two decimals."""
    msg = format_quote("AAPL", make_quote())

    assert msg == (
        "AAPL (AAPL) 🟢\n"
        "💵 Current: $189.50\n"
        "📈 Change: 1.25 (0.66%)\n"
        "📊 Open: $188.00 | High: $190.10 | Low: $187.20\n"
        "📉 Previous Close: $188.25"
    )


def test_format_quote_with_profile():
    """Test profile name replaces the symbol and enrichment lines are added."""
    profile = CompanyProfile(
        name="Apple Inc", market_capitalization=2950000.5, industry="Technology"
    )

    msg = format_quote("AAPL", make_quote(), profile)
    lines = msg.splitlines()

    assert lines[0] == "Apple Inc (AAPL) 🟢"
    assert lines[-2] == "🏢 Market Cap: $2950.00B"
    assert lines[-1] == "🏭 Industry: Technology"


def test_format_quote_empty_profile_name():
    """Test an empty-name profile falls back to the symbol and adds nothing."""
    profile = CompanyProfile(name="", market_capitalization=1000.0, industry="Technology")

    msg = format_quote("AAPL", make_quote(), profile)

    assert msg.startswith("AAPL (AAPL)")
    assert "Market Cap" not in msg
    assert "Industry" not in msg


@pytest.mark.parametrize("market_cap", [0.0, -5.0])
def test_format_quote_omits_non_positive_market_cap(market_cap):
    """Test market cap line requires a strictly positive value."""
    profile = CompanyProfile(name="Tiny Corp", market_capitalization=market_cap, industry="")

    msg = format_quote("TINY", make_quote(), profile)

    assert "Market Cap" not in msg
    assert "Industry" not in msg
    assert msg.endswith("📉 Previous Close: $188.25")
