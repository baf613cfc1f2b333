"""Telegram helper bot relaying LeetCode and Finnhub data."""

__version__ = "0.1.0"
