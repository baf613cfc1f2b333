"""Clients for third-party HTTP APIs."""

from helperbot.external.finnhub import FinnhubClient
from helperbot.external.leetcode import LeetCodeClient

__all__ = [
    "FinnhubClient",
    "LeetCodeClient",
]
