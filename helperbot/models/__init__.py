"""Domain models."""

from helperbot.models.message import IncomingMessage
from helperbot.models.question import DailyQuestion
from helperbot.models.quote import CompanyProfile, Quote

__all__ = [
    "IncomingMessage",
    "DailyQuestion",
    "Quote",
    "CompanyProfile",
]
