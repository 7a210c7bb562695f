"""Telegram provider package for the stats bot.

This package contains the Bot API transport adapter and its helpers.
"""

from .stats_bot import TelegramStatsBot
from .helpers import is_authorized

__all__ = ["TelegramStatsBot", "is_authorized"]
