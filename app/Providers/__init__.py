"""Providers package for the stats bot.

Transports that feed chat text into the command router:
- Telegram: python-telegram-bot polling with an admin allow-list
- Local: interactive console for testing commands without Telegram

Each provider implements the Provider interface for consistent integration.

Usage:
    from Providers.loader import get_provider
    provider = get_provider(settings, router, local=False)
    await provider.start_monitoring()
"""

from .provider import Provider
from . import loader

__all__ = [
    "Provider",
    "loader",
]
