"""Provider loader to instantiate the transport from configuration.

Two transports are supported:
- Telegram Stats Bot: live Bot API polling, needs BOT_TOKEN and ADMIN_ID
- Local console: `--local true`, reads commands from stdin

Example config file:
    {
      "BOT_TOKEN": "123456:ABC...",
      "ACTIVISION_EMAIL": "me@example.com",
      "ACTIVISION_PASSWORD": "...",
      "ADMIN_ID": ["11111111"]
    }
"""
from loguru import logger

from Commands import CommandRouter
from Configure.settings.Settings import SafeConfig
from .provider import Provider
from .local import LocalConsole
from .telegram import TelegramStatsBot


def get_provider(settings: SafeConfig, router: CommandRouter, local: bool = False) -> Provider:
    """Create the provider selected by the `--local` flag.

    Returns:
        LocalConsole when `local` is set, otherwise TelegramStatsBot
    """
    if local:
        logger.info("Local console provider loaded")
        return LocalConsole(router)

    admin_ids = settings.admin_ids
    if not admin_ids:
        logger.warning("ADMIN_ID is empty, every message will be ignored")
    logger.info("Telegram Stats Bot loaded")
    return TelegramStatsBot(settings.bot_token, admin_ids, router)
