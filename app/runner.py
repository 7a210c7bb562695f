"""
Warzone Stats Bot Application Runner

This module serves as the main entry point for the stats bot.
It orchestrates the startup sequence, initializes all components, and keeps
the bot running until it is interrupted.

Features:
    - Structured startup sequence with validation
    - Telegram API connectivity check
    - Activision login before any lookup
    - Live Telegram polling or a local console loop
    - Clean shutdown procedures
"""

import argparse
import asyncio
import signal
import sys
from typing import List, Optional
from loguru import logger

from Commands import CommandRouter
from Configure import ConfigLogger, Settings
from Providers.loader import get_provider
from Stats import StatsClient


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Telegram COD 16 Warzone Data Bot")
    parser.add_argument("--local", default="false", choices=["false", "true"],
                        help="Read commands from the console instead of Telegram")
    parser.add_argument("--config", required=True, help="Path to the JSON config file")
    return parser.parse_args(argv)


class ApplicationRunner:
    """Main application runner for the stats bot"""

    def __init__(self, config_path: str, local: bool = False):
        self.config_path = config_path
        self.local = local
        self.settings = None
        self.stats_client: Optional[StatsClient] = None
        self.provider = None
        self.shutdown_event = asyncio.Event()

    async def run(self) -> None:
        """
        Main application entry point.

        Initializes all components and runs the provider until shutdown.
        """
        try:
            await self._initialize_application()
            await self._start_services()
        except KeyboardInterrupt:
            logger.info("Received shutdown signal")
        except Exception as e:
            logger.critical(f"Critical error during application startup: {e}")
            await self._shutdown()
            sys.exit(1)
        await self._shutdown()

    async def _initialize_application(self) -> None:
        """Initialize all application components in proper order"""
        # Load configuration
        self.settings = Settings.load(self.config_path)

        # Configure logging
        ConfigLogger(self.settings.log_level, self.settings.log_file)
        logger.info("Starting application initialization...")

        if self.settings.bot_token is None:
            logger.error("No bot token provided")
            sys.exit(1)

        if not self.local:
            await self._check_telegram_connectivity()

        await self._login()

        router = CommandRouter(self.stats_client)
        self.provider = get_provider(self.settings, router, self.local)

        if not self.local:
            self._setup_signal_handlers()
        logger.success("Application initialization completed")

    async def _check_telegram_connectivity(self) -> None:
        """Check if Telegram API is accessible"""
        import requests

        max_retries = 5
        retry_delay = 3
        telegram_api_url = "https://api.telegram.org"

        for attempt in range(max_retries):
            try:
                logger.info(f"Checking Telegram API connectivity (attempt {attempt + 1}/{max_retries})...")
                response = await asyncio.to_thread(requests.head, telegram_api_url, timeout=5)

                if response.status_code in [200, 301, 302]:
                    logger.success("Telegram API connectivity confirmed")
                    return
                else:
                    logger.warning(f"Telegram API returned status {response.status_code}")

            except requests.exceptions.Timeout:
                logger.warning(f"Telegram API timeout (attempt {attempt + 1}/{max_retries})")
            except requests.exceptions.ConnectionError:
                logger.warning(f"Telegram API connection failed (attempt {attempt + 1}/{max_retries})")

            if attempt < max_retries - 1:
                logger.info(f"Retrying in {retry_delay} seconds...")
                await asyncio.sleep(retry_delay)

        error_msg = "Unable to access Telegram API. Please check your internet connection."
        logger.critical(error_msg)
        raise ConnectionError(error_msg)

    async def _login(self) -> None:
        """Log in to Activision; the bot cannot serve any command without it"""
        self.stats_client = StatsClient(
            max_requests=self.settings.rate_limit_max_requests,
            period=self.settings.rate_limit_period,
        )
        await self.stats_client.login(self.settings.activision_email, self.settings.activision_password)

    def _setup_signal_handlers(self) -> None:
        """Setup signal handlers for graceful shutdown"""
        loop = asyncio.get_running_loop()
        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(signum, self._request_shutdown, signum)
            except NotImplementedError:
                # Windows event loops have no add_signal_handler
                signal.signal(signum, lambda received, frame: loop.call_soon_threadsafe(self._request_shutdown, received))

    def _request_shutdown(self, signum: int) -> None:
        logger.info(f"Received signal {signum}")
        self.shutdown_event.set()

    async def _start_services(self) -> None:
        """Run the provider until shutdown is requested"""
        logger.info(f"Starting {self.provider.name}...")
        if self.local:
            # The console loop ends the session itself
            await self.provider.start_monitoring()
            return

        await self.provider.start_monitoring()
        logger.success("Bot is now active. Press Ctrl+C to stop")
        await self.shutdown_event.wait()

    async def _shutdown(self) -> None:
        """Perform graceful application shutdown"""
        logger.info("Initiating graceful shutdown...")

        if self.provider:
            try:
                await self.provider.stop()
            except Exception as e:
                logger.warning(f"Provider stop encountered an issue: {e}")
            self.provider = None

        if self.stats_client:
            await self.stats_client.close()
            self.stats_client = None

        logger.success("Application shutdown completed")


async def main(argv: Optional[List[str]] = None) -> None:
    """Main application entry point"""
    args = parse_args(argv)
    runner = ApplicationRunner(args.config, local=args.local == "true")
    await runner.run()


def cli() -> None:
    """Console script entry point"""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Application terminated by user")


if __name__ == "__main__":
    cli()
