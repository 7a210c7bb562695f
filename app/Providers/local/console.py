"""
Interactive console provider

Reads commands from stdin, routes them through the same CommandRouter as
the Telegram bot and prints the responses. An empty line ends the session.
"""

import asyncio
from typing import Callable, Optional
from loguru import logger

from Commands import CommandRouter, HandlerResponse, ResponseKind
from Providers.provider import Provider

PROMPT = "Command: "


class LocalConsole(Provider):
    """Line based console loop for testing commands locally"""

    def __init__(self, router: CommandRouter, read_line: Optional[Callable[[str], str]] = None,
                 write: Callable[[str], None] = print):
        self.router = router
        self._read_line = read_line or input
        self._write = write
        self._running = False

    @property
    def name(self) -> str:
        return "local_console"

    async def start_monitoring(self) -> None:
        """Run the prompt loop until an empty line, EOF or stop()"""
        self._running = True
        logger.info("Local console started, enter an empty line to quit")
        while self._running:
            try:
                line = await asyncio.to_thread(self._read_line, PROMPT)
            except EOFError:
                break
            if line == "":
                break

            try:
                response = await self.router.dispatch(line)
            except Exception as e:
                logger.error(f"Error handling '{line}': {e}")
                self._write(f"Error: {e}")
                continue
            self._write(self.describe(response))
        self._running = False
        logger.info("Local console stopped")

    async def stop(self) -> None:
        self._running = False

    @staticmethod
    def describe(response: HandlerResponse) -> str:
        if response.kind is ResponseKind.FILE:
            return f"[file {response.file_name} ({response.content_type})]\n{response.payload}"
        return f"[text]\n{response.payload}"
