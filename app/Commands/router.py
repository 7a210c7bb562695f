"""
Command router

Resolves message text of the form `/command arg1 arg2 ...` to a command:
- no text: UnknownCommand
- text not starting with the prefix: EmptyCommand (plain conversation is ignored)
- unregistered command name: UnknownCommand
"""

from typing import Dict, List, Optional

from loguru import logger

from Stats import StatsClient

from .base import Command, CommandLine, HandlerResponse
from .user import UserCommand, UserRawCommand, UserCompareCommand


class UnknownCommand(Command):
    """Echo the unrecognized command back to the sender"""

    name = "unknown"

    async def execute(self, command_line: CommandLine) -> HandlerResponse:
        return HandlerResponse.text(f"unknown command: {command_line.command}")


class EmptyCommand(Command):
    """No-op for text that is not a command; the empty payload suppresses the reply"""

    name = "empty"

    async def execute(self, command_line: CommandLine) -> HandlerResponse:
        return HandlerResponse.text("")


class CommandRouter:
    """Fixed table of command name to command, built once at startup"""

    def __init__(self, stats_client: StatsClient):
        self.stats_client = stats_client
        self.unknown = UnknownCommand()
        self.empty = EmptyCommand()
        self._commands: Dict[str, Command] = {
            command.name: command
            for command in (
                UserCommand(stats_client),
                UserRawCommand(stats_client),
                UserCompareCommand(stats_client),
            )
        }

    @property
    def command_names(self) -> List[str]:
        return list(self._commands)

    def get_handler(self, text: Optional[str]) -> Command:
        if not text:
            return self.unknown
        command_line = CommandLine.parse(text)
        if not command_line.is_command:
            return self.empty
        return self._commands.get(command_line.name, self.unknown)

    async def dispatch(self, text: Optional[str]) -> HandlerResponse:
        """Resolve and run the command for a message; provider errors propagate"""
        handler = self.get_handler(text)
        command_line = CommandLine.parse(text)
        if handler is not self.empty:
            logger.info(f"Dispatching '{command_line.command}' to {handler.name} handler")
        return await handler(command_line)
