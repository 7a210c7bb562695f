"""
Chat command handling

- base.py: CommandLine parsing, HandlerResponse and the Command contract
- user.py: /user, /userRaw and /userCompare stats commands
- router.py: CommandRouter resolving a message to its command
"""

from .base import Command, CommandLine, HandlerResponse, ResponseKind, COMMAND_PREFIX
from .router import CommandRouter, EmptyCommand, UnknownCommand
from .user import UserCommand, UserRawCommand, UserCompareCommand

__all__ = [
    'Command',
    'CommandLine',
    'HandlerResponse',
    'ResponseKind',
    'COMMAND_PREFIX',
    'CommandRouter',
    'EmptyCommand',
    'UnknownCommand',
    'UserCommand',
    'UserRawCommand',
    'UserCompareCommand',
]
