from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

COMMAND_PREFIX = "/"


class ResponseKind(Enum):
    """How the transport delivers a handler response"""
    TEXT = "text"
    FILE = "file"


@dataclass
class HandlerResponse:
    """Result of one command invocation, consumed once by the transport"""
    payload: str
    kind: ResponseKind = ResponseKind.TEXT
    file_name: Optional[str] = None
    content_type: Optional[str] = None
    markdown: bool = False  # payload is already MarkdownV2 formatted

    @property
    def is_empty(self) -> bool:
        return len(self.payload) == 0

    @classmethod
    def text(cls, payload: str, markdown: bool = False) -> "HandlerResponse":
        return cls(payload=payload, kind=ResponseKind.TEXT, markdown=markdown)

    @classmethod
    def file(cls, payload: str, file_name: str, content_type: str) -> "HandlerResponse":
        return cls(payload=payload, kind=ResponseKind.FILE, file_name=file_name, content_type=content_type)


@dataclass
class CommandLine:
    """Message text split into the command token and its arguments"""
    command: str
    args: List[str] = field(default_factory=list)

    @classmethod
    def parse(cls, text: Optional[str]) -> "CommandLine":
        tokens = text.split() if text else []
        if not tokens:
            return cls(command="")
        return cls(command=tokens[0], args=tokens[1:])

    @property
    def is_command(self) -> bool:
        return self.command.startswith(COMMAND_PREFIX)

    @property
    def name(self) -> str:
        """Command name without the prefix"""
        return self.command[len(COMMAND_PREFIX):] if self.is_command else self.command


class Command(ABC):
    """Abstract base class for chat commands"""

    name: str = ""
    usage: str = ""

    def arguments_valid(self, args: List[str]) -> bool:
        return True

    @abstractmethod
    async def execute(self, command_line: CommandLine) -> HandlerResponse:
        """Run the command with already validated arguments"""

    async def __call__(self, command_line: CommandLine) -> HandlerResponse:
        if not self.arguments_valid(command_line.args):
            return self.invalid_arguments(command_line.args)
        return await self.execute(command_line)

    def invalid_arguments(self, args: List[str]) -> HandlerResponse:
        return HandlerResponse.text(f"Error: invalid arguments: {','.join(args)}\nUsage: {self.usage}")
