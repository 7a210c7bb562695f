"""
Player stats commands

/user <platform> <handle>           lifetime and last week stats as text
/userRaw <platform> <handle>        raw provider document as userData.json
/userCompare <platform> <handle>... CSV comparison of one or more players
"""

import asyncio
from typing import List, Tuple

from loguru import logger

from Stats import PlayerRecord, StatsClient, render_comparison, render_raw, render_text

from .base import Command, CommandLine, HandlerResponse

RAW_FILE_NAME = "userData.json"
RAW_CONTENT_TYPE = "text/json"
COMPARE_FILE_NAME = "userCompare.csv"
COMPARE_CONTENT_TYPE = "text/csv"


class StatsCommand(Command):
    """Base for commands that query the stats client"""

    def __init__(self, stats_client: StatsClient):
        self.stats_client = stats_client


class UserCommand(StatsCommand):
    name = "user"
    usage = "/user <platform> <handle>"

    def arguments_valid(self, args: List[str]) -> bool:
        return len(args) == 2

    async def execute(self, command_line: CommandLine) -> HandlerResponse:
        platform, handle = command_line.args
        document = await self.stats_client.fetch_stats(handle, platform)
        record = PlayerRecord.from_document(document)
        return HandlerResponse.text(render_text(record), markdown=True)


class UserRawCommand(StatsCommand):
    name = "userRaw"
    usage = "/userRaw <platform> <handle>"

    def arguments_valid(self, args: List[str]) -> bool:
        return len(args) == 2

    async def execute(self, command_line: CommandLine) -> HandlerResponse:
        platform, handle = command_line.args
        document = await self.stats_client.fetch_stats(handle, platform)
        return HandlerResponse.file(render_raw(document), RAW_FILE_NAME, RAW_CONTENT_TYPE)


class UserCompareCommand(StatsCommand):
    name = "userCompare"
    usage = "/userCompare <platform1> <handle1> [<platform2> <handle2> ...]"

    def arguments_valid(self, args: List[str]) -> bool:
        return len(args) >= 2 and len(args) % 2 == 0

    async def execute(self, command_line: CommandLine) -> HandlerResponse:
        args = command_line.args
        pairs: List[Tuple[str, str]] = list(zip(args[0::2], args[1::2]))
        logger.info(f"Comparing {len(pairs)} players")

        documents = await asyncio.gather(
            *(self.stats_client.fetch_stats(handle, platform) for platform, handle in pairs)
        )
        entries = [
            (handle, PlayerRecord.from_document(document))
            for (_, handle), document in zip(pairs, documents)
        ]
        return HandlerResponse.file(render_comparison(entries), COMPARE_FILE_NAME, COMPARE_CONTENT_TYPE)
