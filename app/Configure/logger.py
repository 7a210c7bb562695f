"""Loguru sink configuration"""

import sys
from typing import Optional
from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)


def ConfigLogger(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Replace loguru's default sink with the bot's sinks.

    Args:
        level: Minimum level for the stderr sink
        log_file: Optional path of a rotating log file
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if log_file:
        logger.add(log_file, level=level, rotation="10 MB", retention="7 days", encoding="utf-8")
    logger.debug(f"Logger configured (level={level}, file={log_file})")
