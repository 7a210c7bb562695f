from enum import Enum


class Platform(Enum):
    """Platform identifiers understood by the stats API"""
    BATTLE = "battle"
    PSN = "psn"
    XBL = "xbl"
    ALL = "all"


_SHORTHANDS = {
    "battle": Platform.BATTLE,
    "psn": Platform.PSN,
    "xbl": Platform.XBL,
}


def resolve_platform(token: str) -> Platform:
    """Map a user supplied shorthand to a platform, anything unknown means all platforms"""
    return _SHORTHANDS.get(token, Platform.ALL)
