"""
Normalized player record built from the provider's nested stats document
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .errors import IncompleteStatsError

_BR = ("lifetime", "mode", "br", "properties")
_WEEKLY = ("weekly", "mode", "br_all", "properties")

# (record key, path in provider document), in display order
LIFETIME_FIELDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("gamesPlayed", _BR + ("gamesPlayed",)),
    ("wins", _BR + ("wins",)),
    ("kills", _BR + ("kills",)),
    ("deaths", _BR + ("deaths",)),
    ("downs", _BR + ("downs",)),
    ("kdRatio", _BR + ("kdRatio",)),
    ("topFive", _BR + ("topFive",)),
    ("topTen", _BR + ("topTen",)),
    ("topTwentyFive", _BR + ("topTwentyFive",)),
    ("accuracy", ("lifetime", "all", "properties", "accuracy")),
)

WEEKLY_FIELDS: Tuple[Tuple[str, Tuple[str, ...]], ...] = tuple(
    (key, _WEEKLY + (key,))
    for key in (
        "kills",
        "deaths",
        "kdRatio",
        "gulagDeaths",
        "gulagKills",
        "objectiveTeamWiped",
        "headshots",
        "headshotPercentage",
        "killsPerGame",
        "damageDone",
        "damageTaken",
    )
)

LABELS: Dict[str, str] = {
    "gamesPlayed": "Game played",
    "wins": "Wins",
    "kills": "Kills",
    "deaths": "Deaths",
    "downs": "Downs",
    "kdRatio": "K/D",
    "topFive": "Top 5",
    "topTen": "Top 10",
    "topTwentyFive": "Top 25",
    "accuracy": "Accuracy (MP and WZ)",
    "gulagDeaths": "Gulag deaths",
    "gulagKills": "Gulag kills",
    "objectiveTeamWiped": "Team wiped",
    "headshots": "Headshots",
    "headshotPercentage": "Headshot percentage",
    "killsPerGame": "Kills per game",
    "damageDone": "Damage done",
    "damageTaken": "Damage taken",
}


def _resolve(document: Dict[str, Any], path: Tuple[str, ...]) -> Any:
    current: Any = document
    for key in path:
        if not isinstance(current, dict) or current.get(key) is None:
            raise IncompleteStatsError(".".join(path))
        current = current[key]
    return current


@dataclass(frozen=True)
class PlayerRecord:
    """Flat view of the stats the bot reports for one player"""
    username: str
    lifetime: Dict[str, Any] = field(default_factory=dict)
    weekly: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "PlayerRecord":
        """Build a record, failing with IncompleteStatsError on any missing field"""
        username = _resolve(document, ("username",))
        lifetime = {key: _resolve(document, path) for key, path in LIFETIME_FIELDS}
        weekly = {key: _resolve(document, path) for key, path in WEEKLY_FIELDS}
        return cls(username=str(username), lifetime=lifetime, weekly=weekly)


def format_value(value: Any) -> str:
    """Render a stat value, whole floats without the trailing '.0'"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
