"""Sample provider documents and a stats client double"""

import copy
from typing import Any, Dict, List, Optional, Tuple

from Stats import StatsProviderError

__all__ = ['sample_stats_document', 'FakeStatsClient']

_DOCUMENT = {
    "title": "mw",
    "platform": "battle",
    "username": "Player#1234",
    "type": "wz",
    "level": 155.0,
    "lifetime": {
        "all": {
            "properties": {
                "accuracy": 0.2181,
                "kills": 10211.0,
                "deaths": 9010.0,
            }
        },
        "mode": {
            "br": {
                "properties": {
                    "gamesPlayed": 812.0,
                    "wins": 31.0,
                    "kills": 2190.0,
                    "deaths": 2045.0,
                    "downs": 2502.0,
                    "kdRatio": 1.0709046454767726,
                    "topFive": 120.0,
                    "topTen": 201.0,
                    "topTwentyFive": 398.0,
                    "scorePerMinute": 210.5,
                }
            }
        },
    },
    "weekly": {
        "mode": {
            "br_all": {
                "properties": {
                    "kills": 54.0,
                    "deaths": 41.0,
                    "kdRatio": 1.3170731707317074,
                    "gulagDeaths": 3.0,
                    "gulagKills": 7.0,
                    "objectiveTeamWiped": 9.0,
                    "headshots": 12.0,
                    "headshotPercentage": 0.2222,
                    "killsPerGame": 3.375,
                    "damageDone": 21380.0,
                    "damageTaken": 15422.0,
                }
            }
        }
    },
}


def sample_stats_document(username: str = "Player#1234", kills: Optional[float] = None) -> Dict[str, Any]:
    """Return a fresh copy of a realistic MW/WZ profile document"""
    document = copy.deepcopy(_DOCUMENT)
    document["username"] = username
    if kills is not None:
        document["lifetime"]["mode"]["br"]["properties"]["kills"] = kills
    return document


class FakeStatsClient:
    """Stands in for StatsClient; records every lookup"""

    def __init__(self, documents: Optional[Dict[str, Dict[str, Any]]] = None,
                 error: Optional[Exception] = None):
        self.documents = documents or {}
        self.error = error
        self.calls: List[Tuple[str, str]] = []

    async def fetch_stats(self, handle: str, platform: str) -> Dict[str, Any]:
        self.calls.append((handle, platform))
        if self.error is not None:
            raise self.error
        if handle not in self.documents:
            raise StatsProviderError(f"user {handle} not found")
        return self.documents[handle]
