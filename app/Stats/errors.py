"""Exceptions raised while talking to the Activision stats API"""


class StatsProviderError(Exception):
    """Stats provider request failed (bad handle, network error, API error)"""


class AuthenticationError(StatsProviderError):
    """Login failed or a lookup was attempted before login"""


class IncompleteStatsError(StatsProviderError):
    """Provider document is missing a field required by the player record"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"missing stat '{path}' in provider response")
