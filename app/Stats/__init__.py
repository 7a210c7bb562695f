"""Activision stats access and response shaping for the stats bot"""

from .errors import StatsProviderError, AuthenticationError, IncompleteStatsError
from .platforms import Platform, resolve_platform
from .client import StatsClient, RateLimiter
from .record import PlayerRecord, LABELS, LIFETIME_FIELDS, WEEKLY_FIELDS
from .formatters import render_text, render_raw, render_comparison

__all__ = [
    'StatsProviderError',
    'AuthenticationError',
    'IncompleteStatsError',
    'Platform',
    'resolve_platform',
    'StatsClient',
    'RateLimiter',
    'PlayerRecord',
    'LABELS',
    'LIFETIME_FIELDS',
    'WEEKLY_FIELDS',
    'render_text',
    'render_raw',
    'render_comparison',
]
