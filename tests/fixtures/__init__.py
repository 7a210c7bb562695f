"""Test fixtures and mock data for the stats bot tests"""

from .mock_data import *

__all__ = [
    'sample_stats_document',
    'FakeStatsClient',
]
