import os
import sys

import pytest

# Make the app packages importable without installing the project
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'app'))

from fixtures import FakeStatsClient, sample_stats_document  # noqa: E402


@pytest.fixture
def stats_document():
    return sample_stats_document()


@pytest.fixture
def fake_client():
    return FakeStatsClient({
        "p1": sample_stats_document("p1", kills=100.0),
        "p2": sample_stats_document("p2", kills=200.0),
        "Player#1234": sample_stats_document(),
    })
