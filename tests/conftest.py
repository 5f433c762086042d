"""Shared fixtures for the persistentbst test suite."""

import pytest

from persistentbst import MapConfig, PersistentMap, SpliceRule

# Keys and values used by the worked example throughout the suite:
#
#         5:a
#        /   \
#      3:b   8:c
#     /   \
#   1:d   4:e
EXAMPLE_ENTRIES = [(5, "a"), (3, "b"), (8, "c"), (1, "d"), (4, "e")]


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests excluded by run_tests.py")


@pytest.fixture
def map_factory():
    """Build a fresh map by adding entries in order."""
    def _build(entries, config=None):
        m = PersistentMap(config or MapConfig())
        for key, value in entries:
            m.add(key, value)
        return m
    return _build


@pytest.fixture
def example_map(map_factory):
    return map_factory(EXAMPLE_ENTRIES)


@pytest.fixture(params=list(SpliceRule), ids=lambda rule: rule.value)
def splice_config(request):
    """Run a test once per splice rule."""
    return MapConfig(splice_rule=request.param)
