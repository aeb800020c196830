"""
Shared test fixtures and utilities for the cmdlex test suite.
"""

import pytest

from cmdlex.commands.builder import CommandBuilder


@pytest.fixture
def namespace():
    """Names visible to braced expressions in builder tests.

    Usage:
        def test_something(namespace):
            build_command("SET foo {my_val}", namespace)
    """
    return {"my_val": 2, "key": "user:1", "fields": ["a", "b"], "ttl": 60}


@pytest.fixture
def builder(namespace):
    """CommandBuilder bound to the shared namespace."""
    return CommandBuilder(namespace)
