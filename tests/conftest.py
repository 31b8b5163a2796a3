"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides environment sources and custom parser registrations for all tests
"""

import os
from unittest.mock import patch

import pytest

from envfury import register, unregister


@pytest.fixture
def test_env_vars():
    """Provide test environment variables."""
    return {
        "PORT": "8080",
        "RATIO": "abc",
        "DEBUG": "true",
        "NAME": "envfury",
        "ONE_OR_TWO": "one",
        "THREE": "three",
    }


@pytest.fixture
def mock_env_vars(test_env_vars):
    """Mock environment variables for testing."""
    with patch.dict(os.environ, test_env_vars, clear=False):
        yield test_env_vars


@pytest.fixture
def clean_env():
    """Provide a process environment without any of the test variables."""
    keys = ["PORT", "TIMEOUT", "RATIO", "LEVEL", "NAME", "ONE_OR_TWO"]
    with patch.dict(os.environ, {}, clear=False):
        for key in keys:
            os.environ.pop(key, None)
        yield


def one_or_two(text):
    """Parse "one" and "two" into integers."""
    if text == "one":
        return 1
    if text == "two":
        return 2
    raise ValueError('not "one" or "two"')


@pytest.fixture
def int_override():
    """Register the one/two override for int for the duration of a test."""
    register(int)(one_or_two)
    yield one_or_two
    unregister(int)
