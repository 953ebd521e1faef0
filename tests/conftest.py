"""Pytest configuration and shared fixtures for resultchain tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_config():
    """Start every test from the default configuration."""
    from resultchain import reset

    reset()
    yield
    reset()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from resultchain import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from resultchain import Err

    return Err(ValueError("test error"))


@pytest.fixture
def recorder():
    """List-backed callback recording every value it is called with."""
    calls = []

    def record(value):
        calls.append(value)

    record.calls = calls
    return record
