"""Pytest configuration and shared fixtures for fallible tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from fallible import some

    return some("hello")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from fallible import none

    return none()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fallible import ok

    return ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fallible import err

    return err("test error")


class CallCounter:
    """Callable that records every invocation and returns a fixed value."""

    def __init__(self, returns=None):
        self.returns = returns
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)
        return self.returns

    @property
    def count(self):
        return len(self.calls)


@pytest.fixture
def counter():
    """Factory for call-counting handlers."""
    return CallCounter
