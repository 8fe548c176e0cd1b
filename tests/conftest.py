"""Test configuration for blake2kit package."""

import pytest


@pytest.fixture
def message():
    """Provide a short ASCII message."""
    return b"abc"


@pytest.fixture
def key16():
    """Provide the shortest key the facade accepts."""
    return bytes(range(16))


@pytest.fixture
def key32():
    """Provide the longest key the parameter block can encode."""
    return bytes(range(32))


@pytest.fixture
def salt16():
    """Provide a 16-byte salt string."""
    return b"saltsalt-ignored"


@pytest.fixture
def personal16():
    """Provide a 16-byte personalization string."""
    return b"personal-ignored"
