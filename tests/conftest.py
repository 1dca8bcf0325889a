"""Pytest fixtures for sspy tests."""
import pytest
from Crypto.Random import get_random_bytes

from sspy.core.crypto import RandomState, generate_keypair


@pytest.fixture
def rng():
    """Returns a random state seeded for reproducible tests."""
    return RandomState(42)


@pytest.fixture(scope="session")
def keypair():
    """Generates a 256-bit key pair once for the whole test session."""
    return generate_keypair(256, 50, "alice", RandomState(42))


@pytest.fixture(scope="session")
def other_keypair():
    """Generates a second, unrelated 256-bit key pair."""
    return generate_keypair(256, 50, "bob", RandomState(7))


@pytest.fixture
def plaintext():
    """Returns random plaintext spanning several blocks."""
    return get_random_bytes(500)
