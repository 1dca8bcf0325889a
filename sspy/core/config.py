"""
Configuration module.

Provides dataclass configuration for key generation and the stream
cipher commands. Defaults match the classic ``keygen``/``encrypt``/
``decrypt`` tools.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PrimeConfig:
    """
    Prime search configuration.

    Controls Miller-Rabin confidence and how long make_prime may search.
    """
    iters: int = 50  # Miller-Rabin rounds per candidate
    max_attempts: int = 1_000_000  # Candidates sampled before giving up

    @classmethod
    def default(cls) -> 'PrimeConfig':
        """Create default configuration."""
        return cls()


@dataclass
class KeygenConfig:
    """
    Key generation configuration.

    Centralizes the options of the ``ss keygen`` command.
    """
    bits: int = 256  # Minimum bits of the public modulus n
    iters: int = 50
    public_key_path: str = 'ss.pub'
    private_key_path: str = 'ss.priv'
    seed: Optional[int] = None  # None seeds from the clock
    private_key_mode: int = 0o600

    prime: PrimeConfig = field(default_factory=PrimeConfig)

    def __post_init__(self):
        if self.bits <= 0:
            raise ValueError("Key size must be positive")
        if self.iters <= 0:
            raise ValueError("Miller-Rabin iterations must be positive")
        self.prime.iters = self.iters

    @classmethod
    def default(cls) -> 'KeygenConfig':
        """Create default configuration."""
        return cls()

    @classmethod
    def for_testing(cls, seed: int = 42, **kwargs) -> 'KeygenConfig':
        """Create a reproducible configuration with a fixed seed."""
        return cls(seed=seed, **kwargs)


@dataclass
class CipherConfig:
    """
    Stream cipher configuration.

    Key file locations used by ``ss encrypt`` and ``ss decrypt``.
    """
    public_key_path: str = 'ss.pub'
    private_key_path: str = 'ss.priv'

    @classmethod
    def default(cls) -> 'CipherConfig':
        """Create default configuration."""
        return cls()
