"""
sspy - Schmidt-Samoa public-key cryptosystem.

Usage:
    >>> from sspy import RandomState, generate_keypair, encrypt_file, decrypt_file
    >>>
    >>> keys = generate_keypair(256, 50, "alice", RandomState(42))
    >>> with open("msg.txt", "rb") as src, open("msg.enc", "wb") as dst:
    ...     encrypt_file(src, dst, keys.public.n)
"""
import logging

from .core.logging import set_level
from .core.config import PrimeConfig, KeygenConfig, CipherConfig
from .core.exceptions import (
    SSException,
    MalformedRecordError,
    KeyFormatError,
    NotInvertibleError,
    PrimeGenerationError,
    BlockSizeError,
    DecryptionError,
)
from .core.crypto import (
    RandomState,
    gcd,
    mod_inverse,
    pow_mod,
    is_prime,
    make_prime,
    SSPublicKey,
    SSPrivateKey,
    SSKeyPair,
    KeyGenerator,
    KeyCodec,
    make_pub,
    make_priv,
    generate_keypair,
    write_pub,
    read_pub,
    write_priv,
    read_priv,
    encrypt,
    decrypt,
    encrypt_file,
    decrypt_file,
)

__version__ = '1.0.0'


def setup_logging(level=logging.INFO):
    """
    Configure logging for sspy modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    set_level(level)


__all__ = [
    'PrimeConfig',
    'KeygenConfig',
    'CipherConfig',
    'SSException',
    'MalformedRecordError',
    'KeyFormatError',
    'NotInvertibleError',
    'PrimeGenerationError',
    'BlockSizeError',
    'DecryptionError',
    'RandomState',
    'gcd',
    'mod_inverse',
    'pow_mod',
    'is_prime',
    'make_prime',
    'SSPublicKey',
    'SSPrivateKey',
    'SSKeyPair',
    'KeyGenerator',
    'KeyCodec',
    'make_pub',
    'make_priv',
    'generate_keypair',
    'write_pub',
    'read_pub',
    'write_priv',
    'read_priv',
    'encrypt',
    'decrypt',
    'encrypt_file',
    'decrypt_file',
    'setup_logging',
]
