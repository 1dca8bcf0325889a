"""Crypto module: number theory primitives and the Schmidt-Samoa cryptosystem."""
from .random_state import RandomState
from .utils import HexRecordCodec
from .numtheory import gcd, mod_inverse, pow_mod, is_prime, make_prime
from .ss import (
    SSPublicKey,
    SSPrivateKey,
    SSKeyPair,
    KeyGenerator,
    KeyCodec,
    BlockCodec,
    SSEncrypt,
    SSDecrypt,
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

__all__ = [
    'RandomState',
    'HexRecordCodec',
    # Number theory
    'gcd',
    'mod_inverse',
    'pow_mod',
    'is_prime',
    'make_prime',
    # Cryptosystem
    'SSPublicKey',
    'SSPrivateKey',
    'SSKeyPair',
    'KeyGenerator',
    'KeyCodec',
    'BlockCodec',
    'SSEncrypt',
    'SSDecrypt',
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
]
