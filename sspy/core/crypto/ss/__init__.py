"""Schmidt-Samoa cryptosystem: keys, key files and stream cipher."""
from .keys import (
    SSPublicKey,
    SSPrivateKey,
    SSKeyPair,
    KeyGenerator,
    make_pub,
    make_priv,
    generate_keypair,
)
from .key_codec import KeyCodec, write_pub, read_pub, write_priv, read_priv
from .cipher import encrypt, decrypt
from .block import BlockCodec, SENTINEL
from .file import SSEncrypt, SSDecrypt, encrypt_file, decrypt_file

__all__ = [
    'SSPublicKey',
    'SSPrivateKey',
    'SSKeyPair',
    'KeyGenerator',
    'KeyCodec',
    'BlockCodec',
    'SENTINEL',
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
