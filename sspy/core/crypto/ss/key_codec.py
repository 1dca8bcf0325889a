"""
Key file serialization.

Public key file:  n as uppercase hex, then the owner name.
Private key file: pq as uppercase hex, then d as uppercase hex.
"""
from typing import TextIO

from .keys import SSPublicKey, SSPrivateKey
from ..utils.encoding import HexRecordCodec
from ...exceptions import KeyFormatError


class KeyCodec:
    """Reads and writes Schmidt-Samoa key files."""

    @staticmethod
    def _read_field(stream: TextIO, field: str) -> str:
        line = stream.readline()
        if not line:
            raise KeyFormatError(f"Key file ended before '{field}'", field=field)
        return line.strip()

    @staticmethod
    def _read_int(stream: TextIO, field: str) -> int:
        text = KeyCodec._read_field(stream, field)
        try:
            return HexRecordCodec.from_hex(text)
        except ValueError as e:
            raise KeyFormatError(f"Invalid '{field}' in key file: {e}", field=field) from e

    @staticmethod
    def _check_owner(owner: str) -> str:
        if not owner or any(ch.isspace() for ch in owner):
            raise KeyFormatError(
                f"Owner must be a non-empty name without whitespace: {owner!r}",
                field='owner'
            )
        return owner

    @staticmethod
    def write_pub(key: SSPublicKey, stream: TextIO):
        """Writes a public key to an open text stream."""
        owner = KeyCodec._check_owner(key.owner)
        stream.write(f"{HexRecordCodec.to_hex(key.n)}\n{owner}\n")

    @staticmethod
    def read_pub(stream: TextIO) -> SSPublicKey:
        """Reads a public key from an open text stream."""
        n = KeyCodec._read_int(stream, 'n')
        owner = KeyCodec._check_owner(KeyCodec._read_field(stream, 'owner'))
        return SSPublicKey(n=n, owner=owner)

    @staticmethod
    def write_priv(key: SSPrivateKey, stream: TextIO):
        """Writes a private key to an open text stream."""
        stream.write(f"{HexRecordCodec.to_hex(key.pq)}\n{HexRecordCodec.to_hex(key.d)}\n")

    @staticmethod
    def read_priv(stream: TextIO) -> SSPrivateKey:
        """Reads a private key from an open text stream."""
        pq = KeyCodec._read_int(stream, 'pq')
        d = KeyCodec._read_int(stream, 'd')
        return SSPrivateKey(pq=pq, d=d)


write_pub = KeyCodec.write_pub
read_pub = KeyCodec.read_pub
write_priv = KeyCodec.write_priv
read_priv = KeyCodec.read_priv
