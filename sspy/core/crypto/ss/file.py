"""
Whole-stream encryption and decryption.

Plaintext is cut into blocks of at most k - 1 bytes, each block is
marker-prefixed, encrypted and written as one hex record per line.
Decryption reverses this record by record.
"""
from typing import BinaryIO, Optional

from .block import BlockCodec
from .cipher import encrypt, decrypt
from ..utils.encoding import HexRecordCodec
from ...logging import get_logger

logger = get_logger(__name__)


def _read_up_to(stream: BinaryIO, size: int) -> bytes:
    """Reads until `size` bytes are collected or the stream is exhausted."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b''.join(chunks)


class SSEncrypt:
    """Encrypts byte streams with a public modulus n."""

    def __init__(self, n: int):
        self.n = n
        self.block_size = BlockCodec.block_size_for_public(n)

    @property
    def payload_size(self) -> int:
        """Plaintext bytes carried by one block."""
        return self.block_size - 1

    def encrypt_block(self, payload: bytes) -> bytes:
        """Encrypts one payload into a newline-terminated hex record."""
        m = BlockCodec.encode(payload)
        return HexRecordCodec.encode(encrypt(m, self.n))

    def encrypt_stream(self, infile: BinaryIO, outfile: BinaryIO) -> int:
        """
        Encrypts everything readable from infile into outfile.

        Returns:
            Number of records written
        """
        records = 0
        while True:
            payload = _read_up_to(infile, self.payload_size)
            if not payload:
                break
            outfile.write(self.encrypt_block(payload))
            records += 1
        logger.debug(f"Encrypted {records} blocks of up to {self.payload_size} bytes")
        return records


class SSDecrypt:
    """Decrypts hex record streams with a private key (d, pq)."""

    def __init__(self, d: int, pq: int):
        self.d = d
        self.pq = pq
        self.block_size = BlockCodec.block_size_for_private(pq)

    def decrypt_record(self, record: bytes, line_number: Optional[int] = None) -> bytes:
        """Decrypts one hex record back into its payload bytes."""
        c = HexRecordCodec.decode(record, line_number)
        m = decrypt(c, self.d, self.pq)
        return BlockCodec.decode(m, self.block_size)

    def decrypt_stream(self, infile: BinaryIO, outfile: BinaryIO) -> int:
        """
        Decrypts every record in infile into outfile.

        Blank lines are skipped.

        Returns:
            Number of records decrypted
        """
        records = 0
        for line_number, record in enumerate(infile, start=1):
            if not record.strip():
                continue
            outfile.write(self.decrypt_record(record, line_number))
            records += 1
        logger.debug(f"Decrypted {records} blocks")
        return records


def encrypt_file(infile: BinaryIO, outfile: BinaryIO, n: int) -> int:
    """Encrypts infile into outfile with the public modulus n."""
    return SSEncrypt(n).encrypt_stream(infile, outfile)


def decrypt_file(infile: BinaryIO, outfile: BinaryIO, d: int, pq: int) -> int:
    """Decrypts infile into outfile with the private key (d, pq)."""
    return SSDecrypt(d, pq).decrypt_stream(infile, outfile)
