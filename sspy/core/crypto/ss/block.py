"""
Block encoding for the stream cipher.

Every block is prefixed with a 0xFF marker byte before it is turned into
an integer, so leading zero bytes of the payload survive the round trip
through integer form. The marker is verified and stripped on decode.
"""
import math

from Crypto.Util.number import bytes_to_long, long_to_bytes

from ...exceptions import BlockSizeError, DecryptionError

SENTINEL = 0xFF


class BlockCodec:
    """Converts payload bytes to sentinel-prefixed block integers and back."""

    @staticmethod
    def block_size_for_public(n: int) -> int:
        """
        Block capacity k in bytes for the public modulus n.

        Sized from isqrt(n) so every block integer stays below pq.
        """
        return BlockCodec._check_capacity((math.isqrt(n).bit_length() - 1) // 8)

    @staticmethod
    def block_size_for_private(pq: int) -> int:
        """Block capacity k in bytes for the private modulus pq."""
        return BlockCodec._check_capacity((pq.bit_length() - 1) // 8)

    @staticmethod
    def _check_capacity(k: int) -> int:
        # One byte is taken by the marker
        if k < 2:
            raise BlockSizeError(f"Modulus too small: block capacity is {k} byte(s)")
        return k

    @staticmethod
    def encode(payload: bytes) -> int:
        """Prepends the marker byte and imports the block as big-endian."""
        return bytes_to_long(bytes([SENTINEL]) + payload)

    @staticmethod
    def decode(m: int, capacity: int) -> bytes:
        """
        Exports a block integer as big-endian bytes and strips the marker.

        Args:
            m: Decrypted block integer
            capacity: Block capacity k in bytes

        Returns:
            Payload bytes

        Raises:
            DecryptionError: If the marker is missing or the block is
                larger than the capacity (wrong key or corrupt data)
        """
        block = long_to_bytes(m)
        if len(block) > capacity:
            raise DecryptionError(
                f"Decrypted block is {len(block)} bytes, capacity is {capacity}"
            )
        if not block or block[0] != SENTINEL:
            raise DecryptionError("Decrypted block is missing its 0xFF marker")
        return block[1:]
