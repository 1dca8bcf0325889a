"""Encoding utilities."""
import re
from typing import Optional, Union

from ...exceptions import MalformedRecordError

_HEX_DIGITS = re.compile(r'[0-9A-Fa-f]+')


class HexRecordCodec:
    """Uppercase hexadecimal encoder/decoder for integer records."""

    @staticmethod
    def to_hex(value: int) -> str:
        """Formats a non-negative integer as uppercase hex without prefix."""
        if value < 0:
            raise ValueError("Only non-negative integers can be encoded")
        return format(value, 'X')

    @staticmethod
    def from_hex(text: str) -> int:
        """Parses bare hex digits (either case); raises ValueError otherwise."""
        text = text.strip()
        if not _HEX_DIGITS.fullmatch(text):
            raise ValueError(f"Not a hexadecimal integer: {text[:32]!r}")
        return int(text, 16)

    @staticmethod
    def encode(value: int) -> bytes:
        """Encodes an integer as one newline-terminated ASCII record."""
        return (HexRecordCodec.to_hex(value) + '\n').encode('ascii')

    @staticmethod
    def decode(record: Union[bytes, str], line_number: Optional[int] = None) -> int:
        """Decodes one record; surrounding whitespace is ignored."""
        try:
            if isinstance(record, bytes):
                text = record.decode('ascii')
            else:
                text = record
            return HexRecordCodec.from_hex(text)
        except (UnicodeDecodeError, ValueError) as e:
            where = f" on line {line_number}" if line_number is not None else ""
            raise MalformedRecordError(
                f"Malformed ciphertext record{where}: {e}",
                record=record if isinstance(record, bytes) else record.encode('ascii', 'replace'),
                line_number=line_number,
            ) from e
