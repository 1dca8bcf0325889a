"""
Custom exceptions for Schmidt-Samoa operations.

This module defines exception classes raised by the number theory,
key handling and stream cipher layers.
"""
from typing import Optional


class SSException(Exception):
    """Base exception for all sspy errors."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            error_code: Numeric error code (if available)
        """
        self.error_code = error_code
        super().__init__(message)


class MalformedRecordError(SSException):
    """Exception raised when a ciphertext record is not a valid hex integer."""

    def __init__(
        self,
        message: str,
        record: Optional[bytes] = None,
        line_number: Optional[int] = None,
        error_code: Optional[int] = None
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Error message
            record: Raw record that failed to parse
            line_number: 1-based line of the record in its stream (if known)
            error_code: Numeric error code (if available)
        """
        self.record = record
        self.line_number = line_number
        super().__init__(message, error_code)


class KeyFormatError(SSException):
    """Exception raised when a key file cannot be parsed or written."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        error_code: Optional[int] = None
    ) -> None:
        self.field = field
        super().__init__(message, error_code)


class NotInvertibleError(SSException):
    """Exception raised when a modular inverse does not exist."""

    def __init__(self, value: int, modulus: int) -> None:
        self.value = value
        self.modulus = modulus
        super().__init__(f"{value:#x} has no inverse modulo {modulus:#x}")


class PrimeGenerationError(SSException):
    """Exception raised when the bounded prime search gives up."""

    def __init__(self, bits: int, attempts: int) -> None:
        self.bits = bits
        self.attempts = attempts
        super().__init__(
            f"Could not find a {bits + 1}-bit prime in {attempts} attempts"
        )


class BlockSizeError(SSException):
    """Exception raised when a modulus is too small to carry any payload."""
    pass


class DecryptionError(SSException):
    """Exception raised when a decrypted block is not a valid sentinel block."""
    pass
