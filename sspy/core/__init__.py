"""Core building blocks: configuration, errors, logging and crypto."""
from .config import PrimeConfig, KeygenConfig, CipherConfig
from .exceptions import (
    SSException,
    MalformedRecordError,
    KeyFormatError,
    NotInvertibleError,
    PrimeGenerationError,
    BlockSizeError,
    DecryptionError,
)

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
]
