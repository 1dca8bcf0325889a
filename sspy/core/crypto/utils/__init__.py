"""Shared utilities for the crypto module."""
from .encoding import HexRecordCodec

__all__ = [
    'HexRecordCodec',
]
