"""Tests for key file serialization."""
import io

import pytest

from sspy.core.crypto.ss import KeyCodec, SSPublicKey, SSPrivateKey, read_pub, write_pub
from sspy.core.exceptions import KeyFormatError


class TestPublicKeyCodec:
    """Test suite for public key files."""

    def test_format(self):
        """Test n is uppercase hex followed by the owner."""
        stream = io.StringIO()
        KeyCodec.write_pub(SSPublicKey(n=0xABCDEF0123, owner="alice"), stream)

        assert stream.getvalue() == "ABCDEF0123\nalice\n"

    def test_roundtrip(self, keypair):
        """Test a generated public key survives serialization."""
        stream = io.StringIO()
        write_pub(keypair.public, stream)
        stream.seek(0)

        assert read_pub(stream) == keypair.public

    def test_lowercase_hex_accepted(self):
        """Test lowercase hex is read as well."""
        key = KeyCodec.read_pub(io.StringIO("abcdef\nbob\n"))
        assert key.n == 0xABCDEF
        assert key.owner == "bob"

    def test_missing_owner(self):
        """Test a truncated file is rejected."""
        with pytest.raises(KeyFormatError) as exc_info:
            KeyCodec.read_pub(io.StringIO("ABCDEF\n"))
        assert exc_info.value.field == "owner"

    def test_invalid_modulus(self):
        """Test a non-hex modulus is rejected."""
        with pytest.raises(KeyFormatError) as exc_info:
            KeyCodec.read_pub(io.StringIO("0xZZ\nalice\n"))
        assert exc_info.value.field == "n"

    def test_owner_with_whitespace_rejected(self):
        """Test owners with whitespace cannot be written."""
        with pytest.raises(KeyFormatError):
            KeyCodec.write_pub(SSPublicKey(n=15, owner="alice smith"), io.StringIO())

    def test_empty_owner_rejected(self):
        """Test an empty owner cannot be written."""
        with pytest.raises(KeyFormatError):
            KeyCodec.write_pub(SSPublicKey(n=15, owner=""), io.StringIO())


class TestPrivateKeyCodec:
    """Test suite for private key files."""

    def test_format(self):
        """Test pq and d are written as uppercase hex lines."""
        stream = io.StringIO()
        KeyCodec.write_priv(SSPrivateKey(pq=0xBEEF, d=0xC0FFEE), stream)

        assert stream.getvalue() == "BEEF\nC0FFEE\n"

    def test_roundtrip(self, keypair):
        """Test a generated private key survives serialization."""
        stream = io.StringIO()
        KeyCodec.write_priv(keypair.private, stream)
        stream.seek(0)

        assert KeyCodec.read_priv(stream) == keypair.private

    def test_empty_file(self):
        """Test an empty private key file is rejected."""
        with pytest.raises(KeyFormatError) as exc_info:
            KeyCodec.read_priv(io.StringIO(""))
        assert exc_info.value.field == "pq"

    def test_invalid_exponent(self):
        """Test a malformed exponent is rejected."""
        with pytest.raises(KeyFormatError) as exc_info:
            KeyCodec.read_priv(io.StringIO("BEEF\n-12\n"))
        assert exc_info.value.field == "d"
