"""Unit tests for the Base64 alphabet codec."""

import pytest

from phc_codec.domain.codec.alphabet import (
    Encoding,
    b64_decode,
    b64_encode,
    decoded_len,
    encoded_len,
)
from phc_codec.domain.exceptions import (
    InvalidBase64CharException,
    InvalidBase64LengthException,
    NonCanonicalBase64Exception,
    PasswordHashFormatException,
)
from tests.vectors import EXAMPLE_SALT, EXAMPLE_SALT_B64

pytestmark = pytest.mark.unit


class TestEncode:
    """Test encoding in both alphabets."""

    def test_encode_is_unpadded(self):
        # Act
        result = b64_encode(b"somesalt")

        # Assert
        assert result == "c29tZXNhbHQ"
        assert "=" not in result

    def test_encode_example_salt(self):
        assert b64_encode(EXAMPLE_SALT) == EXAMPLE_SALT_B64

    def test_encode_empty(self):
        assert b64_encode(b"") == ""
        assert b64_encode(b"", Encoding.LEGACY) == ""

    def test_legacy_alphabet_order(self):
        """The crypt alphabet starts with './' then digits."""
        # 0x00 0x10 0x83 -> 6-bit values 0, 1, 2, 3
        assert b64_encode(b"\x00\x10\x83", Encoding.LEGACY) == "./01"
        assert b64_encode(b"\x00\x10\x83", Encoding.PHC) == "ABCD"

    def test_phc_uses_plus_and_slash(self):
        assert b64_encode(b"\xfb\xff", Encoding.PHC) == "+/8"

    @pytest.mark.parametrize(
        "data,expected",
        [(b"", 0), (b"a", 2), (b"ab", 3), (b"abc", 4), (b"abcd", 6), (bytes(32), 43)],
    )
    def test_encoded_len(self, data, expected):
        assert encoded_len(data) == expected
        assert len(b64_encode(data)) == expected

    @pytest.mark.parametrize("text,expected", [("", 0), ("AA", 1), ("AAA", 2), ("AAAA", 3)])
    def test_decoded_len(self, text, expected):
        assert decoded_len(text) == expected


class TestDecode:
    """Test strict decoding."""

    @pytest.mark.parametrize("encoding", list(Encoding))
    @pytest.mark.parametrize("length", [0, 1, 2, 3, 4, 15, 16, 32, 64])
    def test_decode_inverts_encode(self, encoding, length):
        # Arrange
        data = bytes(range(200, 200 - length, -1)) if length else b""

        # Act
        result = b64_decode(b64_encode(data, encoding), encoding)

        # Assert
        assert result == data

    def test_decode_legacy(self):
        assert b64_decode("./01", Encoding.LEGACY) == b"\x00\x10\x83"

    def test_padding_rejected(self):
        with pytest.raises(InvalidBase64CharException):
            b64_decode("c29tZXNhbHQ=")

    def test_char_outside_phc_alphabet(self):
        """'.' belongs to the legacy alphabet only."""
        with pytest.raises(InvalidBase64CharException) as exc_info:
            b64_decode("ab.d")

        assert exc_info.value.error_code == "INVALID_BASE64_CHAR"
        assert "position 2" in exc_info.value.message

    def test_char_outside_legacy_alphabet(self):
        """'+' belongs to the PHC alphabet only."""
        with pytest.raises(InvalidBase64CharException):
            b64_decode("ab+d", Encoding.LEGACY)

    def test_non_ascii_rejected(self):
        with pytest.raises(InvalidBase64CharException):
            b64_decode("abcé")

    @pytest.mark.parametrize("text", ["A", "AAAAA", "AAAAAAAAA"])
    def test_length_one_mod_four_rejected(self, text):
        with pytest.raises(InvalidBase64LengthException):
            b64_decode(text)

    def test_non_canonical_two_symbol_tail(self):
        # Arrange: encode(b"\xff") is "/w"; "/x" sets one of the four unused bits
        assert b64_encode(b"\xff") == "/w"

        # Act / Assert
        with pytest.raises(NonCanonicalBase64Exception) as exc_info:
            b64_decode("/x")
        assert exc_info.value.error_code == "NON_CANONICAL_BASE64"

    def test_non_canonical_three_symbol_tail(self):
        # encode(b"\xff\xff") is "//8"; "//9" sets an unused bit
        assert b64_encode(b"\xff\xff") == "//8"

        with pytest.raises(NonCanonicalBase64Exception):
            b64_decode("//9")

    def test_non_canonical_legacy_tail(self):
        """'A' is value 12 in the crypt alphabet, so it cannot end a 2-symbol group."""
        with pytest.raises(NonCanonicalBase64Exception):
            b64_decode("MTIzNA", Encoding.LEGACY)

    def test_errors_are_format_exceptions(self):
        """All decode errors share the format-error base class."""
        for text in ("=", "A", "/x"):
            with pytest.raises(PasswordHashFormatException):
                b64_decode(text)
