"""Salt and output fields: Base64 text <-> bounded byte strings."""

from phc_codec.domain.codec.alphabet import Encoding, b64_decode, b64_encode, decoded_len
from phc_codec.domain.constants import MAX_HASH_LENGTH, MAX_SALT_LENGTH
from phc_codec.domain.exceptions import (
    HashTooLongException,
    PasswordHashFormatException,
    SaltTooLongException,
)


def decode_field(
    text: str,
    encoding: Encoding,
    max_len: int,
    too_long: type[PasswordHashFormatException],
) -> bytes:
    """
    Decode a Base64 field, bounding its size before decoding.

    Args:
        text: Encoded field text
        encoding: Active alphabet
        max_len: Maximum decoded length in bytes
        too_long: Exception raised when the field exceeds ``max_len``

    Returns:
        Decoded bytes
    """
    if decoded_len(text) > max_len:
        raise too_long(
            f"Field of {len(text)} characters exceeds the {max_len}-byte limit"
        )
    return b64_decode(text, encoding)


def decode_salt(text: str, encoding: Encoding) -> bytes:
    return decode_field(text, encoding, MAX_SALT_LENGTH, SaltTooLongException)


def decode_hash(text: str, encoding: Encoding) -> bytes:
    return decode_field(text, encoding, MAX_HASH_LENGTH, HashTooLongException)


def encode_field(data: bytes, encoding: Encoding) -> str:
    """Encode a field; length bounds are checked when the value is built."""
    return b64_encode(data, encoding)
