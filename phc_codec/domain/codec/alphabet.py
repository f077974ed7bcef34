"""Unpadded Base64 over the two alphabets used by password hash strings.

Both alphabets share the standard Base64 bit order: every 3 input bytes map
to 4 symbols, and a trailing 1 or 2 bytes map to 2 or 3 symbols. Only the
symbol table differs:

    PHC     ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/
    LEGACY  ./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz

Padding ('=') is never written and never accepted. Decoding is strict: a
final partial group whose unused low bits are non-zero is rejected, so each
byte string has exactly one accepted text form.
"""

import base64
from enum import Enum

from phc_codec.domain.exceptions import (
    InvalidBase64CharException,
    InvalidBase64LengthException,
    NonCanonicalBase64Exception,
)

_STANDARD_ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
)
_CRYPT_ALPHABET = (
    "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
)


class Encoding(str, Enum):
    """Base64 alphabet a hash string's salt and output are written in."""

    PHC = "phc"
    LEGACY = "legacy"

    @property
    def alphabet(self) -> str:
        return _STANDARD_ALPHABET if self is Encoding.PHC else _CRYPT_ALPHABET


# Symbol -> 6-bit value, one table per alphabet
_DECODE_TABLES = {
    encoding: {symbol: index for index, symbol in enumerate(encoding.alphabet)}
    for encoding in Encoding
}

# Translation between the standard alphabet and the crypt(3) one
_TO_CRYPT = str.maketrans(_STANDARD_ALPHABET, _CRYPT_ALPHABET)
_FROM_CRYPT = str.maketrans(_CRYPT_ALPHABET, _STANDARD_ALPHABET)

# Unused low bits of the last symbol, keyed by the size of the final group
_TAIL_MASKS = {2: 0x0F, 3: 0x03}


def encoded_len(data: bytes) -> int:
    """Number of symbols ``b64_encode`` produces for ``data``."""
    full, rest = divmod(len(data), 3)
    return full * 4 + (rest + 1 if rest else 0)


def decoded_len(text: str) -> int:
    """Number of bytes a well-formed ``text`` decodes to."""
    return len(text) * 3 // 4


def b64_encode(data: bytes, encoding: Encoding = Encoding.PHC) -> str:
    """Encode bytes as unpadded Base64 in the given alphabet."""
    text = base64.b64encode(bytes(data)).decode("ascii").rstrip("=")
    if encoding is Encoding.LEGACY:
        return text.translate(_TO_CRYPT)
    return text


def b64_decode(text: str, encoding: Encoding = Encoding.PHC) -> bytes:
    """
    Decode unpadded Base64 text in the given alphabet.

    Args:
        text: Encoded text, without padding
        encoding: Alphabet the text is written in

    Returns:
        Decoded bytes

    Raises:
        InvalidBase64CharException: If a symbol is outside the alphabet
        InvalidBase64LengthException: If len(text) % 4 == 1
        NonCanonicalBase64Exception: If unused trailing bits are set
    """
    table = _DECODE_TABLES[encoding]

    for position, symbol in enumerate(text):
        if symbol not in table:
            raise InvalidBase64CharException(
                f"Invalid character {symbol!r} at position {position} "
                f"for the {encoding.value} Base64 alphabet"
            )

    tail = len(text) % 4
    if tail == 1:
        raise InvalidBase64LengthException(
            f"Invalid Base64 length {len(text)}: a final group of one symbol "
            "cannot encode a byte"
        )

    if tail and table[text[-1]] & _TAIL_MASKS[tail]:
        raise NonCanonicalBase64Exception(
            f"Non-canonical Base64: unused bits of final symbol {text[-1]!r} "
            "must be zero"
        )

    if encoding is Encoding.LEGACY:
        text = text.translate(_FROM_CRYPT)

    # Every symbol has been checked, so the standard decoder cannot fail here
    return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)
