"""PHC string -> PasswordHash.

Grammar:

    hash_string := "$" ident ( "$v=" digits )? ( "$" params )? ( "$" salt ( "$" output )? )?
    params      := param ( "," param )*
    param       := key "=" value

Fields are read left to right, one '$'-delimited segment at a time. The
segment after the identifier is a version when it starts with ``v=`` and
holds a single pair; the next segment is the parameter list when it
contains '='; whatever follows is the salt and then the output. Any segment
beyond the output is an error.
"""

from typing import Optional, Union

from phc_codec.domain.codec.alphabet import Encoding
from phc_codec.domain.codec.fields import decode_hash, decode_salt
from phc_codec.domain.codec.selector import select_encoding
from phc_codec.domain.constants import (
    FIELD_SEPARATOR,
    MAX_STRING_LENGTH,
    MAX_VERSION,
    PAIR_DELIMITER,
    PARAMS_DELIMITER,
    VERSION_PREFIX,
)
from phc_codec.domain.entities.ident import validate_ident
from phc_codec.domain.entities.params import ParamList, parse_decimal, parse_params
from phc_codec.domain.entities.password_hash import PasswordHash
from phc_codec.domain.exceptions import (
    InvalidVersionException,
    MissingSeparatorException,
    StringTooLongException,
    TrailingDataException,
)


def _is_version_segment(segment: str) -> bool:
    return segment.startswith(VERSION_PREFIX) and PARAMS_DELIMITER not in segment


def _parse_version(segment: str) -> int:
    digits = segment[len(VERSION_PREFIX):]
    version = parse_decimal(digits, MAX_VERSION)
    if version is None:
        raise InvalidVersionException(
            f"Invalid version {digits!r}: expected a decimal between 0 and "
            f"{MAX_VERSION} without leading zeros"
        )
    return version


def parse_password_hash(
    text: str, encoding: Optional[Union[Encoding, str]] = None
) -> PasswordHash:
    """
    Parse a PHC string into a PasswordHash.

    Args:
        text: Hash string, e.g. "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>"
        encoding: Alphabet of the salt/output fields. When omitted, the
            identifier is looked up in the algorithm registry; unknown
            identifiers use the PHC alphabet.

    Returns:
        Validated PasswordHash holding copies of the decoded fields

    Raises:
        StringTooLongException: If the string exceeds 512 UTF-8 bytes
        MissingSeparatorException: If the string does not start with '$'
        InvalidIdentException: If the identifier is malformed
        InvalidVersionException: If the version segment is malformed
        InvalidParamException, DuplicateParamKeyException,
        TooManyParamsException: If the parameter segment is malformed
        InvalidBase64CharException, InvalidBase64LengthException,
        NonCanonicalBase64Exception, SaltTooLongException,
        HashTooLongException: If the salt or output is malformed
        TrailingDataException: If segments remain after the output
    """
    # Bound the work done on adversarial input before looking at any field.
    # A character is at least one UTF-8 byte, so the length check comes first.
    if (
        len(text) > MAX_STRING_LENGTH
        or len(text.encode("utf-8", "surrogatepass")) > MAX_STRING_LENGTH
    ):
        raise StringTooLongException(
            f"Hash string exceeds the {MAX_STRING_LENGTH}-byte limit"
        )

    if not text.startswith(FIELD_SEPARATOR):
        raise MissingSeparatorException(
            f"Hash string must start with {FIELD_SEPARATOR!r}"
        )

    segments = text[len(FIELD_SEPARATOR):].split(FIELD_SEPARATOR)
    ident = validate_ident(segments[0])
    position = 1

    version = None
    if position < len(segments) and _is_version_segment(segments[position]):
        version = _parse_version(segments[position])
        position += 1

    params = ParamList()
    if position < len(segments) and PAIR_DELIMITER in segments[position]:
        params = parse_params(segments[position])
        position += 1

    # At most a salt and an output may follow
    fields = segments[position:]
    if len(fields) > 2:
        raise TrailingDataException(
            f"Unexpected data after the hash output: {len(fields) - 2} extra segment(s)"
        )

    active_encoding = select_encoding(ident, encoding)
    salt = decode_salt(fields[0], active_encoding) if len(fields) > 0 else None
    output = decode_hash(fields[1], active_encoding) if len(fields) > 1 else None

    return PasswordHash(
        ident=ident,
        version=version,
        params=params,
        salt=salt,
        hash=output,
        encoding=active_encoding,
    )
