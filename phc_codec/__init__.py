"""Parse, validate and serialize PHC-format password hash strings.

    >>> from phc_codec import PasswordHash
    >>> ph = PasswordHash.parse("$argon2id$v=19$m=65536,t=3,p=4$c29tZXNhbHQ")
    >>> ph.params.get_decimal("m")
    65536
    >>> str(ph)
    '$argon2id$v=19$m=65536,t=3,p=4$c29tZXNhbHQ'
"""

from phc_codec.domain.codec.alphabet import Encoding, b64_decode, b64_encode
from phc_codec.domain.codec.parser import parse_password_hash
from phc_codec.domain.codec.selector import select_encoding
from phc_codec.domain.codec.serializer import serialize_password_hash
from phc_codec.domain.entities.algorithm import Algorithm
from phc_codec.domain.entities.ident import validate_ident
from phc_codec.domain.entities.params import ParamList, parse_params, serialize_params
from phc_codec.domain.entities.password_hash import PasswordHash
from phc_codec.domain.exceptions import DomainException, PasswordHashFormatException

__all__ = [
    "Algorithm",
    "DomainException",
    "Encoding",
    "ParamList",
    "PasswordHash",
    "PasswordHashFormatException",
    "b64_decode",
    "b64_encode",
    "parse_params",
    "parse_password_hash",
    "select_encoding",
    "serialize_params",
    "serialize_password_hash",
    "validate_ident",
]
