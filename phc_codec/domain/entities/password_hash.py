"""PasswordHash domain entity - the parsed form of a PHC string."""

import hmac
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from phc_codec.domain.codec.alphabet import Encoding
from phc_codec.domain.codec.selector import select_encoding
from phc_codec.domain.codec.serializer import serialize_password_hash
from phc_codec.domain.constants import (
    MAX_HASH_LENGTH,
    MAX_SALT_LENGTH,
    MAX_STRING_LENGTH,
    MAX_VERSION,
)
from phc_codec.domain.entities.algorithm import Algorithm
from phc_codec.domain.entities.ident import validate_ident
from phc_codec.domain.entities.params import ParamList
from phc_codec.domain.exceptions import (
    HashTooLongException,
    InvalidEntityStateException,
    InvalidParamException,
    InvalidVersionException,
    SaltTooLongException,
    StringTooLongException,
)

if TYPE_CHECKING:
    from phc_codec.domain.services.password_hasher import IPasswordVerifier


@dataclass(frozen=True, eq=False)
class PasswordHash:
    """
    Password hash: algorithm identifier, optional version, parameters,
    salt and output.

    Instances are immutable. Every constructor path, parsing included,
    validates the invariants below, so a live PasswordHash always
    serializes to a string that parses back to an equal value:

    - ident is 1-32 characters from [A-Za-z0-9-]
    - version, when set, is an integer in [0, 2**32 - 1]
    - salt and hash are at most 64 bytes each
    - hash is only set when salt is set
    - the serialized string is at most 512 bytes
    - encoding, when omitted, is chosen from the identifier exactly as
      the parser chooses it

    Usage:
        ph = PasswordHash(
            ident="argon2id",
            version=19,
            params=ParamList([("m", 65536), ("t", 3), ("p", 4)]),
            salt=salt_bytes,
            hash=output_bytes,
        )
        text = str(ph)                 # "$argon2id$v=19$m=65536,t=3,p=4$...$..."
        PasswordHash.parse(text) == ph  # True

    Use dataclasses.replace() to derive a modified copy.
    """

    ident: str
    version: Optional[int] = None
    params: ParamList = field(default_factory=ParamList)
    salt: Optional[bytes] = None
    hash: Optional[bytes] = None
    encoding: Optional[Encoding] = None

    def __post_init__(self):
        validate_ident(self.ident)

        if self.version is not None:
            if (
                isinstance(self.version, bool)
                or not isinstance(self.version, int)
                or not 0 <= self.version <= MAX_VERSION
            ):
                raise InvalidVersionException(
                    f"Invalid version {self.version!r}: expected an integer "
                    f"between 0 and {MAX_VERSION}"
                )

        if not isinstance(self.params, ParamList):
            object.__setattr__(self, "params", ParamList(self.params))

        if self.version is None and self.params.looks_like_version():
            raise InvalidParamException(
                "A lone 'v' parameter is indistinguishable from a version "
                "segment; set version instead"
            )

        if self.salt is not None:
            object.__setattr__(self, "salt", bytes(self.salt))
            if len(self.salt) > MAX_SALT_LENGTH:
                raise SaltTooLongException(
                    f"Salt of {len(self.salt)} bytes exceeds the "
                    f"{MAX_SALT_LENGTH}-byte limit"
                )

        if self.hash is not None:
            object.__setattr__(self, "hash", bytes(self.hash))
            if len(self.hash) > MAX_HASH_LENGTH:
                raise HashTooLongException(
                    f"Hash of {len(self.hash)} bytes exceeds the "
                    f"{MAX_HASH_LENGTH}-byte limit"
                )
            if self.salt is None:
                raise InvalidEntityStateException(
                    "A hash output cannot be present without a salt"
                )

        object.__setattr__(self, "encoding", select_encoding(self.ident, self.encoding))

        # Every accepted field is ASCII, so characters and UTF-8 bytes agree
        length = len(serialize_password_hash(self))
        if length > MAX_STRING_LENGTH:
            raise StringTooLongException(
                f"Serialized hash of {length} bytes exceeds the "
                f"{MAX_STRING_LENGTH}-byte limit"
            )

    @classmethod
    def parse(
        cls, text: str, encoding: Optional[Union[Encoding, str]] = None
    ) -> "PasswordHash":
        """
        Parse a hash string.

        Args:
            text: Hash string in PHC format
            encoding: Alphabet of the salt/output fields; when omitted it is
                chosen from the identifier (see select_encoding)

        Raises:
            PasswordHashFormatException: If the string is malformed
        """
        from phc_codec.domain.codec.parser import parse_password_hash

        return parse_password_hash(text, encoding)

    @property
    def algorithm(self) -> Optional[Algorithm]:
        """Registered algorithm for this identifier, if any."""
        return Algorithm.from_ident(self.ident)

    def serialize(self) -> str:
        return serialize_password_hash(self)

    def verify_password(
        self,
        verifiers: Iterable["IPasswordVerifier"],
        password: Union[str, bytes],
    ) -> bool:
        """
        Check a password against this hash with any of the given verifiers.

        Returns:
            True if one verifier accepts the password, False otherwise
        """
        return any(
            verifier.verify_password(password, self) for verifier in verifiers
        )

    def __str__(self) -> str:
        return serialize_password_hash(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PasswordHash):
            return NotImplemented
        return (
            self.ident == other.ident
            and self.version == other.version
            and self.params == other.params
            and self.salt == other.salt
            and self.encoding == other.encoding
            and _outputs_equal(self.hash, other.hash)
        )

    def __hash__(self) -> int:
        return hash(
            (self.ident, self.version, self.params, self.salt, self.hash, self.encoding)
        )


def _outputs_equal(left: Optional[bytes], right: Optional[bytes]) -> bool:
    # Non-short-circuiting comparison of hash outputs
    if left is None or right is None:
        return left is right
    return hmac.compare_digest(left, right)
