"""Registry of well-known password hashing algorithm identifiers.

The registry is closed: it maps exact identifiers to algorithms and says
which Base64 alphabet each one writes its salt and output in. Identifiers
that are not listed here are still valid, they are just not recognised.
"""

from enum import Enum
from typing import Optional

from phc_codec.domain.codec.alphabet import Encoding


class Algorithm(str, Enum):
    """Well-known algorithm identifiers, by their ``<id>`` token."""

    ARGON2D = "argon2d"
    ARGON2I = "argon2i"
    ARGON2ID = "argon2id"

    # bcrypt revisions: original OpenBSD, then 2a/2b/2x/2y bug-fix markers
    BCRYPT = "2"
    BCRYPT_A = "2a"
    BCRYPT_B = "2b"
    BCRYPT_X = "2x"
    BCRYPT_Y = "2y"

    MD5_CRYPT = "1"

    PBKDF2_SHA1 = "pbkdf2"
    PBKDF2_SHA256 = "pbkdf2-sha256"
    PBKDF2_SHA512 = "pbkdf2-sha512"

    SCRYPT = "scrypt"

    SHA256_CRYPT = "5"
    SHA512_CRYPT = "6"

    @property
    def ident(self) -> str:
        return self.value

    @property
    def family(self) -> str:
        """Algorithm family name, e.g. ``bcrypt`` for every bcrypt revision."""
        return _FAMILIES[self]

    @property
    def encoding(self) -> Encoding:
        """Alphabet the algorithm's salt and output are written in."""
        return Encoding.LEGACY if self in _CRYPT_ALGORITHMS else Encoding.PHC

    @classmethod
    def from_ident(cls, ident: str) -> Optional["Algorithm"]:
        """Look up an identifier, returning None when it is not registered."""
        try:
            return cls(ident)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


_FAMILIES = {
    Algorithm.ARGON2D: "argon2",
    Algorithm.ARGON2I: "argon2",
    Algorithm.ARGON2ID: "argon2",
    Algorithm.BCRYPT: "bcrypt",
    Algorithm.BCRYPT_A: "bcrypt",
    Algorithm.BCRYPT_B: "bcrypt",
    Algorithm.BCRYPT_X: "bcrypt",
    Algorithm.BCRYPT_Y: "bcrypt",
    Algorithm.MD5_CRYPT: "md5-crypt",
    Algorithm.PBKDF2_SHA1: "pbkdf2",
    Algorithm.PBKDF2_SHA256: "pbkdf2",
    Algorithm.PBKDF2_SHA512: "pbkdf2",
    Algorithm.SCRYPT: "scrypt",
    Algorithm.SHA256_CRYPT: "sha-crypt",
    Algorithm.SHA512_CRYPT: "sha-crypt",
}

# Modular Crypt Format algorithms, written with the crypt(3) alphabet
_CRYPT_ALGORITHMS = frozenset(
    {
        Algorithm.BCRYPT,
        Algorithm.BCRYPT_A,
        Algorithm.BCRYPT_B,
        Algorithm.BCRYPT_X,
        Algorithm.BCRYPT_Y,
        Algorithm.MD5_CRYPT,
        Algorithm.SHA256_CRYPT,
        Algorithm.SHA512_CRYPT,
    }
)
