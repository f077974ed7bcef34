"""Argon2 password hasher implementation using pwdlib.

This is an INFRASTRUCTURE detail. The domain layer (IPasswordHasher) defines
WHAT we need: a PasswordHash out of a password and salt. This implementation
defines HOW: Argon2id via pwdlib (argon2-cffi underneath), whose encoded
output is read back through the PHC parser.

Dependency flow:
    PasswordHashService (application) → IPasswordHasher (domain) ← Argon2PasswordHasher (infrastructure)

pwdlib is only imported here.
"""

import logging
from typing import Optional

from argon2 import Type
from argon2.exceptions import HashingError, InvalidHashError
from argon2.low_level import ARGON2_VERSION
from pwdlib import PasswordHash as PwdlibPasswordHash
from pwdlib.exceptions import UnknownHashError
from pwdlib.hashers.argon2 import Argon2Hasher

from phc_codec.domain.codec.alphabet import Encoding
from phc_codec.domain.codec.parser import parse_password_hash
from phc_codec.domain.entities.algorithm import Algorithm
from phc_codec.domain.entities.params import ParamList
from phc_codec.domain.entities.password_hash import PasswordHash
from phc_codec.domain.exceptions import InvalidParamException, UnsupportedAlgorithmException
from phc_codec.domain.services.password_hasher import IPasswordHasher, Password

logger = logging.getLogger(__name__)

# Identifiers argon2-cffi can produce and verify
ARGON2_TYPES = {
    Algorithm.ARGON2D.value: Type.D,
    Algorithm.ARGON2I.value: Type.I,
    Algorithm.ARGON2ID.value: Type.ID,
}
ARGON2_IDENTS = frozenset(ARGON2_TYPES)

# PHC parameter name -> Argon2Hasher keyword
ARGON2_COST_PARAMS = {"m": "memory_cost", "t": "time_cost", "p": "parallelism"}

# Upper bounds accepted for customized hashes
MAX_CUSTOM_COSTS = {"memory_cost": 1048576, "time_cost": 64, "parallelism": 64}


class Argon2PasswordHasher(IPasswordHasher):
    """
    Production password hasher using the Argon2id algorithm via pwdlib.

    Configuration (defaults match pwdlib's):
    - Memory cost: 65536 KiB (64 MiB)
    - Time cost: 3 iterations
    - Parallelism: 4 lanes

    Usage:
        hasher = Argon2PasswordHasher()

        ph = hasher.hash_password("user_password_123")
        str(ph)
        # "$argon2id$v=19$m=65536,t=3,p=4$<salt>$<hash>"

        hasher.verify_password("user_password_123", ph)  # True
        hasher.verify_password("wrong_password", ph)     # False

        # Per-call costs, e.g. the OWASP minimum for Argon2id
        hasher.hash_password_with_params(
            "user_password_123", salt, ParamList([("m", 19456), ("t", 2), ("p", 1)])
        )
    """

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
        salt_length: Optional[int] = None,
    ):
        """
        Initialize the hasher.

        Args:
            time_cost: Number of iterations
            memory_cost: Memory usage in KiB
            parallelism: Number of lanes
            salt_length: Bytes of random salt for hash_password()
        """
        self._costs = {
            "time_cost": time_cost,
            "memory_cost": memory_cost,
            "parallelism": parallelism,
        }
        self._hasher = Argon2Hasher(**self._costs)
        # PasswordHash can support multiple hashers (for migration scenarios);
        # only Argon2 is registered here
        self._password_hash = PwdlibPasswordHash((self._hasher,))
        if salt_length is not None:
            self.salt_length = salt_length

    @property
    def ident(self) -> str:
        return Algorithm.ARGON2ID.value

    def hash_password_with_salt(self, password: Password, salt: bytes) -> PasswordHash:
        """
        Hash a password with Argon2id and the given salt.

        argon2-cffi writes its result as a PHC string (PHC alphabet, unpadded),
        which is parsed into a PasswordHash so callers get structured access
        to the version, cost parameters, salt and output.

        Raises:
            argon2.exceptions.HashingError: If argon2 rejects the salt
                (e.g. shorter than 8 bytes)
        """
        encoded = self._password_hash.hash(password, salt=salt)
        return parse_password_hash(encoded, Encoding.PHC)

    def hash_password_customized(
        self,
        password: Password,
        salt: bytes,
        algorithm: Optional[str] = None,
        version: Optional[int] = None,
        params: Optional[ParamList] = None,
    ) -> PasswordHash:
        """
        Hash a password with an explicit Argon2 variant, version and costs.

        ``m``, ``t`` and ``p`` in ``params`` override the configured memory
        cost, time cost and parallelism; the others keep their configured
        values. A one-off pwdlib Argon2Hasher is built for the call, so the
        configured hasher is left untouched.

        Raises:
            UnsupportedAlgorithmException: If the variant is not argon2d,
                argon2i or argon2id, or the version is not 19
            InvalidParamException: If a parameter is unknown, not a positive
                decimal, above its bound, or rejected by argon2
        """
        ident = algorithm or self.ident
        if ident not in ARGON2_TYPES:
            raise UnsupportedAlgorithmException(
                f"Argon2 hasher cannot produce algorithm {ident!r}"
            )
        if version is not None and version != ARGON2_VERSION:
            raise UnsupportedAlgorithmException(
                f"Unsupported Argon2 version {version}: only {ARGON2_VERSION} is produced"
            )

        costs = dict(self._costs)
        for key, _ in params or ParamList():
            if key not in ARGON2_COST_PARAMS:
                raise InvalidParamException(f"Unknown Argon2 parameter {key!r}")
            name = ARGON2_COST_PARAMS[key]
            value = params.get_decimal(key)
            if not value or value > MAX_CUSTOM_COSTS[name]:
                raise InvalidParamException(
                    f"Argon2 parameter {key!r} must be a decimal between 1 and "
                    f"{MAX_CUSTOM_COSTS[name]}"
                )
            costs[name] = value

        hasher = Argon2Hasher(type=ARGON2_TYPES[ident], **costs)
        try:
            encoded = hasher.hash(password, salt=salt)
        except HashingError as exc:
            raise InvalidParamException(f"Argon2 rejected the parameters: {exc}") from exc

        logger.debug(f"Hashed password with customized {ident} parameters")
        return parse_password_hash(encoded, Encoding.PHC)

    def supports(self, password_hash: PasswordHash) -> bool:
        return password_hash.ident in ARGON2_IDENTS

    def verify_password(self, password: Password, password_hash: PasswordHash) -> bool:
        """
        Verify a password against an Argon2 hash.

        The parsed hash is re-serialized to its canonical string and handed to
        argon2-cffi, which re-derives the output with the stored salt and
        parameters and compares in constant time.

        Security Notes:
        - Returns False for non-Argon2 hashes instead of raising
        - Never reveals why verification failed
        """
        if not self.supports(password_hash):
            return False

        try:
            return self._password_hash.verify(password, password_hash.serialize())
        except UnknownHashError:
            # Parsed as a PHC string, but not one pwdlib recognises as Argon2
            # (e.g. missing cost parameters)
            logger.debug(f"Argon2 verifier rejected hash with ident {password_hash.ident}")
            return False

    def needs_rehash(self, password_hash: PasswordHash) -> bool:
        """Check whether a hash was produced with different cost parameters."""
        if not self.supports(password_hash):
            return True
        try:
            return self._hasher.check_needs_rehash(password_hash.serialize())
        except InvalidHashError:
            return True
