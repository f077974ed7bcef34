"""Password hash service - application layer use cases."""

import logging
from collections.abc import Sequence
from typing import Optional

from phc_codec.application.dtos.password_hash_dto import (
    BuildPasswordHashDTO,
    HashPasswordDTO,
    ParsePasswordHashDTO,
    PasswordHashDTO,
    SerializedHashDTO,
    VerificationResultDTO,
    VerifyPasswordDTO,
)
from phc_codec.application.exceptions import UnsupportedAlgorithmError
from phc_codec.domain.codec.parser import parse_password_hash
from phc_codec.domain.exceptions import PasswordHashFormatException
from phc_codec.domain.services.password_hasher import IPasswordHasher, generate_salt

logger = logging.getLogger(__name__)


class PasswordHashService:
    """
    Service encapsulating the password-hash use cases.

    This service:
    1. Parses and builds hash strings through the domain codec
    2. Depends on IPasswordHasher abstractions (not concrete implementations)
    3. Returns DTOs to the presentation layer

    Parse and build errors propagate as domain exceptions. Verification is
    different: a malformed stored hash is a failed verification, reported as
    ``valid=False`` with the reason kept in the logs.
    """

    def __init__(
        self,
        hashers: Sequence[IPasswordHasher],
        default_encoding: Optional[str] = None,
    ):
        """
        Initialize service with dependencies.

        Args:
            hashers: Available hashers; the first one is used for new hashes
            default_encoding: Alphabet used when a request names none
                ("phc" / "legacy"), or None to pick it from the identifier

        Example:
            # Production
            service = PasswordHashService(hashers=[Argon2PasswordHasher()])

            # Testing
            service = PasswordHashService(hashers=[FakePasswordHasher()])
        """
        if not hashers:
            raise ValueError("PasswordHashService needs at least one hasher")
        self._hashers = list(hashers)
        self._default_encoding = default_encoding

    def inspect(self, dto: ParsePasswordHashDTO) -> PasswordHashDTO:
        """
        Parse a hash string into its fields.

        Raises:
            PasswordHashFormatException: If the string is malformed
        """
        password_hash = parse_password_hash(dto.hash, dto.encoding or self._default_encoding)
        return PasswordHashDTO.from_entity(password_hash)

    def build(self, dto: BuildPasswordHashDTO) -> SerializedHashDTO:
        """
        Build the canonical hash string for a set of fields.

        Raises:
            DomainException: If the fields violate a PasswordHash invariant
        """
        return SerializedHashDTO(hash=dto.to_entity(self._default_encoding).serialize())

    def hash_password(self, dto: HashPasswordDTO) -> PasswordHashDTO:
        """
        Hash a password with the requested (or default) hasher.

        Raises:
            UnsupportedAlgorithmError: If no hasher handles ``dto.algorithm``
            UnsupportedAlgorithmException: If the hasher cannot produce the
                requested version
            InvalidParamException: If the hasher rejects the parameters
        """
        hasher = self._select_hasher(dto.algorithm)
        if dto.customized():
            password_hash = hasher.hash_password_customized(
                dto.password,
                generate_salt(hasher.salt_length),
                version=dto.version,
                params=dto.to_params(),
            )
        else:
            password_hash = hasher.hash_password(dto.password)
        logger.info(f"Hashed password with {password_hash.ident}")
        return PasswordHashDTO.from_entity(password_hash)

    def verify_password(self, dto: VerifyPasswordDTO) -> VerificationResultDTO:
        """
        Verify a password against a stored hash string.

        Returns:
            VerificationResultDTO; ``valid`` is False for wrong passwords,
            malformed hashes and unsupported algorithms alike
        """
        try:
            password_hash = parse_password_hash(
                dto.hash, dto.encoding or self._default_encoding
            )
        except PasswordHashFormatException as exc:
            # Error code only, never the input
            logger.warning(f"Rejected malformed password hash: {exc.error_code}")
            return VerificationResultDTO(valid=False)

        supporting = [hasher for hasher in self._hashers if hasher.supports(password_hash)]
        if not supporting:
            logger.warning(f"No hasher supports algorithm {password_hash.ident!r}")
            return VerificationResultDTO(valid=False)

        if not password_hash.verify_password(supporting, dto.password):
            return VerificationResultDTO(valid=False)

        needs_rehash = supporting[0] is not self._hashers[0] or supporting[0].needs_rehash(
            password_hash
        )
        return VerificationResultDTO(valid=True, needs_rehash=needs_rehash)

    def _select_hasher(self, algorithm: Optional[str]) -> IPasswordHasher:
        if algorithm is None:
            return self._hashers[0]
        for hasher in self._hashers:
            if hasher.ident == algorithm:
                return hasher
        raise UnsupportedAlgorithmError(
            f"No hasher configured for algorithm {algorithm!r}"
        )
