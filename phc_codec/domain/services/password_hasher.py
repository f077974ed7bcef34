"""Password hashing interfaces - the producers and consumers of PasswordHash.

The codec itself never hashes anything. Concrete algorithms live outside the
domain layer and plug in through these interfaces:

- IPasswordHasher turns a password and a salt into a PasswordHash, with
  its configured parameters or with customized ones
- IPasswordVerifier checks a password against a parsed PasswordHash

Dependencies point INWARD: the Argon2 implementation in the infrastructure
layer depends on these abstractions, never the other way round.
"""

import secrets
from abc import ABC, abstractmethod
from typing import Optional, Union

from phc_codec.domain.constants import RECOMMENDED_SALT_LENGTH
from phc_codec.domain.entities.params import ParamList
from phc_codec.domain.entities.password_hash import PasswordHash

Password = Union[str, bytes]


def generate_salt(length: int = RECOMMENDED_SALT_LENGTH) -> bytes:
    """Generate a random salt from the OS CSPRNG."""
    return secrets.token_bytes(length)


class IPasswordVerifier(ABC):
    """Interface for checking a password against a parsed hash."""

    @abstractmethod
    def verify_password(self, password: Password, password_hash: PasswordHash) -> bool:
        """
        Verify a password against a parsed password hash.

        Implementations must return False (not raise) for hashes they do not
        support or whose parameters they reject.

        Args:
            password: Plain text password
            password_hash: Parsed hash to check against

        Returns:
            True if the password matches, False otherwise
        """


class IPasswordHasher(IPasswordVerifier):
    """
    Interface for password hashing algorithms.

    Implementations compute the output with their own configured parameters
    and return it as a PasswordHash, ready to be serialized for storage.
    """

    salt_length: int = RECOMMENDED_SALT_LENGTH

    @property
    @abstractmethod
    def ident(self) -> str:
        """Algorithm identifier written into produced hashes."""

    @abstractmethod
    def hash_password_with_salt(self, password: Password, salt: bytes) -> PasswordHash:
        """
        Hash a password with a caller-provided salt.

        The salt should be unique per password. When in doubt use
        hash_password(), which generates one.

        Args:
            password: Plain text password
            salt: Raw salt bytes

        Returns:
            PasswordHash carrying identifier, parameters, salt and output
        """

    @abstractmethod
    def hash_password_customized(
        self,
        password: Password,
        salt: bytes,
        algorithm: Optional[str] = None,
        version: Optional[int] = None,
        params: Optional[ParamList] = None,
    ) -> PasswordHash:
        """
        Hash a password with explicit algorithm, version and parameters
        instead of the configured ones.

        When in doubt use hash_password(), which applies the configured
        parameters and generates the salt.

        Args:
            password: Plain text password
            salt: Raw salt bytes
            algorithm: Identifier to produce, or None for the hasher's default
            version: Algorithm version, or None for the default
            params: Parameters overriding the configured ones; keys left out
                keep their configured values

        Raises:
            UnsupportedAlgorithmException: If the algorithm or version cannot
                be produced by this hasher
            InvalidParamException: If a parameter is unknown or unusable
        """

    def hash_password_with_params(
        self, password: Password, salt: bytes, params: ParamList
    ) -> PasswordHash:
        """Hash with customized parameters and the default algorithm and version."""
        return self.hash_password_customized(password, salt, params=params)

    def hash_password(self, password: Password) -> PasswordHash:
        """Hash a password with a freshly generated random salt."""
        return self.hash_password_with_salt(password, generate_salt(self.salt_length))

    def supports(self, password_hash: PasswordHash) -> bool:
        """Check whether this hasher produced hashes with this identifier."""
        return password_hash.ident == self.ident

    def needs_rehash(self, password_hash: PasswordHash) -> bool:
        """Check whether a hash should be recomputed with current parameters."""
        return not self.supports(password_hash)
