"""PasswordHash DTOs for application layer using Pydantic."""

from typing import Annotated, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from phc_codec.domain.codec.fields import encode_field
from phc_codec.domain.entities.params import ParamList
from phc_codec.domain.entities.password_hash import PasswordHash

EncodingName = Literal["phc", "legacy"]

# Raw bytes travel as hex in JSON
HexBytes = Annotated[str, Field(pattern=r"^(?:[0-9a-fA-F]{2})*$")]


def _from_hex(value: Optional[str]) -> Optional[bytes]:
    return None if value is None else bytes.fromhex(value)


class ParamDTO(BaseModel):
    """A single algorithm parameter."""

    key: str
    value: str


class ParsePasswordHashDTO(BaseModel):
    """
    DTO for parsing a hash string.

    No length limit is applied here: the codec enforces its own cap and
    reports it as STRING_TOO_LONG.
    """

    hash: str
    encoding: Optional[EncodingName] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "hash": "$argon2id$v=19$m=65536,t=3,p=2$c29tZXNhbHQ$RdescudvJCsgt3ub+b+dWRWJTmaaJObG",
            }
        }
    )


class BuildPasswordHashDTO(BaseModel):
    """
    DTO for building a hash string from its fields.

    Validation of identifier, parameters and field lengths happens in the
    domain entity; this DTO only checks JSON shape and hex encoding.
    """

    ident: str
    version: Optional[int] = Field(default=None, ge=0)
    params: list[ParamDTO] = Field(default_factory=list)
    salt_hex: Optional[HexBytes] = None
    hash_hex: Optional[HexBytes] = None
    encoding: Optional[EncodingName] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "ident": "argon2id",
                "version": 19,
                "params": [
                    {"key": "m", "value": "65536"},
                    {"key": "t", "value": "3"},
                    {"key": "p", "value": "4"},
                ],
                "salt_hex": "736f6d6573616c74",
                "hash_hex": None,
                "encoding": "phc",
            }
        }
    )

    def to_entity(self, default_encoding: Optional[str] = None) -> PasswordHash:
        """
        Build the domain entity.

        Args:
            default_encoding: Alphabet used when the DTO names none; when
                both are None it is chosen from the identifier

        Raises:
            DomainException: If the fields violate a PasswordHash invariant
        """
        return PasswordHash(
            ident=self.ident,
            version=self.version,
            params=ParamList((param.key, param.value) for param in self.params),
            salt=_from_hex(self.salt_hex),
            hash=_from_hex(self.hash_hex),
            encoding=self.encoding or default_encoding,
        )


class PasswordHashDTO(BaseModel):
    """DTO for returning a parsed hash to the presentation layer."""

    ident: str
    algorithm: Optional[str] = None
    version: Optional[int] = None
    params: list[ParamDTO]
    salt: Optional[str] = None
    salt_hex: Optional[str] = None
    hash: Optional[str] = None
    hash_hex: Optional[str] = None
    encoding: EncodingName
    canonical: str

    @classmethod
    def from_entity(cls, password_hash: PasswordHash) -> "PasswordHashDTO":
        """
        Convert a domain entity to DTO.

        ``salt`` and ``hash`` carry the fields as written in the string (in
        the entity's alphabet); the ``*_hex`` variants carry the raw bytes.

        Args:
            password_hash: PasswordHash domain entity

        Returns:
            PasswordHashDTO instance
        """
        algorithm = password_hash.algorithm
        salt, output = password_hash.salt, password_hash.hash
        encoding = password_hash.encoding

        return cls(
            ident=password_hash.ident,
            algorithm=algorithm.family if algorithm is not None else None,
            version=password_hash.version,
            params=[ParamDTO(key=key, value=value) for key, value in password_hash.params],
            salt=encode_field(salt, encoding) if salt is not None else None,
            salt_hex=salt.hex() if salt is not None else None,
            hash=encode_field(output, encoding) if output is not None else None,
            hash_hex=output.hex() if output is not None else None,
            encoding=encoding.value,
            canonical=password_hash.serialize(),
        )


class SerializedHashDTO(BaseModel):
    """DTO carrying a canonical hash string."""

    hash: str


class HashPasswordDTO(BaseModel):
    """
    DTO for hashing a password.

    Leaving ``version`` and ``params`` unset hashes with the configured
    costs. Setting either one asks the hasher for a customized hash; params
    it leaves out keep their configured values.
    """

    password: Annotated[str, Field(min_length=1)]
    algorithm: Optional[str] = None
    version: Optional[int] = Field(default=None, ge=0)
    params: Optional[list[ParamDTO]] = None

    model_config = ConfigDict(
        json_schema_extra={"example": {"password": "securepassword123"}}
    )

    def customized(self) -> bool:
        return self.version is not None or self.params is not None

    def to_params(self) -> ParamList:
        return ParamList((param.key, param.value) for param in self.params or ())


class VerifyPasswordDTO(BaseModel):
    """DTO for verifying a password against a stored hash string."""

    password: str
    hash: str
    encoding: Optional[EncodingName] = None


class VerificationResultDTO(BaseModel):
    """Outcome of a verification. Never says why a hash was rejected."""

    valid: bool
    needs_rehash: bool = False
