"""PasswordHash -> canonical PHC string."""

from typing import TYPE_CHECKING

from phc_codec.domain.codec.fields import encode_field
from phc_codec.domain.constants import FIELD_SEPARATOR, VERSION_PREFIX
from phc_codec.domain.entities.params import serialize_params

if TYPE_CHECKING:
    from phc_codec.domain.entities.password_hash import PasswordHash


def serialize_password_hash(value: "PasswordHash") -> str:
    """
    Serialize a password hash to its canonical string.

    Absent optional fields are omitted together with their separator, so the
    output has exactly one form per value:

        $<ident>[$v=<version>][$<params>][$<salt>[$<hash>]]

    Args:
        value: Password hash to serialize

    Returns:
        Canonical hash string
    """
    parts = [value.ident]

    if value.version is not None:
        parts.append(f"{VERSION_PREFIX}{value.version}")

    if value.params:
        parts.append(serialize_params(value.params))

    if value.salt is not None:
        parts.append(encode_field(value.salt, value.encoding))
        if value.hash is not None:
            parts.append(encode_field(value.hash, value.encoding))

    return FIELD_SEPARATOR + FIELD_SEPARATOR.join(parts)
