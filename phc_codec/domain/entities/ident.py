"""Algorithm identifier validation.

An identifier is the ``<id>`` token right after the leading ``$``: 1 to 32
characters drawn from ``[A-Za-z0-9-]``. Hyphens are accepted in every
position, including first and last; the same rule applies to parsed strings
and to programmatically built hashes. Parameter keys follow the same
charset and length rule.
"""

import re

from phc_codec.domain.constants import MAX_IDENT_LENGTH
from phc_codec.domain.exceptions import InvalidIdentException

IDENT_CHARSET = re.compile(r"[A-Za-z0-9-]+")


def is_valid_ident(text: str, max_length: int = MAX_IDENT_LENGTH) -> bool:
    """Check a token against the identifier charset and length bounds."""
    return (
        isinstance(text, str)
        and 1 <= len(text) <= max_length
        and IDENT_CHARSET.fullmatch(text) is not None
    )


def validate_ident(text: str) -> str:
    """
    Validate an algorithm identifier.

    Args:
        text: Candidate identifier

    Returns:
        The identifier, unchanged

    Raises:
        InvalidIdentException: If the identifier is empty, longer than
            32 characters, or contains a character outside [A-Za-z0-9-]
    """
    if not is_valid_ident(text):
        raise InvalidIdentException(
            f"Invalid algorithm identifier {text!r}: expected 1-{MAX_IDENT_LENGTH} "
            "characters from [A-Za-z0-9-]"
        )
    return text
