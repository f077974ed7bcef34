"""Choice of Base64 alphabet for a given hash string.

The choice is closed (PHC or LEGACY) and is made once per string, either by
the caller or by an exact lookup of the identifier in the algorithm
registry. The string's content is never inspected to guess an alphabet, so
a string cannot be read two different ways depending on a heuristic.
"""

from typing import Optional, Union

from phc_codec.domain.codec.alphabet import Encoding
from phc_codec.domain.entities.algorithm import Algorithm
from phc_codec.domain.exceptions import InvalidEncodingException


def select_encoding(
    ident: str, requested: Optional[Union[Encoding, str]] = None
) -> Encoding:
    """
    Resolve the alphabet for a hash string.

    Args:
        ident: Validated algorithm identifier
        requested: Explicit choice; wins whenever given. Accepts an Encoding
            or its value ("phc" / "legacy")

    Returns:
        The Encoding to decode and encode salt/output with

    Raises:
        InvalidEncodingException: If ``requested`` is not a known encoding
    """
    if requested is not None:
        try:
            return Encoding(requested)
        except ValueError:
            raise InvalidEncodingException(
                f"Unknown encoding {requested!r}: expected one of "
                f"{[member.value for member in Encoding]}"
            ) from None

    algorithm = Algorithm.from_ident(ident)
    if algorithm is None:
        return Encoding.PHC
    return algorithm.encoding
