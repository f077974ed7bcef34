"""Algorithm parameters: the ``<key>=<value>(,<key>=<value>)*`` segment.

Keys follow the identifier rule (``[A-Za-z0-9-]``, 1-32 characters). Values
use ``[A-Za-z0-9/+.-]`` and may be empty, up to 256 characters. At most 32
pairs are allowed, and keys are unique.

Order is part of a ParamList's identity: two lists holding the same pairs in
a different order are different values and serialize differently.
"""

import re
from collections.abc import Iterable, Iterator
from typing import Optional, Union

from phc_codec.domain.codec.alphabet import Encoding, b64_encode
from phc_codec.domain.constants import (
    MAX_PARAM_KEY_LENGTH,
    MAX_PARAM_VALUE_LENGTH,
    MAX_PARAMS,
    MAX_VERSION,
    PAIR_DELIMITER,
    PARAMS_DELIMITER,
)
from phc_codec.domain.entities.ident import is_valid_ident
from phc_codec.domain.exceptions import (
    DuplicateParamKeyException,
    InvalidParamException,
    TooManyParamsException,
)

VALUE_CHARSET = re.compile(r"[A-Za-z0-9/+.-]*")
DECIMAL = re.compile(r"0|[1-9][0-9]*")

Pair = tuple[str, str]


def is_decimal(value: str) -> bool:
    """
    Check whether a value is a canonical PHC decimal.

    Decimals are non-empty runs of ASCII digits without a leading zero
    (``0`` itself is allowed). Negative values are not supported.
    """
    return DECIMAL.fullmatch(value) is not None


def _validate_key(key: str) -> str:
    if not is_valid_ident(key, MAX_PARAM_KEY_LENGTH):
        raise InvalidParamException(
            f"Invalid parameter name {key!r}: expected 1-{MAX_PARAM_KEY_LENGTH} "
            "characters from [A-Za-z0-9-]"
        )
    return key


def _validate_value(key: str, value: Union[str, int]) -> str:
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise InvalidParamException(
                f"Invalid value for parameter {key!r}: negative decimals are not supported"
            )
        value = str(value)

    if (
        not isinstance(value, str)
        or len(value) > MAX_PARAM_VALUE_LENGTH
        or VALUE_CHARSET.fullmatch(value) is None
    ):
        raise InvalidParamException(
            f"Invalid value for parameter {key!r}: expected 0-{MAX_PARAM_VALUE_LENGTH} "
            "characters from [A-Za-z0-9/+.-]"
        )
    return value


class ParamList:
    """
    Immutable, ordered collection of unique parameter name/value pairs.

    Builder methods never mutate: ``add`` and friends return a new ParamList
    with the pair appended.

    Usage:
        params = ParamList().add_decimal("m", 65536).add_decimal("t", 3)
        str(params)               # "m=65536,t=3"
        params.get_decimal("m")   # 65536
    """

    __slots__ = ("_pairs",)

    def __init__(self, pairs: Iterable[tuple[str, Union[str, int]]] = ()):
        """
        Build a parameter list from name/value pairs.

        Raises:
            InvalidParamException: If a name or value is malformed
            DuplicateParamKeyException: If a name appears twice
            TooManyParamsException: If more than 32 pairs are given
        """
        validated: list[Pair] = []
        seen: set[str] = set()

        for key, value in pairs:
            if len(validated) == MAX_PARAMS:
                raise TooManyParamsException(
                    f"Too many parameters: at most {MAX_PARAMS} are allowed"
                )

            key = _validate_key(key)
            if key in seen:
                raise DuplicateParamKeyException(
                    f"Duplicate parameter name {key!r}"
                )

            validated.append((key, _validate_value(key, value)))
            seen.add(key)

        self._pairs: tuple[Pair, ...] = tuple(validated)

    # Builders

    def add(self, key: str, value: Union[str, int]) -> "ParamList":
        """Return a new ParamList with ``key=value`` appended."""
        return ParamList(self._pairs + ((key, value),))

    def add_decimal(self, key: str, value: int) -> "ParamList":
        """Return a new ParamList with a decimal value appended."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidParamException(
                f"Invalid value for parameter {key!r}: expected an integer"
            )
        return self.add(key, value)

    def add_b64_bytes(self, key: str, data: bytes) -> "ParamList":
        """Return a new ParamList with ``data`` appended as PHC Base64 text."""
        return self.add(key, b64_encode(data, Encoding.PHC))

    # Lookups

    def get(self, key: str) -> Optional[str]:
        for name, value in self._pairs:
            if name == key:
                return value
        return None

    get_str = get

    def get_decimal(self, key: str) -> Optional[int]:
        """
        Get a parameter as an integer.

        Returns:
            The value, or None if the key is missing or the value is not a
            canonical decimal
        """
        value = self.get(key)
        if value is None or not is_decimal(value):
            return None
        return int(value)

    def keys(self) -> list[str]:
        return [name for name, _ in self._pairs]

    def pairs(self) -> tuple[Pair, ...]:
        return self._pairs

    def looks_like_version(self) -> bool:
        """
        Check whether this list would serialize as a lone ``v=...`` segment.

        Directly after the identifier such a segment is read back as a
        version, not as parameters.
        """
        return len(self._pairs) == 1 and self._pairs[0][0] == "v"

    # Container protocol

    def __getitem__(self, key: str) -> str:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self._pairs)

    def __iter__(self) -> Iterator[Pair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParamList):
            return self._pairs == other._pairs
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._pairs)

    def __str__(self) -> str:
        return serialize_params(self)

    def __repr__(self) -> str:
        return f"ParamList({list(self._pairs)!r})"


def parse_params(text: str) -> ParamList:
    """
    Parse a ``key=value(,key=value)*`` segment.

    The segment count is checked before any pair is validated, so an
    oversized input is rejected without scanning all of it.

    Args:
        text: Parameter segment, without the surrounding '$' separators

    Returns:
        ParamList in the order the pairs appear

    Raises:
        TooManyParamsException: If there are more than 32 pairs
        InvalidParamException: If a pair lacks '=' or is malformed
        DuplicateParamKeyException: If a name appears twice
    """
    if not text:
        return ParamList()

    segments = text.split(PARAMS_DELIMITER, MAX_PARAMS)
    if len(segments) > MAX_PARAMS:
        raise TooManyParamsException(
            f"Too many parameters: at most {MAX_PARAMS} are allowed"
        )

    pairs = []
    for segment in segments:
        key, delimiter, value = segment.partition(PAIR_DELIMITER)
        if not delimiter:
            raise InvalidParamException(
                f"Invalid parameter {segment!r}: expected <name>=<value>"
            )
        pairs.append((key, value))

    return ParamList(pairs)


def serialize_params(params: ParamList) -> str:
    """Join pairs with '=' and ',' in insertion order."""
    return PARAMS_DELIMITER.join(
        f"{key}{PAIR_DELIMITER}{value}" for key, value in params
    )


def parse_decimal(value: str, maximum: int = MAX_VERSION) -> Optional[int]:
    """Parse a canonical decimal no greater than ``maximum``, or return None."""
    if not is_decimal(value):
        return None
    number = int(value)
    return number if number <= maximum else None
