"""Format-level bounds of the PHC string codec.

These limits are part of the format contract: every string accepted by the
parser, and every value accepted by the PasswordHash constructor, stays
within them. Individual algorithms may impose tighter bounds of their own.
"""

# Separator between the top-level fields of a hash string
FIELD_SEPARATOR = "$"

# Separator between parameters, and between a parameter key and its value
PARAMS_DELIMITER = ","
PAIR_DELIMITER = "="

# Prefix of the legacy version segment ("v=19")
VERSION_PREFIX = "v="

# Whole-string cap in UTF-8 bytes, checked before any field-level parsing
MAX_STRING_LENGTH = 512

MAX_IDENT_LENGTH = 32
MAX_PARAM_KEY_LENGTH = 32
MAX_PARAM_VALUE_LENGTH = 256
MAX_PARAMS = 32

# Decoded byte lengths
MAX_SALT_LENGTH = 64
MAX_HASH_LENGTH = 64

MAX_VERSION = 2**32 - 1

# 16 bytes encode as 22 characters, the PHC recommendation for random salts
RECOMMENDED_SALT_LENGTH = 16
