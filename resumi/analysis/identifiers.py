import re
import secrets

from resumi.exceptions import InvalidInputError

UNIQUE_ID_BYTES = 8
_UNIQUE_ID_PATTERN = re.compile(r"[a-f0-9]{16}")


def generate_unique_id() -> str:
    """Return 16 lowercase hex characters (64 random bits)."""
    return secrets.token_hex(UNIQUE_ID_BYTES)


def is_valid_unique_id(value: object) -> bool:
    return isinstance(value, str) and _UNIQUE_ID_PATTERN.fullmatch(value) is not None


def require_valid_unique_id(value: object) -> str:
    """Raise InvalidInputError unless ``value`` is a well-formed identifier."""
    if not isinstance(value, str) or not is_valid_unique_id(value):
        raise InvalidInputError("Invalid analysis ID format")
    return value
