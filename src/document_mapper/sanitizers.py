"""Value transforms applied to a field after type coercion.

Every sanitizer has the signature ``(value, document) -> value``.
"""

import hashlib
import hmac
from typing import Any, Callable

Sanitizer = Callable[[Any, Any], Any]


def trim(value: str, document: Any = None) -> str:
    return value.strip()


def to_lowercase(value: str, document: Any = None) -> str:
    return value.lower()


def to_uppercase(value: str, document: Any = None) -> str:
    return value.upper()


def hash_value(algorithm: str, salt: str) -> Sanitizer:
    """Build a sanitizer replacing a string by its hex HMAC digest.

    Args:
        algorithm: hashlib algorithm name, e.g. ``"sha256"``
        salt: HMAC key

    Raises:
        ValueError: If the algorithm is not available
    """
    if algorithm not in hashlib.algorithms_available:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")

    def _hash(value: str, document: Any = None) -> str:
        return hmac.new(salt.encode(), str(value).encode(), algorithm).hexdigest()

    return _hash
