"""
Random sources for new identifiers.

Both backends draw from the operating system CSPRNG and return the integer
form of a version 4 UUID: 122 random bits plus the fixed version and
RFC 4122 variant bits.
"""
import secrets
import uuid

from fuid.config import settings
from fuid.logging_config import setup_logging

logger = setup_logging()


def _uuid4_int() -> int:
    return uuid.uuid4().int


def _secrets_int() -> int:
    # UUID(version=4) overwrites the version nibble and variant bits
    return uuid.UUID(bytes=secrets.token_bytes(16), version=4).int


_BACKENDS = {
    "uuid4": _uuid4_int,
    "secrets": _secrets_int,
}


def random_uuid_int(source: str | None = None) -> int:
    """
    Generate a random version 4 UUID as a 128-bit integer.

    Args:
        source: Backend name ("uuid4" or "secrets"). Defaults to
            settings.RANDOM_SOURCE.

    Returns:
        Integer in the range [0, 2**128 - 1]

    Raises:
        ValueError: If the backend name is unknown
    """
    name = source or settings.RANDOM_SOURCE
    backend = _BACKENDS.get(name)
    if backend is None:
        raise ValueError(
            f"Unknown random source {name!r}, expected one of {sorted(_BACKENDS)}"
        )
    logger.debug(f"Drawing random identifier from {name} backend")
    return backend()
