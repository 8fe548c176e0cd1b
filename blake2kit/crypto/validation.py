"""Facade-level argument checks.

These enforce the public policy (keys of 16..64 bytes, digests of 1..64 bytes,
16-byte salt and personalization strings). The parameter-block builder applies
its own, narrower wire-format checks afterwards.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from blake2kit.config import (
    BYTES_MAX,
    BYTES_MIN,
    KEY_BYTES_MAX,
    KEY_BYTES_MIN,
    PERSONAL_BYTES,
    SALT_BYTES,
)

from .errors import (
    ArgumentTypeError,
    KeyLengthError,
    MissingArgumentError,
    OutputSizeError,
    PersonalizationLengthError,
    SaltLengthError,
)

logger = logging.getLogger(__name__)

BytesLike = Union[str, bytes, bytearray, memoryview]


def to_bytes(value: BytesLike) -> bytes:
    """Return ``value`` as bytes, UTF-8 encoding text.

    Raises:
        ArgumentTypeError: If ``value`` is neither text nor a bytes-like buffer.
    """

    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise ArgumentTypeError(f"expected str or bytes-like, got {type(value).__name__}")


def require_argument(value: Optional[BytesLike], name: str) -> bytes:
    """Return ``value`` as bytes or fail with :class:`MissingArgumentError`."""

    if value is None:
        logger.debug("Missing required argument: %s", name, extra={"argument": name})
        raise MissingArgumentError(f"{name} cannot be None")
    return to_bytes(value)


def validate_message(message: Optional[BytesLike]) -> bytes:
    return require_argument(message, "message")


def validate_key(key: Optional[BytesLike]) -> bytes:
    """Check an optional key against the facade's key policy.

    Args:
        key: Key material, or ``None`` for an unkeyed hash.

    Returns:
        The key as bytes; ``b""`` when absent.

    Raises:
        KeyLengthError: If a key is present but not 16..64 bytes long.
    """

    if key is None:
        return b""
    key = to_bytes(key)
    if not (KEY_BYTES_MIN <= len(key) <= KEY_BYTES_MAX):
        logger.debug("Rejected key of %d bytes", len(key), extra={"key_length": len(key)})
        raise KeyLengthError(f"key must be between {KEY_BYTES_MIN} and {KEY_BYTES_MAX} bytes in length")
    return key


def validate_output_size(size: int) -> int:
    """Check a requested digest size against the facade bound (1..64)."""

    if isinstance(size, bool) or not isinstance(size, int) or not (BYTES_MIN <= size <= BYTES_MAX):
        logger.debug("Rejected output size %r", size, extra={"output_size": size})
        raise OutputSizeError(f"bytes must be between {BYTES_MIN} and {BYTES_MAX} bytes in length")
    return size


def validate_salt(salt: Optional[BytesLike]) -> bytes:
    """Require a salt of exactly 16 bytes.

    Only the first 8 bytes are packed into the parameter block.
    """

    salt = require_argument(salt, "salt")
    if len(salt) != SALT_BYTES:
        logger.debug("Rejected salt of %d bytes", len(salt), extra={"salt_length": len(salt)})
        raise SaltLengthError(f"salt must be {SALT_BYTES} bytes in length")
    return salt


def validate_personalization(personal: Optional[BytesLike]) -> bytes:
    """Require a personalization string of exactly 16 bytes.

    Only the first 8 bytes are packed into the parameter block.
    """

    personal = require_argument(personal, "personal")
    if len(personal) != PERSONAL_BYTES:
        logger.debug(
            "Rejected personalization of %d bytes",
            len(personal),
            extra={"personal_length": len(personal)},
        )
        raise PersonalizationLengthError(f"personal bytes must be {PERSONAL_BYTES} bytes in length")
    return personal
