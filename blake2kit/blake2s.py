"""Public BLAKE2s facade.

Arguments are checked against the facade policy first (keys of 16..64 bytes,
digests of 1..64 bytes, 16-byte salt and personalization). The parameter block
builder then applies the BLAKE2s wire bounds, which are narrower: digests above
32 bytes raise :class:`~blake2kit.crypto.errors.ParameterRangeError` and keys
above 32 bytes raise :class:`~blake2kit.crypto.errors.KeyTooLongError`.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import OUT_BYTES, WIRE_PERSONAL_BYTES, WIRE_SALT_BYTES, HashConfig
from .crypto.hashes import compute_hash
from .crypto.validation import (
    BytesLike,
    require_argument,
    to_bytes,
    validate_key,
    validate_message,
    validate_output_size,
    validate_personalization,
    validate_salt,
)

logger = logging.getLogger(__name__)


def hash(message: Optional[BytesLike], key: Optional[BytesLike], output_bytes: int) -> bytes:
    """Hash a message, with an optional key.

    Args:
        message: Message to hash; ``None`` hashes the empty message. Text is
            UTF-8 encoded.
        key: ``None``, or a key of 16..64 bytes.
        output_bytes: Digest size in bytes (1..64).

    Returns:
        Digest bytes.

    Raises:
        KeyLengthError: If the key is not 16..64 bytes, or
            KeyTooLongError if it exceeds the 32 bytes the block can encode.
        OutputSizeError: If ``output_bytes`` is not 1..64.
        ParameterRangeError: If ``output_bytes`` exceeds 32.
        ArgumentTypeError: If an argument is not text or bytes-like.
    """

    key = validate_key(key)
    output_bytes = validate_output_size(output_bytes)
    data = b"" if message is None else to_bytes(message)

    config = HashConfig(output_size=output_bytes, key=key)
    return compute_hash(data, config=config)


def hash_salt_personal(
    message: Optional[BytesLike],
    key: Optional[BytesLike],
    salt: Optional[BytesLike],
    personal: Optional[BytesLike],
    output_bytes: int = OUT_BYTES,
) -> bytes:
    """Hash a message with a key, salt and personalization string.

    Only the first 8 bytes of ``salt`` and ``personal`` are encoded in the
    parameter block; the remaining 8 bytes of each are accepted but do not
    affect the digest.

    Raises:
        MissingArgumentError: If ``message``, ``salt`` or ``personal`` is ``None``.
        KeyLengthError: If the key is not 16..64 bytes.
        SaltLengthError: If ``salt`` is not 16 bytes.
        PersonalizationLengthError: If ``personal`` is not 16 bytes.
        OutputSizeError: If ``output_bytes`` is not 1..64.
        ParameterRangeError: If ``output_bytes`` exceeds 32.
        ArgumentTypeError: If an argument is not text or bytes-like.
    """

    data = validate_message(message)
    salt = require_argument(salt, "salt")
    personal = require_argument(personal, "personal")
    key = validate_key(key)
    salt = validate_salt(salt)
    personal = validate_personalization(personal)
    output_bytes = validate_output_size(output_bytes)

    config = HashConfig(
        output_size=output_bytes,
        key=key,
        salt=salt[:WIRE_SALT_BYTES],
        personalization=personal[:WIRE_PERSONAL_BYTES],
    )
    logger.debug(
        "Hashing %d bytes with salt and personalization",
        len(data),
        extra={"message_length": len(data), "output_size": output_bytes},
    )
    return compute_hash(data, config=config)
